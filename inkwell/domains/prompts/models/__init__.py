from inkwell.domains.prompts.models.prompt import Prompt

__all__ = ["Prompt"]
