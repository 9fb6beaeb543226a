"""Prompt mappers for DTO responses."""

from __future__ import annotations

from inkwell.domains.prompts.models import Prompt
from inkwell.domains.prompts.schemas.prompt_schemas import PromptResponse


def map_prompt(prompt: Prompt) -> dict:
    return PromptResponse(
        id=prompt.id,
        text=prompt.text,
        category=prompt.category,
        scheduled_date=prompt.scheduled_date,
        is_used=prompt.is_used,
        created_at=prompt.created_at.isoformat() if prompt.created_at else "",
    ).model_dump(mode="json")
