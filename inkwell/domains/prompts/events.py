"""Prompt domain event catalog."""

from __future__ import annotations

PROMPTS_PROMPT_CREATED = "prompts.prompt.created"
PROMPTS_PROMPT_USED = "prompts.prompt.used"

EVENT_CATALOG = {
    PROMPTS_PROMPT_CREATED: {
        "version": "v1",
        "payload": {
            "prompt_id": "str",
            "category": "str?",
            "scheduled_date": "date?",
        },
    },
    PROMPTS_PROMPT_USED: {
        "version": "v1",
        "payload": {
            "prompt_id": "str",
        },
    },
}

__all__ = [
    "EVENT_CATALOG",
    "PROMPTS_PROMPT_CREATED",
    "PROMPTS_PROMPT_USED",
]
