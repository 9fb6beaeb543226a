"""Journal mappers for DTO responses."""

from __future__ import annotations

from inkwell.domains.journal.models import JournalEntry
from inkwell.domains.journal.schemas.journal_schemas import JournalEntryResponse
from inkwell.domains.prompts.mappers import map_prompt


def map_entry(entry: JournalEntry) -> dict:
    return JournalEntryResponse(
        id=entry.id,
        content=entry.content,
        entry_date=entry.entry_date,
        word_count=entry.word_count,
        mood=entry.mood,
        user_id=entry.user_id,
        prompt=map_prompt(entry.prompt) if entry.prompt is not None else None,
        created_at=entry.created_at.isoformat() if entry.created_at else "",
        updated_at=entry.updated_at.isoformat() if entry.updated_at else "",
    ).model_dump(mode="json")
