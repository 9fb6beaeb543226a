"""Journal domain event catalog."""

from __future__ import annotations

JOURNAL_ENTRY_CREATED = "journal.entry.created"
JOURNAL_ENTRY_UPDATED = "journal.entry.updated"
JOURNAL_ENTRY_DELETED = "journal.entry.deleted"

EVENT_CATALOG = {
    JOURNAL_ENTRY_CREATED: {
        "version": "v1",
        "payload": {
            "entry_id": "str",
            "user_id": "str",
            "prompt_id": "str",
            "entry_date": "date",
            "word_count": "int",
            "mood": "str?",
            "streak": "int",
        },
    },
    JOURNAL_ENTRY_UPDATED: {
        "version": "v1",
        "payload": {
            "entry_id": "str",
            "user_id": "str",
            "word_count": "int",
            "mood": "str?",
        },
    },
    JOURNAL_ENTRY_DELETED: {
        "version": "v1",
        "payload": {
            "entry_id": "str",
            "user_id": "str",
        },
    },
}

__all__ = [
    "EVENT_CATALOG",
    "JOURNAL_ENTRY_CREATED",
    "JOURNAL_ENTRY_UPDATED",
    "JOURNAL_ENTRY_DELETED",
]
