"""Journal store: entry CRUD, streak orchestration and writing stats."""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import joinedload

from inkwell.core.errors import NotFoundError, ValidationError
from inkwell.core.events.event_service import log_event
from inkwell.core.users import services as user_directory
from inkwell.core.utils import clock
from inkwell.domains.journal.events import (
    JOURNAL_ENTRY_CREATED,
    JOURNAL_ENTRY_DELETED,
    JOURNAL_ENTRY_UPDATED,
)
from inkwell.domains.journal.models import JournalEntry
from inkwell.domains.prompts.events import PROMPTS_PROMPT_USED
from inkwell.domains.prompts.services import prompt_service
from inkwell.extensions import db

logger = logging.getLogger(__name__)

UNKNOWN_MOOD = "unknown"


def count_words(content: Optional[str]) -> int:
    """Number of maximal non-whitespace runs; blank content counts as 0."""
    return len((content or "").split())


def create_entry(
    user_id: str,
    content: str,
    prompt_id: str,
    mood: Optional[str] = None,
) -> JournalEntry:
    """Write today's entry against a prompt and advance the user's streak.

    User and prompt are resolved before anything is written. Marking the
    prompt used, saving the entry and updating the streak share a single
    transaction: if any step fails none of them persist.
    """
    user = user_directory.find_by_id(user_id)
    prompt = prompt_service.get_prompt(prompt_id)
    body = content if content is not None else ""
    prompt_was_used = prompt.is_used

    try:
        prompt_service.mark_as_used(prompt.id, commit=False)
        entry = JournalEntry(
            user_id=user.id,
            prompt_id=prompt.id,
            content=body,
            entry_date=clock.today(),
            word_count=count_words(body),
            mood=_normalize_mood(mood),
        )
        db.session.add(entry)
        db.session.flush()
        user = user_directory.update_streak(user.id, commit=False)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info("entry %s created for user %s (streak %s)", entry.id, user.id, user.streak)
    if not prompt_was_used:
        log_event(PROMPTS_PROMPT_USED, {"prompt_id": prompt.id}, user_id=user.id)
    log_event(
        JOURNAL_ENTRY_CREATED,
        {
            "entry_id": entry.id,
            "user_id": user.id,
            "prompt_id": prompt.id,
            "entry_date": entry.entry_date.isoformat(),
            "word_count": entry.word_count,
            "mood": entry.mood,
            "streak": user.streak,
        },
        user_id=user.id,
    )
    return entry


def find_by_user(user_id: str, on_date: Optional[date] = None) -> List[JournalEntry]:
    query = JournalEntry.query.options(joinedload(JournalEntry.prompt)).filter_by(user_id=user_id)
    if on_date:
        query = query.filter(JournalEntry.entry_date == on_date)
    return query.order_by(JournalEntry.entry_date.desc(), JournalEntry.created_at.desc()).all()


def find_by_id(entry_id: str, user_id: Optional[str] = None) -> JournalEntry:
    """Entry with its prompt and user loaded.

    When ``user_id`` is given, entries owned by someone else are reported as
    missing.
    """
    query = JournalEntry.query.options(
        joinedload(JournalEntry.prompt),
        joinedload(JournalEntry.user),
    ).filter_by(id=entry_id)
    if user_id is not None:
        query = query.filter_by(user_id=user_id)
    entry = query.first()
    if not entry:
        raise NotFoundError("Entry not found")
    return entry


def update_entry(
    entry_id: str,
    content: str,
    mood: Optional[str] = None,
    user_id: Optional[str] = None,
) -> JournalEntry:
    entry = find_by_id(entry_id, user_id=user_id)
    body = content if content is not None else ""
    entry.content = body
    entry.word_count = count_words(body)
    # A missing or blank mood keeps the stored one.
    mood_norm = _normalize_mood(mood)
    if mood_norm:
        entry.mood = mood_norm
    db.session.commit()
    logger.info("entry %s updated", entry.id)
    log_event(
        JOURNAL_ENTRY_UPDATED,
        {
            "entry_id": entry.id,
            "user_id": entry.user_id,
            "word_count": entry.word_count,
            "mood": entry.mood,
        },
        user_id=entry.user_id,
    )
    return entry


def delete_entry(entry_id: str, user_id: Optional[str] = None) -> None:
    entry = find_by_id(entry_id, user_id=user_id)
    owner_id = entry.user_id
    db.session.delete(entry)
    db.session.commit()
    logger.info("entry %s deleted", entry_id)
    log_event(JOURNAL_ENTRY_DELETED, {"entry_id": entry_id, "user_id": owner_id}, user_id=owner_id)


def get_stats(user_id: str) -> dict:
    """Entry count, word totals and a mood histogram for the user."""
    rows = (
        db.session.query(
            JournalEntry.mood,
            func.count(JournalEntry.id),
            func.coalesce(func.sum(JournalEntry.word_count), 0),
        )
        .filter(JournalEntry.user_id == user_id)
        .group_by(JournalEntry.mood)
        .all()
    )
    total_entries = 0
    total_words = 0
    entries_by_mood: Dict[str, int] = {}
    for mood, count, words in rows:
        label = mood or UNKNOWN_MOOD
        entries_by_mood[label] = entries_by_mood.get(label, 0) + int(count)
        total_entries += int(count)
        total_words += int(words or 0)
    return {
        "total_entries": total_entries,
        "total_words": total_words,
        "average_words_per_entry": (total_words / total_entries) if total_entries else 0,
        "entries_by_mood": entries_by_mood,
    }


def list_entry_dates(user_id: str, year: int, month: int) -> List[date]:
    """Days of the given month holding at least one entry, ascending."""
    try:
        start = date(year, month, 1)
    except ValueError:
        raise ValidationError("Invalid year or month")
    query = db.session.query(JournalEntry.entry_date).filter(
        JournalEntry.user_id == user_id,
        JournalEntry.entry_date >= start,
    )
    # December of the last representable year has no following month.
    if month < 12:
        query = query.filter(JournalEntry.entry_date < date(year, month + 1, 1))
    elif year < date.max.year:
        query = query.filter(JournalEntry.entry_date < date(year + 1, 1, 1))
    rows = (
        query.distinct()
        .order_by(JournalEntry.entry_date.asc())
        .all()
    )
    return [row[0] for row in rows]


def _normalize_mood(mood: Optional[str]) -> Optional[str]:
    return (mood or "").strip() or None
