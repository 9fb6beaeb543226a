"""Prompt catalog: creation, daily selection and used-state transitions."""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import List, Optional

from flask import current_app

from inkwell.core.errors import NotFoundError, ValidationError
from inkwell.core.events.event_service import log_event
from inkwell.core.utils import clock
from inkwell.domains.prompts.events import PROMPTS_PROMPT_CREATED, PROMPTS_PROMPT_USED
from inkwell.domains.prompts.models import Prompt
from inkwell.extensions import db

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 10


def create_prompt(
    text: str,
    category: Optional[str] = None,
    scheduled_date: Optional[date] = None,
) -> Prompt:
    text_norm = (text or "").strip()
    if not text_norm:
        raise ValidationError("Prompt text is required")
    prompt = Prompt(
        text=text_norm,
        category=(category or "").strip() or None,
        scheduled_date=scheduled_date,
        is_used=False,
    )
    db.session.add(prompt)
    db.session.commit()
    log_event(
        PROMPTS_PROMPT_CREATED,
        {
            "prompt_id": prompt.id,
            "category": prompt.category,
            "scheduled_date": prompt.scheduled_date.isoformat() if prompt.scheduled_date else None,
        },
    )
    return prompt


def get_prompt(prompt_id: str) -> Prompt:
    prompt = db.session.get(Prompt, prompt_id) if prompt_id else None
    if not prompt:
        raise NotFoundError("Prompt not found")
    return prompt


def get_today_prompt(rng: Optional[random.Random] = None) -> Prompt:
    """Unused prompt scheduled for today, else a random unused one.

    Selection does not mark the prompt used; that happens when an entry is
    written against it.
    """
    scheduled = (
        Prompt.query.filter_by(scheduled_date=clock.today(), is_used=False)
        .order_by(Prompt.created_at.asc(), Prompt.id.asc())
        .first()
    )
    if scheduled:
        return scheduled
    return get_random_prompt(rng)


def get_random_prompt(rng: Optional[random.Random] = None) -> Prompt:
    """Uniformly random prompt among those not yet used.

    Raises NotFoundError once the pool is exhausted; callers replenish it
    by creating prompts (see the ``seed-prompts`` CLI command).
    """
    query = Prompt.query.filter_by(is_used=False)
    available = query.count()
    prompt = None
    if available:
        offset = (rng or random).randrange(available)
        prompt = query.order_by(Prompt.created_at.asc(), Prompt.id.asc()).offset(offset).first()
    if not prompt:
        logger.warning("no unused prompts left")
        raise NotFoundError("No available prompts found")
    return prompt


def mark_as_used(prompt_id: str, *, commit: bool = True) -> Prompt:
    """Flag the prompt as used. Re-marking a used prompt is not an error."""
    prompt = get_prompt(prompt_id)
    was_used = prompt.is_used
    prompt.is_used = True
    if not commit:
        db.session.flush()
        return prompt
    db.session.commit()
    if not was_used:
        log_event(PROMPTS_PROMPT_USED, {"prompt_id": prompt.id})
    return prompt


def get_prompt_history(limit: Optional[int] = None) -> List[Prompt]:
    """Used prompts, latest scheduled date first."""
    if limit is None:
        limit = current_app.config.get("PROMPT_HISTORY_LIMIT", DEFAULT_HISTORY_LIMIT)
    if limit < 1:
        raise ValidationError("limit must be at least 1")
    return (
        Prompt.query.filter_by(is_used=True)
        .order_by(
            Prompt.scheduled_date.desc().nullslast(),
            Prompt.updated_at.desc(),
        )
        .limit(limit)
        .all()
    )
