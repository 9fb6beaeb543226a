"""User directory: registration, lookups, streaks and per-user totals."""

from __future__ import annotations

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from inkwell.core.auth.password import hash_password
from inkwell.core.errors import ConflictError, NotFoundError
from inkwell.core.events.event_service import log_event
from inkwell.core.users.events import USER_REGISTERED
from inkwell.core.users.models import User
from inkwell.core.utils import clock
from inkwell.extensions import db

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def register(email: str, raw_password: str, name: str) -> User:
    """Create a user with a hashed password and an empty streak.

    Raises ConflictError when the email is already registered.
    """
    normalized = _normalize_email(email)
    existing = User.query.filter(func.lower(User.email) == normalized).first()
    if existing:
        raise ConflictError("Email already exists")

    user = User(
        email=normalized,
        password_hash=hash_password(raw_password),
        name=(name or "").strip(),
        streak=0,
        last_entry_date=None,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration for the same email.
        db.session.rollback()
        raise ConflictError("Email already exists")
    logger.info("registered user %s", user.id)
    log_event(
        USER_REGISTERED,
        {"user_id": user.id, "email": user.email, "name": user.name},
        user_id=user.id,
    )
    return user


def find_by_email(email: str) -> User:
    user = User.query.filter(func.lower(User.email) == _normalize_email(email)).first()
    if not user:
        raise NotFoundError("User not found")
    return user


def find_by_id(user_id: str) -> User:
    user = db.session.get(User, user_id) if user_id else None
    if not user:
        raise NotFoundError("User not found")
    return user


def update_streak(user_id: str, *, commit: bool = True) -> User:
    """Advance, keep or reset the user's daily streak for an entry written today.

    Gap (in calendar days) between today and the stored last entry date:
    none recorded -> 1; 0 -> unchanged; 1 -> +1; more than 1 -> 1; negative
    (last entry dated in the future) -> unchanged. ``last_entry_date`` is
    set to today in every case.

    The user row is selected FOR UPDATE so two entry creations for the same
    user cannot interleave their read and write. Pass ``commit=False`` when
    an enclosing unit of work owns the transaction.
    """
    user = (
        db.session.query(User)
        .filter_by(id=user_id)
        .with_for_update()
        .populate_existing()
        .first()
    )
    if not user:
        raise NotFoundError("User not found")

    today = clock.today()
    last = clock.to_day(user.last_entry_date)
    previous = user.streak or 0

    if last is None:
        user.streak = 1
    else:
        gap_days = (today - last).days
        if gap_days == 1:
            user.streak = previous + 1
        elif gap_days > 1:
            user.streak = 1
        elif gap_days < 0:
            logger.warning(
                "user %s has last_entry_date %s after today %s; streak left at %s",
                user.id,
                last.isoformat(),
                today.isoformat(),
                previous,
            )

    user.last_entry_date = today
    if commit:
        db.session.commit()
    else:
        db.session.flush()
    logger.debug("streak for user %s: %s -> %s", user.id, previous, user.streak)
    return user


def get_stats(user_id: str) -> dict:
    """Streak plus entry and word totals for the user."""
    from inkwell.domains.journal.models import JournalEntry  # local import to avoid cycle

    user = find_by_id(user_id)
    total_entries, total_words = (
        db.session.query(
            func.count(JournalEntry.id),
            func.coalesce(func.sum(JournalEntry.word_count), 0),
        )
        .filter(JournalEntry.user_id == user.id)
        .one()
    )
    return {
        "streak": user.streak,
        "total_entries": int(total_entries or 0),
        "total_words": int(total_words or 0),
    }
