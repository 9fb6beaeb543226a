"""User model."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.extensions import db


def new_id() -> str:
    """Opaque, globally unique record id."""
    return str(uuid.uuid4())


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)


class User(db.Model, TimestampMixin):
    __tablename__ = "user"

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(db.String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(db.String(255), nullable=False)
    name: Mapped[str] = mapped_column(db.String(255), nullable=False, default="")
    streak: Mapped[int] = mapped_column(default=0, nullable=False)
    last_entry_date: Mapped[date | None] = mapped_column(db.Date)

    entries: Mapped[list["JournalEntry"]] = relationship(  # noqa: F821
        "JournalEntry", back_populates="user", cascade="all, delete-orphan"
    )
