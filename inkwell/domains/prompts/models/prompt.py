"""Writing prompt."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.core.users.models import new_id
from inkwell.extensions import db


class Prompt(db.Model):
    __tablename__ = "prompt"
    __table_args__ = (
        db.Index("ix_prompt_is_used_scheduled_date", "is_used", "scheduled_date"),
    )

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    text: Mapped[str] = mapped_column(db.Text, nullable=False)
    category: Mapped[str | None] = mapped_column(db.String(64))
    scheduled_date: Mapped[date | None] = mapped_column(db.Date)
    # Only ever flips False -> True (see prompt_service.mark_as_used).
    is_used: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    entries: Mapped[list["JournalEntry"]] = relationship(  # noqa: F821
        "JournalEntry", back_populates="prompt"
    )
