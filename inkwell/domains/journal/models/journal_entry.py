"""Personal journal entry."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.core.users.models import new_id
from inkwell.extensions import db


class JournalEntry(db.Model):
    __tablename__ = "journal_entry"
    __table_args__ = (
        db.Index("ix_journal_entry_user_entry_date", "user_id", "entry_date"),
        db.Index("ix_journal_entry_user_mood", "user_id", "mood"),
    )

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(db.ForeignKey("user.id"), index=True, nullable=False)
    prompt_id: Mapped[str | None] = mapped_column(db.ForeignKey("prompt.id"), index=True)
    content: Mapped[str] = mapped_column(db.Text, nullable=False, default="")
    entry_date: Mapped[date] = mapped_column(nullable=False)
    word_count: Mapped[int] = mapped_column(default=0, nullable=False)
    mood: Mapped[str | None] = mapped_column(db.String(64))
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="entries")
    prompt = relationship("Prompt", back_populates="entries")
