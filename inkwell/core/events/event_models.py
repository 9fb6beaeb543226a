"""Persistent event models."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from inkwell.extensions import db


class EventRecord(db.Model):
    __tablename__ = "event_record"
    __table_args__ = (
        db.Index("ix_event_record_user_created_at", "user_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    event_type: Mapped[str] = mapped_column(db.String(128), index=True, nullable=False)
    payload: Mapped[dict] = mapped_column(db.JSON, nullable=False, default=dict)
    # Plain column, not a FK: events outlive the user rows they mention.
    user_id: Mapped[str | None] = mapped_column(db.String(36), index=True)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, index=True)
