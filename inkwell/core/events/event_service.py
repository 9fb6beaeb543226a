"""Event persistence and dispatch."""

from __future__ import annotations

import logging
from typing import Optional

from inkwell.core.events.event_bus import event_bus
from inkwell.core.events.event_models import EventRecord
from inkwell.extensions import db

logger = logging.getLogger(__name__)


def log_event(event_type: str, payload: dict, user_id: Optional[str] = None) -> EventRecord:
    """Persist an event and publish to subscribers.

    Call after the domain change has been committed so subscribers never see
    an event for a rolled back write.
    """
    record = EventRecord(event_type=event_type, payload=payload, user_id=user_id)
    db.session.add(record)
    db.session.commit()
    logger.debug("event %s recorded for user %s", event_type, user_id)
    event_bus.publish(record)
    return record
