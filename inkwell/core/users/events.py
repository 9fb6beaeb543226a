"""User event catalog."""

from __future__ import annotations

USER_REGISTERED = "users.user.registered"

EVENT_CATALOG = {
    USER_REGISTERED: {
        "version": "v1",
        "payload": {
            "user_id": "str",
            "email": "str",
            "name": "str",
        },
    },
}

__all__ = ["EVENT_CATALOG", "USER_REGISTERED"]
