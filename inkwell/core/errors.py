"""Domain error kinds shared by services and the HTTP layer.

Services raise these; ``create_app`` renders them as the JSON envelope
``{"ok": false, "error": <code>, "message": <message>}`` with the matching
status code.
"""

from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base class for failures surfaced to callers."""

    code = "domain_error"
    status_code = 400

    def __init__(self, message: str = "", *, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message or self.code)
        self.message = message or self.code
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"ok": False, "error": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class NotFoundError(DomainError):
    """No record matches the given id or email."""

    code = "not_found"
    status_code = 404


class ConflictError(DomainError):
    """A uniqueness rule would be violated (e.g. duplicate email)."""

    code = "conflict"
    status_code = 409


class ValidationError(DomainError):
    code = "validation_error"
    status_code = 400


__all__ = ["DomainError", "NotFoundError", "ConflictError", "ValidationError"]
