"""Auth HTTP controllers (API only)."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from inkwell.core.auth.auth_service import authenticate_user, issue_tokens
from inkwell.core.users import services as user_directory
from inkwell.core.users.schemas import LoginRequest, RegisterRequest, serialize_user
from inkwell.core.utils.validation import jsonable_errors
from inkwell.extensions import limiter

auth_bp = Blueprint("auth_api", __name__)


@auth_bp.post("/register")
@limiter.limit("5/minute")
def register():
    payload = request.get_json(silent=True) or {}
    try:
        data = RegisterRequest.model_validate(payload)
    except ValidationError as exc:
        return (
            jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}),
            400,
        )
    # ConflictError propagates to the app-level DomainError handler (409).
    user = user_directory.register(data.email, data.password, data.name)
    tokens = issue_tokens(user)
    return jsonify({"ok": True, "user": serialize_user(user).model_dump(mode="json"), **tokens}), 201


@auth_bp.post("/login")
@limiter.limit("10/minute")
def login():
    payload = request.get_json(silent=True) or {}
    try:
        data = LoginRequest.model_validate(payload)
    except ValidationError as exc:
        return (
            jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}),
            400,
        )
    user = authenticate_user(data.email, data.password)
    if not user:
        return jsonify({"ok": False, "error": "invalid_credentials"}), 401
    tokens = issue_tokens(user)
    return jsonify({"ok": True, "user": serialize_user(user).model_dump(mode="json"), **tokens})
