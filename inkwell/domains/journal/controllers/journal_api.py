"""Journal JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_jwt_extended import get_jwt_identity, jwt_required
from pydantic import ValidationError

from inkwell.core.utils.validation import jsonable_errors
from inkwell.domains.journal.mappers import map_entry
from inkwell.domains.journal.schemas.journal_schemas import (
    JournalCalendarResponse,
    JournalEntryCreate,
    JournalEntryListFilter,
    JournalEntryUpdate,
    JournalStatsResponse,
)
from inkwell.domains.journal.services import journal_service

journal_api_bp = Blueprint("journal_api", __name__)


def _validation_failed(exc: ValidationError):
    return jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}), 400


@journal_api_bp.get("")
@jwt_required()
def list_journal():
    user_id = get_jwt_identity()
    try:
        filters = JournalEntryListFilter.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return _validation_failed(exc)
    entries = journal_service.find_by_user(user_id, on_date=filters.on_date)
    return jsonify({"ok": True, "items": [map_entry(e) for e in entries], "total": len(entries)})


@journal_api_bp.get("/stats")
@jwt_required()
def journal_stats():
    stats = journal_service.get_stats(get_jwt_identity())
    return jsonify({"ok": True, "stats": JournalStatsResponse(**stats).model_dump()})


@journal_api_bp.get("/calendar/<int:year>/<int:month>")
@jwt_required()
def journal_calendar(year: int, month: int):
    dates = journal_service.list_entry_dates(get_jwt_identity(), year, month)
    body = JournalCalendarResponse(year=year, month=month, dates=dates).model_dump(mode="json")
    return jsonify({"ok": True, **body})


@journal_api_bp.get("/<entry_id>")
@jwt_required()
def get_entry(entry_id: str):
    entry = journal_service.find_by_id(entry_id, user_id=get_jwt_identity())
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.post("")
@jwt_required()
def create_journal_entry():
    payload = request.get_json(silent=True) or {}
    try:
        data = JournalEntryCreate.model_validate(payload)
    except ValidationError as exc:
        return _validation_failed(exc)
    entry = journal_service.create_entry(
        get_jwt_identity(),
        data.content,
        data.prompt_id,
        mood=data.mood,
    )
    return jsonify({"ok": True, "entry": map_entry(entry), "streak": entry.user.streak}), 201


@journal_api_bp.patch("/<entry_id>")
@jwt_required()
def update_journal_entry(entry_id: str):
    payload = request.get_json(silent=True) or {}
    try:
        data = JournalEntryUpdate.model_validate(payload)
    except ValidationError as exc:
        return _validation_failed(exc)
    entry = journal_service.update_entry(
        entry_id,
        data.content,
        mood=data.mood,
        user_id=get_jwt_identity(),
    )
    return jsonify({"ok": True, "entry": map_entry(entry)})


@journal_api_bp.delete("/<entry_id>")
@jwt_required()
def delete_journal_entry(entry_id: str):
    journal_service.delete_entry(entry_id, user_id=get_jwt_identity())
    return jsonify({"ok": True})
