"""Prompt JSON API."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from pydantic import ValidationError

from inkwell.core.utils.validation import jsonable_errors
from inkwell.domains.prompts.mappers import map_prompt
from inkwell.domains.prompts.schemas.prompt_schemas import PromptCreate, PromptHistoryFilter
from inkwell.domains.prompts.services import prompt_service

prompt_api_bp = Blueprint("prompt_api", __name__)


@prompt_api_bp.post("")
@jwt_required()
def create_prompt():
    payload = request.get_json(silent=True) or {}
    try:
        data = PromptCreate.model_validate(payload)
    except ValidationError as exc:
        return jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}), 400
    prompt = prompt_service.create_prompt(data.text, data.category, data.scheduled_date)
    return jsonify({"ok": True, "prompt": map_prompt(prompt)}), 201


@prompt_api_bp.get("/today")
@jwt_required()
def today_prompt():
    return jsonify({"ok": True, "prompt": map_prompt(prompt_service.get_today_prompt())})


@prompt_api_bp.get("/random")
@jwt_required()
def random_prompt():
    return jsonify({"ok": True, "prompt": map_prompt(prompt_service.get_random_prompt())})


@prompt_api_bp.get("/history")
@jwt_required()
def prompt_history():
    try:
        filters = PromptHistoryFilter.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return jsonify({"ok": False, "error": "validation_error", "details": jsonable_errors(exc)}), 400
    prompts = prompt_service.get_prompt_history(filters.limit)
    return jsonify({"ok": True, "items": [map_prompt(p) for p in prompts]})


@prompt_api_bp.get("/<prompt_id>")
@jwt_required()
def get_prompt(prompt_id: str):
    return jsonify({"ok": True, "prompt": map_prompt(prompt_service.get_prompt(prompt_id))})


@prompt_api_bp.post("/<prompt_id>/use")
@jwt_required()
def use_prompt(prompt_id: str):
    prompt = prompt_service.mark_as_used(prompt_id)
    return jsonify({"ok": True, "prompt": map_prompt(prompt)})
