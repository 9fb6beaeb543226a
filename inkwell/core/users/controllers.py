"""User controllers (API)."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required

from inkwell.core.users import services as user_directory
from inkwell.core.users.schemas import UserStatsResponse, serialize_user

user_api_bp = Blueprint("user_api", __name__)


@user_api_bp.get("/me")
@jwt_required()
def api_me():
    user = user_directory.find_by_id(get_jwt_identity())
    return jsonify({"ok": True, "user": serialize_user(user).model_dump(mode="json")})


@user_api_bp.get("/me/stats")
@jwt_required()
def api_my_stats():
    stats = user_directory.get_stats(get_jwt_identity())
    return jsonify({"ok": True, "stats": UserStatsResponse(**stats).model_dump()})
