"""Inkwell application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from flask import Flask

from inkwell.config import config_by_name
from inkwell.core.errors import DomainError
from inkwell.core.events.event_bus import event_bus
from inkwell.extensions import init_extensions, jwt


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Inkwell Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    _configure_logging(app)

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    is_sqlite = db_uri and db_uri.startswith("sqlite:")
    if is_sqlite and db_uri.startswith("sqlite:///"):
        db_path = db_uri.replace("sqlite:///", "", 1)
        abs_path = project_root / db_path
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{abs_path}"

    if not is_sqlite:
        # Drop sqlite-specific connect_args that break Postgres/MySQL drivers
        engine_opts = app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {})
        connect_args = engine_opts.get("connect_args") or {}
        connect_args.pop("detect_types", None)
        if "timeout" in connect_args:
            timeout_val = connect_args.pop("timeout")
            if db_uri.startswith("postgresql"):
                connect_args.setdefault("connect_timeout", timeout_val)
        if not connect_args and "connect_args" in engine_opts:
            engine_opts.pop("connect_args")
        else:
            engine_opts["connect_args"] = connect_args

    init_extensions(app)
    _register_models()
    _register_blueprints(app)
    _register_error_handlers(app)
    _register_jwt_handlers()

    app.extensions["event_bus"] = event_bus

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    from inkwell.scripts.prompt_commands import register_commands

    register_commands(app)

    return app


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("inkwell").setLevel(level)
    app.logger.setLevel(level)


def _register_models() -> None:
    """Import every model module so metadata and string relationships resolve."""
    from inkwell.core.events import event_models  # noqa: F401
    from inkwell.core.users import models as user_models  # noqa: F401
    from inkwell.domains.journal import models as journal_models  # noqa: F401
    from inkwell.domains.prompts import models as prompt_models  # noqa: F401


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from inkwell.core.auth.controllers import auth_bp  # local import to avoid circulars
    from inkwell.core.users.controllers import user_api_bp
    from inkwell.domains.journal.controllers.journal_api import journal_api_bp
    from inkwell.domains.prompts.controllers.prompt_api import prompt_api_bp

    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(user_api_bp, url_prefix="/api/users")
    app.register_blueprint(prompt_api_bp, url_prefix="/api/prompts")
    app.register_blueprint(journal_api_bp, url_prefix="/api/journal")


def _register_error_handlers(app: Flask) -> None:
    """JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(DomainError)
    def _domain_error(exc: DomainError):
        return exc.to_dict(), exc.status_code

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        code = (exc.name or "http_error").lower().replace(" ", "_")
        return {"ok": False, "error": code, "message": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500


def _register_jwt_handlers() -> None:
    """Keep JWT failures in the same JSON envelope as everything else."""

    @jwt.unauthorized_loader
    def _missing_token(reason: str):
        return {"ok": False, "error": "unauthorized", "message": reason}, 401

    @jwt.invalid_token_loader
    def _invalid_token(reason: str):
        return {"ok": False, "error": "invalid_token", "message": reason}, 422

    @jwt.expired_token_loader
    def _expired_token(jwt_header, jwt_payload):
        return {"ok": False, "error": "token_expired"}, 401
