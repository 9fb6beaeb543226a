import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inkwell import create_app
from inkwell.core.auth.auth_service import issue_tokens
from inkwell.core.users import services as user_directory
from inkwell.domains.prompts.services import prompt_service
from inkwell.extensions import db


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app():
    """
    Per-test app backed by its own in-memory SQLite database.

    The app context stays pushed for the whole test so services, the test
    client and assertions all share one session.
    """
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def user(app):
    """Registered user with no entries yet."""
    return user_directory.register("writer@example.com", "secret123", "Wren Writer")


@pytest.fixture()
def other_user(app):
    return user_directory.register("other@example.com", "secret123", "Other Writer")


@pytest.fixture()
def prompt(app):
    return prompt_service.create_prompt("What made you smile today?", "gratitude")


@pytest.fixture()
def auth_headers(user):
    """Bearer headers for ``user``."""
    token = issue_tokens(user)["access_token"]
    return {"Authorization": f"Bearer {token}"}
