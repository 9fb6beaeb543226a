"""Authentication service layer."""

from __future__ import annotations

import logging
from typing import Optional

from flask_jwt_extended import create_access_token

from inkwell.core.auth.password import verify_password
from inkwell.core.errors import NotFoundError
from inkwell.core.users import services as user_directory
from inkwell.core.users.models import User

logger = logging.getLogger(__name__)


def authenticate_user(email: str, password: str) -> Optional[User]:
    """Return the user if credentials are valid."""
    try:
        user = user_directory.find_by_email(email)
    except NotFoundError:
        return None
    if not verify_password(password, user.password_hash):
        logger.info("failed login for user %s", user.id)
        return None
    return user


def issue_tokens(user: User) -> dict[str, str]:
    """Create an access token whose identity is the user's id."""
    return {"access_token": create_access_token(identity=str(user.id))}
