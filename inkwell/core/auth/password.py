"""Password hashing helpers."""

from inkwell.extensions import bcrypt


def hash_password(plain_password: str) -> str:
    """Hash a plaintext password using bcrypt (cost from BCRYPT_LOG_ROUNDS)."""
    return bcrypt.generate_password_hash(plain_password).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Validate a plaintext password against a stored hash."""
    if not hashed_password:
        return False
    return bcrypt.check_password_hash(hashed_password, plain_password)
