"""Password hashing and JWT access tokens.

Password hashing uses bcrypt directly; tokens are signed with python-jose.
"""

from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt
from pydantic import ValidationError

from autoflow.config import settings
from autoflow.models.user import TokenPayload, User


class InvalidTokenError(Exception):
    """Token is malformed, has a bad signature, or has expired."""

    pass


def hash_password(password: str) -> str:
    """Hash a password."""
    return bcrypt.hashpw(
        password.encode("utf-8"),
        bcrypt.gensalt(rounds=settings.bcrypt_rounds),
    ).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError:
        # Malformed hash or password beyond bcrypt's 72-byte limit
        return False


def create_access_token(user: User) -> str:
    """Create a JWT access token.

    Args:
        user: User the token is issued for

    Returns:
        Encoded JWT token
    """
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.jwt_access_token_expire_minutes
    )

    payload = TokenPayload(
        sub=user.id,
        email=user.email,
        role=user.role,
        exp=expire,
    )

    return jwt.encode(
        payload.model_dump(),
        settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str) -> TokenPayload:
    """Decode and validate a JWT access token.

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        InvalidTokenError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
        )
        return TokenPayload(**payload)
    except (JWTError, ValidationError) as e:
        raise InvalidTokenError(str(e)) from e
