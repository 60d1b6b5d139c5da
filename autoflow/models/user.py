"""User entity model.

Defines the User record for authentication and authorization.
All user-specific resources (workflows, integrations, executions) are scoped by user_id.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import EmailStr, field_validator
from sqlmodel import Field, SQLModel

BCRYPT_MAX_BYTES = 72


def utc_now() -> datetime:
    """Get current UTC time with timezone info."""
    return datetime.now(timezone.utc)


class UserRole(str, Enum):
    """Authorization role."""

    ADMIN = "admin"
    USER = "user"


class UserBase(SQLModel):
    """Base user fields shared across models."""

    email: EmailStr = Field(
        description="Unique email address used for login",
    )
    name: str = Field(
        min_length=1,
        max_length=255,
        description="Display name",
    )


class User(UserBase):
    """Stored user record.

    Passwords are stored as bcrypt hashes, never plaintext.
    """

    id: str = Field(
        default_factory=lambda: str(uuid4()),
        description="Unique user identifier (UUID)",
    )
    hashed_password: str = Field(description="Bcrypt-hashed password")
    role: UserRole = Field(default=UserRole.USER)
    created_at: datetime = Field(
        default_factory=utc_now,
        description="Account creation timestamp (UTC)",
    )


class UserCreate(UserBase):
    """Schema for registering a new user."""

    password: str = Field(min_length=1, max_length=BCRYPT_MAX_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only accepts 72 bytes, and multibyte characters count more than once
        if len(value.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"password must be at most {BCRYPT_MAX_BYTES} bytes")
        return value


class UserRead(UserBase):
    """Schema for reading user data (excludes sensitive fields)."""

    id: str
    role: UserRole
    created_at: datetime


class UserLogin(SQLModel):
    """Schema for user login."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AuthResponse(SQLModel):
    """Response returned by register and login."""

    message: str
    access_token: str
    token_type: str = "bearer"
    user: UserRead


class TokenPayload(SQLModel):
    """JWT token payload schema."""

    sub: str  # user_id
    email: str
    role: UserRole
    exp: datetime
