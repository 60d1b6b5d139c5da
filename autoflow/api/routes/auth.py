"""Authentication routes.

Provides user registration, login, and user info endpoints.
"""

import structlog
from fastapi import APIRouter, HTTPException, status

from autoflow.api.deps import CurrentUser, UserServiceDep
from autoflow.core.security import create_access_token
from autoflow.models.user import AuthResponse, User, UserCreate, UserLogin, UserRead
from autoflow.services.user_service import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/auth", tags=["auth"])


def _to_read(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        email=user.email,
        name=user.name,
        role=user.role,
        created_at=user.created_at,
    )


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account and return JWT token.",
)
async def register(
    data: UserCreate,
    service: UserServiceDep,
) -> AuthResponse:
    """Register a new user.

    Args:
        data: User registration data (email, password, name)
        service: User service

    Returns:
        JWT access token and the created user

    Raises:
        HTTPException 400: If the email is already registered
    """
    try:
        user = service.register(data)
    except UserAlreadyExistsError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return AuthResponse(
        message="User created successfully",
        access_token=create_access_token(user),
        user=_to_read(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login user",
    description="Authenticate user and return JWT token.",
)
async def login(
    data: UserLogin,
    service: UserServiceDep,
) -> AuthResponse:
    """Login user.

    Args:
        data: Login credentials (email, password)
        service: User service

    Returns:
        JWT access token and the user

    Raises:
        HTTPException 401: If credentials are invalid
    """
    try:
        user = service.authenticate(data.email, data.password)
    except InvalidCredentialsError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return AuthResponse(
        message="Login successful",
        access_token=create_access_token(user),
        user=_to_read(user),
    )


@router.get(
    "/me",
    response_model=UserRead,
    summary="Get current user",
    description="Get the currently authenticated user's information.",
)
async def get_current_user_info(
    user: CurrentUser,
    service: UserServiceDep,
) -> UserRead:
    """Get current user info.

    Raises:
        HTTPException 404: If the account behind the token no longer exists
    """
    try:
        return _to_read(service.get(user.sub))
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        ) from e
