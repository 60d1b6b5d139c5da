"""Pytest configuration and fixtures.

Provides common fixtures for all tests including:
- An isolated in-memory store per test
- Test users
- Authentication tokens
- An HTTP client bound to the application
"""

import os

# Settings are read once at import time, so configure the environment first
os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("EXECUTION_COMPLETION_DELAY", "0.1")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_DEFAULT_ADMIN", "false")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from autoflow.core.security import create_access_token, hash_password
from autoflow.main import app
from autoflow.models.user import User, UserRole
from autoflow.models.workflow import Workflow
from autoflow.services.store import InMemoryStore, get_store


TEST_PASSWORD = "testpassword123"


@pytest.fixture
def store() -> InMemoryStore:
    """Create a fresh seeded store."""
    return InMemoryStore()


@pytest_asyncio.fixture
async def client(store: InMemoryStore) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client."""
    app.dependency_overrides[get_store] = lambda: store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


def make_user(
    store: InMemoryStore,
    email: str,
    name: str = "Test User",
    role: UserRole = UserRole.USER,
) -> User:
    """Insert a user directly into the store."""
    user = User(
        email=email,
        name=name,
        hashed_password=hash_password(TEST_PASSWORD),
        role=role,
    )
    store.users.append(user)
    return user


@pytest.fixture
def test_user(store: InMemoryStore) -> User:
    """Create a test user."""
    return make_user(store, "test@example.com")


@pytest.fixture
def other_user(store: InMemoryStore) -> User:
    """Create a second, unrelated user."""
    return make_user(store, "other@example.com", name="Other User")


@pytest.fixture
def auth_headers(test_user: User) -> dict[str, str]:
    """Create authentication headers."""
    return {"Authorization": f"Bearer {create_access_token(test_user)}"}


@pytest.fixture
def other_auth_headers(other_user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user)}"}


@pytest.fixture
def test_workflow(store: InMemoryStore, test_user: User) -> Workflow:
    """Create a test workflow."""
    workflow = Workflow(
        user_id=test_user.id,
        name="Test Workflow",
        description="A test workflow",
        trigger="webhook",
        actions=["email", "slack_message"],
    )
    store.workflows.append(workflow)
    return workflow
