"""Tests for the user service."""

import pytest

from autoflow.config import settings
from autoflow.models.user import UserCreate, UserRole
from autoflow.services.store import InMemoryStore
from autoflow.services.user_service import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
    UserService,
)


@pytest.fixture
def service(store: InMemoryStore) -> UserService:
    return UserService(store)


def new_user(email: str) -> UserCreate:
    return UserCreate(email=email, name="Someone", password="password1")


class TestUserService:
    """Tests for UserService."""

    def test_first_registrant_is_admin(self, service: UserService):
        first = service.register(new_user("one@example.com"))
        second = service.register(new_user("two@example.com"))
        third = service.register(new_user("three@example.com"))

        assert first.role is UserRole.ADMIN
        assert second.role is UserRole.USER
        assert third.role is UserRole.USER

    def test_duplicate_email(self, service: UserService):
        service.register(new_user("one@example.com"))

        with pytest.raises(UserAlreadyExistsError):
            service.register(new_user("one@example.com"))

    def test_authenticate(self, service: UserService):
        user = service.register(new_user("one@example.com"))

        assert service.authenticate("one@example.com", "password1") is user
        with pytest.raises(InvalidCredentialsError):
            service.authenticate("one@example.com", "password2")
        with pytest.raises(InvalidCredentialsError):
            service.authenticate("ghost@example.com", "password1")

    def test_authenticate_ignores_email_case(self, service: UserService):
        user = service.register(new_user("Mixed.Case@Example.COM"))

        assert user.email == "Mixed.Case@example.com"
        assert service.authenticate("Mixed.Case@Example.COM", "password1") is user
        assert service.authenticate("mixed.case@example.com", "password1") is user

    def test_password_over_bcrypt_byte_limit(self):
        with pytest.raises(ValueError):
            UserCreate(email="long@example.com", name="Someone", password="é" * 60)

    def test_get_missing(self, service: UserService):
        with pytest.raises(UserNotFoundError):
            service.get("missing")

    def test_default_admin_seeded_once(
        self,
        service: UserService,
        store: InMemoryStore,
        monkeypatch: pytest.MonkeyPatch,
    ):
        monkeypatch.setattr(settings, "seed_default_admin", True)

        admin = service.ensure_default_admin()

        assert admin is not None
        assert admin.email == settings.default_admin_email
        assert admin.role is UserRole.ADMIN
        assert service.authenticate(
            settings.default_admin_email,
            settings.default_admin_password.get_secret_value(),
        ) is admin
        assert service.ensure_default_admin() is None
        assert len(store.users) == 1

    def test_default_admin_disabled(self, service: UserService, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(settings, "seed_default_admin", False)

        assert service.ensure_default_admin() is None

    def test_seeded_store_catalogs(self):
        assert len(InMemoryStore().integrations) == 5
        assert InMemoryStore(seed=False).templates == []
