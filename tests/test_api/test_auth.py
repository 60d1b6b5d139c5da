"""Tests for authentication endpoints."""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient
from jose import jwt

from autoflow.config import settings
from autoflow.models.user import User

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"


def registration(email: str, name: str = "Jane Doe", password: str = "s3cret-pass") -> dict:
    return {"email": email, "name": name, "password": password}


class TestRegister:
    """Tests for user registration."""

    @pytest.mark.asyncio
    async def test_register_returns_token_and_user(self, client: AsyncClient):
        response = await client.post(REGISTER_URL, json=registration("jane@example.com"))

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "User created successfully"
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["user"]["email"] == "jane@example.com"
        assert data["user"]["name"] == "Jane Doe"
        assert "password" not in data["user"]
        assert "hashed_password" not in data["user"]

    @pytest.mark.asyncio
    async def test_first_user_is_admin_then_user(self, client: AsyncClient):
        first = await client.post(REGISTER_URL, json=registration("first@example.com"))
        second = await client.post(REGISTER_URL, json=registration("second@example.com"))

        assert first.json()["user"]["role"] == "admin"
        assert second.json()["user"]["role"] == "user"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, client: AsyncClient):
        await client.post(REGISTER_URL, json=registration("dup@example.com"))
        response = await client.post(REGISTER_URL, json=registration("dup@example.com"))

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

    @pytest.mark.asyncio
    async def test_missing_fields_rejected(self, client: AsyncClient):
        response = await client.post(REGISTER_URL, json={"email": "x@example.com"})

        assert response.status_code == 400
        body = response.json()
        assert "password" in body["error"]
        assert "name" in body["error"]

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, client: AsyncClient, store):
        await client.post(REGISTER_URL, json=registration("hash@example.com"))

        stored = store.find_user_by_email("hash@example.com")
        assert stored is not None
        assert stored.hashed_password != "s3cret-pass"
        assert stored.hashed_password.startswith("$2")

    @pytest.mark.asyncio
    async def test_duplicate_email_differing_in_case_rejected(self, client: AsyncClient):
        await client.post(REGISTER_URL, json=registration("Casey@Example.COM"))
        response = await client.post(REGISTER_URL, json=registration("casey@example.com"))

        assert response.status_code == 400
        assert response.json() == {"error": "User already exists"}

    @pytest.mark.asyncio
    async def test_multibyte_password_over_bcrypt_limit_rejected(self, client: AsyncClient):
        # 60 characters but 120 UTF-8 bytes
        response = await client.post(
            REGISTER_URL,
            json=registration("long@example.com", password="é" * 60),
        )

        assert response.status_code == 400
        assert "password" in response.json()["error"]

    @pytest.mark.asyncio
    async def test_multibyte_password_within_limit_accepted(self, client: AsyncClient):
        password = "é" * 36
        registered = await client.post(
            REGISTER_URL,
            json=registration("accent@example.com", password=password),
        )
        login = await client.post(
            LOGIN_URL,
            json={"email": "accent@example.com", "password": password},
        )

        assert registered.status_code == 201
        assert login.status_code == 200


class TestLogin:
    """Tests for login."""

    @pytest.mark.asyncio
    async def test_login_success(self, client: AsyncClient, test_user: User):
        response = await client.post(
            LOGIN_URL,
            json={"email": test_user.email, "password": "testpassword123"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["id"] == test_user.id

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client: AsyncClient, test_user: User):
        response = await client.post(
            LOGIN_URL,
            json={"email": test_user.email, "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post(
            LOGIN_URL,
            json={"email": "nobody@example.com", "password": "whatever"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_login_with_mixed_case_email_as_registered(self, client: AsyncClient):
        await client.post(
            REGISTER_URL,
            json=registration("Jane@Example.COM", password="s3cret-pass"),
        )

        exact = await client.post(
            LOGIN_URL,
            json={"email": "Jane@Example.COM", "password": "s3cret-pass"},
        )
        lowered = await client.post(
            LOGIN_URL,
            json={"email": "jane@example.com", "password": "s3cret-pass"},
        )

        assert exact.status_code == 200
        assert lowered.status_code == 200
        assert exact.json()["user"]["id"] == lowered.json()["user"]["id"]

    @pytest.mark.asyncio
    async def test_login_missing_password(self, client: AsyncClient):
        response = await client.post(LOGIN_URL, json={"email": "a@example.com"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_login_token_grants_access(self, client: AsyncClient):
        await client.post(REGISTER_URL, json=registration("flow@example.com"))
        login = await client.post(
            LOGIN_URL,
            json={"email": "flow@example.com", "password": "s3cret-pass"},
        )
        token = login.json()["access_token"]

        response = await client.get(
            "/api/workflows",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 200
        assert response.json() == []


class TestTokenValidation:
    """Tests for bearer token handling on protected routes."""

    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, client: AsyncClient):
        response = await client.get("/api/workflows")

        assert response.status_code == 401
        assert response.json() == {"error": "Access token required"}

    @pytest.mark.asyncio
    async def test_garbage_token_is_403(self, client: AsyncClient):
        response = await client.get(
            "/api/workflows",
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Invalid token"}

    @pytest.mark.asyncio
    async def test_wrong_signature_is_403(self, client: AsyncClient, test_user: User):
        token = jwt.encode(
            {
                "sub": test_user.id,
                "email": test_user.email,
                "role": "user",
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            "some-other-secret",
            algorithm="HS256",
        )

        response = await client.get(
            "/api/workflows",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_expired_token_is_403(self, client: AsyncClient, test_user: User):
        token = jwt.encode(
            {
                "sub": test_user.id,
                "email": test_user.email,
                "role": "user",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=5),
            },
            settings.jwt_secret.get_secret_value(),
            algorithm="HS256",
        )

        response = await client.get(
            "/api/workflows",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 403


class TestMe:
    """Tests for the current user endpoint."""

    @pytest.mark.asyncio
    async def test_me(self, client: AsyncClient, test_user: User, auth_headers: dict[str, str]):
        response = await client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == test_user.id
        assert data["role"] == "user"

    @pytest.mark.asyncio
    async def test_me_for_deleted_user(
        self,
        client: AsyncClient,
        store,
        test_user: User,
        auth_headers: dict[str, str],
    ):
        store.users.remove(test_user)

        response = await client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 404
