"""Tests for auth endpoints."""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import SQLAlchemyError

from parkreserve.services import auth as auth_service
from tests.conftest import register_and_sign_in


@pytest.mark.asyncio
async def test_sign_up(async_client: AsyncClient):
    """Test registering an account."""
    response = await async_client.post(
        "/api/v1/auth/sign-up",
        json={
            "name": "Jane",
            "email": "Jane@Example.com",
            "password": "secret1",
            "vehicle_plate": "XYZ789",
        },
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "jane@example.com"
    assert data["vehicle_plate"] == "XYZ789"
    assert "password_hash" not in data


@pytest.mark.asyncio
async def test_sign_up_requires_all_fields(async_client: AsyncClient):
    response = await async_client.post(
        "/api/v1/auth/sign-up",
        json={"name": "", "email": "a@b.c", "password": "secret1", "vehicle_plate": "X"},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Please fill in all fields"


@pytest.mark.asyncio
async def test_sign_up_short_password(async_client: AsyncClient):
    response = await async_client.post(
        "/api/v1/auth/sign-up",
        json={"name": "A", "email": "a@b.c", "password": "123", "vehicle_plate": "X"},
    )
    assert response.status_code == 400
    assert "at least 6" in response.json()["detail"]


@pytest.mark.asyncio
async def test_sign_up_duplicate_email(async_client: AsyncClient):
    await register_and_sign_in(async_client, email="dup@example.com")

    response = await async_client.post(
        "/api/v1/auth/sign-up",
        json={"name": "B", "email": "DUP@example.com", "password": "secret1", "vehicle_plate": "X"},
    )
    assert response.status_code == 409


@pytest.mark.asyncio
async def test_sign_in_wrong_password(async_client: AsyncClient):
    await register_and_sign_in(async_client)

    response = await async_client.post(
        "/api/v1/auth/sign-in",
        json={"email": "driver@example.com", "password": "wrong-pass"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_session_and_sign_out(async_client: AsyncClient):
    """Test that a token is valid until signed out."""
    headers = await register_and_sign_in(async_client)

    response = await async_client.get("/api/v1/auth/session", headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["authenticated"] is True
    assert data["email"] == "driver@example.com"

    response = await async_client.post("/api/v1/auth/sign-out", headers=headers)
    assert response.status_code == 204

    response = await async_client.get("/api/v1/auth/session", headers=headers)
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_session_requires_token(async_client: AsyncClient):
    response = await async_client.get("/api/v1/auth/session")
    assert response.status_code == 401

    response = await async_client.get(
        "/api/v1/auth/session", headers={"Authorization": "Bearer not-a-token"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_change_password(async_client: AsyncClient):
    """Test changing the password and signing in with the new one."""
    headers = await register_and_sign_in(async_client)

    response = await async_client.post(
        "/api/v1/auth/password",
        json={"new_password": "brand-new-pass", "confirm_password": "brand-new-pass"},
        headers=headers,
    )
    assert response.status_code == 204

    response = await async_client.post(
        "/api/v1/auth/sign-in",
        json={"email": "driver@example.com", "password": "brand-new-pass"},
    )
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_change_password_validation(async_client: AsyncClient):
    headers = await register_and_sign_in(async_client)

    response = await async_client.post(
        "/api/v1/auth/password",
        json={"new_password": "brand-new-pass", "confirm_password": "other-pass"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Passwords don't match"

    response = await async_client.post(
        "/api/v1/auth/password",
        json={"new_password": "short", "confirm_password": "short"},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Password must be at least 8 characters"


async def failing_store(*args, **kwargs):
    raise SQLAlchemyError("connection lost")


@pytest.mark.asyncio
async def test_sign_up_store_error(async_client: AsyncClient, monkeypatch):
    monkeypatch.setattr(auth_service, "sign_up", failing_store)

    response = await async_client.post(
        "/api/v1/auth/sign-up",
        json={
            "name": "Jane",
            "email": "jane@example.com",
            "password": "secret1",
            "vehicle_plate": "XYZ789",
        },
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "Error registering account"


@pytest.mark.asyncio
async def test_sign_in_store_error(async_client: AsyncClient, monkeypatch):
    await register_and_sign_in(async_client)
    monkeypatch.setattr(auth_service, "sign_in", failing_store)

    response = await async_client.post(
        "/api/v1/auth/sign-in",
        json={"email": "driver@example.com", "password": "secret-pass"},
    )
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to log in"


@pytest.mark.asyncio
async def test_session_lookup_store_error(async_client: AsyncClient, monkeypatch):
    """Test that a failed session lookup is a server error, not a 401."""
    headers = await register_and_sign_in(async_client)
    monkeypatch.setattr(auth_service, "get_session_user", failing_store)

    response = await async_client.get("/api/v1/auth/session", headers=headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to verify your session"


@pytest.mark.asyncio
async def test_sign_out_store_error(async_client: AsyncClient, monkeypatch):
    headers = await register_and_sign_in(async_client)
    monkeypatch.setattr(auth_service, "sign_out", failing_store)

    response = await async_client.post("/api/v1/auth/sign-out", headers=headers)
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to log out"

    monkeypatch.undo()
    response = await async_client.get("/api/v1/auth/session", headers=headers)
    assert response.status_code == 200
