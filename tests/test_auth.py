"""Integration tests for authentication and profile endpoints."""
from __future__ import annotations

import uuid

from fastapi.testclient import TestClient

from hebrew_app.core.security import create_refresh_token


def test_user_registration_success(client: TestClient) -> None:
    payload = {"email": "learner@example.com", "password": "securepassword", "full_name": "Learner One"}

    response = client.post("/api/auth/register", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert uuid.UUID(data["id"])
    assert data["email"] == payload["email"]
    assert data["is_active"] is True
    assert data["is_admin"] is False


def test_user_registration_duplicate_email(client: TestClient) -> None:
    payload = {"email": "duplicate@example.com", "password": "anothersecurepassword"}

    assert client.post("/api/auth/register", json=payload).status_code == 201
    duplicate_response = client.post("/api/auth/register", json=payload)

    assert duplicate_response.status_code == 400
    assert duplicate_response.json()["detail"] == "A user with this email already exists."


def test_registration_rejects_short_password(client: TestClient) -> None:
    response = client.post("/api/auth/register", json={"email": "short@example.com", "password": "abc"})

    assert response.status_code == 400
    assert response.json()["detail"].startswith("password:")


def test_user_login_success(client: TestClient) -> None:
    client.post("/api/auth/register", json={"email": "login@example.com", "password": "supersecure"})

    response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "supersecure"})

    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert "refresh_token" in data
    assert data["token_type"] == "bearer"
    assert data["expires_in"] == 60 * 60


def test_user_login_invalid_credentials(client: TestClient) -> None:
    response = client.post("/api/auth/login", json={"email": "unknown@example.com", "password": "wrongpassword"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Incorrect email or password"


def test_read_current_user(client: TestClient, learner_headers: dict[str, str]) -> None:
    response = client.get("/api/users/me", headers=learner_headers)

    assert response.status_code == 200
    assert response.json()["email"] == "learner@example.com"


def test_protected_routes_require_a_token(client: TestClient) -> None:
    response = client.get("/api/users/me")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


def test_refresh_token_is_not_accepted_as_access_token(client: TestClient) -> None:
    registered = client.post(
        "/api/auth/register", json={"email": "refresh@example.com", "password": "supersecure"}
    ).json()
    token = create_refresh_token(registered["id"])

    response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Could not validate credentials"


def test_admin_routes_reject_learners(client: TestClient, learner_headers: dict[str, str]) -> None:
    response = client.post("/api/vocab/seed-categories", headers=learner_headers)

    assert response.status_code == 403
