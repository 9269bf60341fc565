"""
Tests for instructor registration, JWT login and the `me` endpoint.
"""
import pytest
from django.test import Client


@pytest.mark.django_db
def test_register_and_login(client):
    """Ensure a new instructor can register and obtain a JWT token."""
    payload = {
        "username": "alice",
        "email": "a@example.com",
        "password": "Sticky-Notes-2024",
        "first_name": "Alice",
    }
    response = client.post("/api/auth/register/", payload, content_type="application/json")
    assert response.status_code == 201
    body = response.json()
    assert body["username"] == "alice"
    assert body["display_name"] == "Alice"
    assert "access" in body and "refresh" in body
    assert "password" not in body

    login_resp = client.post(
        "/api/auth/token/", {"username": "alice", "password": "Sticky-Notes-2024"}, content_type="application/json"
    )
    assert login_resp.status_code == 200
    assert "access" in login_resp.json()


@pytest.mark.django_db
def test_register_rejects_existing_username_and_weak_password(client, user):
    taken = client.post(
        "/api/auth/register/", {"username": "u1", "password": "Sticky-Notes-2024"}, content_type="application/json"
    )
    assert taken.status_code == 400
    assert "username" in taken.json()

    weak = client.post("/api/auth/register/", {"username": "bob", "password": "123"}, content_type="application/json")
    assert weak.status_code == 400
    assert "password" in weak.json()


@pytest.mark.django_db
def test_me_endpoint(auth_client):
    response = auth_client.get("/api/auth/me/")
    assert response.status_code == 200
    assert response.json()["username"] == "u1"
    assert response.json()["display_name"] == "Ada Lovelace"


@pytest.mark.django_db
def test_me_requires_token():
    assert Client().get("/api/auth/me/").status_code == 401
