"""
Common test fixtures for the classroom Q&A board tests.

Provides fixtures for creating instructors, authenticating a client with
a JWT token, and opening a class session owned by the default instructor.
"""
from datetime import timedelta

import pytest
from django.contrib.auth.models import User
from django.test import Client
from django.utils import timezone

from classes.services import create_session


def _login(client, username, password):
    resp = client.post(
        "/api/auth/token/",
        {"username": username, "password": password},
        content_type="application/json",
    )
    assert resp.status_code == 200
    token = resp.json()["access"]
    client.defaults["HTTP_AUTHORIZATION"] = f"Bearer {token}"
    return client


@pytest.fixture
def user(db):
    """Create a test instructor."""
    return User.objects.create_user(
        username="u1", password="pass12345", email="u1@example.com", first_name="Ada", last_name="Lovelace"
    )


@pytest.fixture
def other_user(db):
    """An instructor who owns nothing in the default fixtures."""
    return User.objects.create_user(username="u2", password="pass12345", email="u2@example.com")


@pytest.fixture
def auth_client(client, db, user):
    """Authenticate the Django test client using JWT tokens."""
    return _login(client, "u1", "pass12345")


@pytest.fixture
def other_client(db, other_user):
    """A second authenticated client, logged in as ``other_user``."""
    return _login(Client(), "u2", "pass12345")


@pytest.fixture
def class_session(db, user):
    """A running 60 minute session owned by ``user``."""
    return create_session("Algorithms", 60, user)


@pytest.fixture
def ended_session(db, user):
    """A session that finished a minute ago."""
    return create_session("History", 30, user, now=timezone.now() - timedelta(minutes=31))
