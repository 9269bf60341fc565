"""
Tests for access code generation and the retry loop used when a session
is created.
"""
import itertools

import pytest

from classes import services
from classes.access_codes import ACCESS_CODE_CHARS, generate_access_code, looks_like_access_code
from classes.models import ClassSession
from common.exceptions import CodeSpaceExhausted


def test_generated_codes_are_six_alphanumeric_chars():
    for _ in range(200):
        code = generate_access_code()
        assert len(code) == 6
        assert code.isalnum()
        assert all(ch in ACCESS_CODE_CHARS for ch in code)
        assert looks_like_access_code(code)


def test_alphabet_is_case_sensitive_alphanumeric():
    assert len(ACCESS_CODE_CHARS) == 62
    assert len(set(ACCESS_CODE_CHARS)) == 62


def test_looks_like_access_code_rejects_wrong_shapes():
    assert not looks_like_access_code("abc")
    assert not looks_like_access_code("abc-12")
    assert not looks_like_access_code("abcdefg")


@pytest.mark.django_db
def test_creation_redraws_code_on_collision(user, monkeypatch):
    first = services.create_session("Physics", 30, user)
    codes = iter([first.access_code, "Zz9Yy8"])
    monkeypatch.setattr(services, "generate_access_code", lambda: next(codes))

    second = services.create_session("Chemistry", 30, user)

    assert second.access_code == "Zz9Yy8"
    assert ClassSession.objects.count() == 2


@pytest.mark.django_db
def test_creation_survives_losing_the_unique_index_race(user, monkeypatch):
    first = services.create_session("Physics", 30, user)
    codes = iter([first.access_code, "Qq1Ww2"])
    monkeypatch.setattr(services, "generate_access_code", lambda: next(codes))
    # pretend the code was free when checked; the insert then hits the unique index
    monkeypatch.setattr(services, "_code_in_use", lambda code: False)

    second = services.create_session("Biology", 30, user)

    assert second.access_code == "Qq1Ww2"
    assert ClassSession.objects.filter(access_code=first.access_code).count() == 1


@pytest.mark.django_db
def test_creation_gives_up_after_max_attempts(user, monkeypatch, settings):
    settings.CLASSBOARD_ACCESS_CODE_MAX_ATTEMPTS = 3
    taken = services.create_session("Physics", 30, user).access_code
    calls = itertools.count()

    def always_taken():
        next(calls)
        return taken

    monkeypatch.setattr(services, "generate_access_code", always_taken)

    with pytest.raises(CodeSpaceExhausted):
        services.create_session("Chemistry", 30, user)
    assert next(calls) == 3
    assert ClassSession.objects.count() == 1
