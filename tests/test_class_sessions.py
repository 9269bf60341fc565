"""
Tests for the class session lifecycle: creation rules, derived activity,
lookup by access code and owner-only deletion.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from classes import services
from classes.models import ClassSession
from common.exceptions import Forbidden, InvalidInput, SessionEnded, SessionNotFound
from questions import services as board
from questions.models import Question


@pytest.mark.django_db
def test_create_session_sets_window_and_code(user):
    now = timezone.now()
    session = services.create_session("  Algorithms  ", 60, user, now=now)

    assert session.subject_name == "Algorithms"
    assert session.start_time == now
    assert session.end_time - session.start_time == timedelta(seconds=3600)
    assert len(session.access_code) == 6
    assert session.instructor == user
    assert session.instructor_name == "Ada Lovelace"


@pytest.mark.django_db
def test_instructor_name_falls_back_to_username(other_user):
    session = services.create_session("Databases", 45, other_user)
    assert session.instructor_name == "u2"


@pytest.mark.django_db
@pytest.mark.parametrize("subject,duration", [("", 60), ("   ", 60), (None, 60), ("Math", 0), ("Math", -5), ("Math", None), ("Math", True)])
def test_create_session_rejects_invalid_input(user, subject, duration):
    with pytest.raises(InvalidInput):
        services.create_session(subject, duration, user)
    assert ClassSession.objects.count() == 0


@pytest.mark.django_db
def test_create_session_accepts_numeric_string_duration(user):
    session = services.create_session("Math", "15", user)
    assert session.duration_in_minutes == 15


@pytest.mark.django_db
def test_duration_is_capped_at_one_week(user):
    session = services.create_session("Bootcamp", services.DURATION_MAX_MINUTES, user)
    assert session.end_time - session.start_time == timedelta(days=7)

    for duration in [services.DURATION_MAX_MINUTES + 1, 10**10]:
        with pytest.raises(InvalidInput):
            services.create_session("Forever", duration, user)
    assert ClassSession.objects.count() == 1


@pytest.mark.django_db
def test_long_instructor_name_fits_the_column(django_user_model):
    instructor = django_user_model.objects.create_user(
        username="longname", password="pass12345", first_name="F" * 150, last_name="L" * 150
    )
    max_length = ClassSession._meta.get_field("instructor_name").max_length

    session = services.create_session("Etymology", 30, instructor)

    assert session.instructor_name == "F" * 150
    assert len(ClassSession.objects.get(pk=session.pk).instructor_name) <= max_length


@pytest.mark.django_db
def test_is_active_is_monotonic(class_session):
    end = class_session.end_time
    assert services.is_active(class_session, end - timedelta(minutes=1))
    assert services.is_active(class_session, end)
    for seconds in (1, 60, 3600, 86400):
        assert not services.is_active(class_session, end + timedelta(seconds=seconds))


@pytest.mark.django_db
def test_resolve_by_access_code_returns_ended_sessions(ended_session):
    found = services.resolve_by_access_code(ended_session.access_code)
    assert found.pk == ended_session.pk
    assert found.has_ended


@pytest.mark.django_db
def test_resolve_by_access_code_is_case_sensitive(class_session):
    swapped = class_session.access_code.swapcase()
    if swapped == class_session.access_code:
        pytest.skip("generated code has no letters")
    with pytest.raises(SessionNotFound):
        services.resolve_by_access_code(swapped)


@pytest.mark.django_db
def test_resolve_unknown_code_raises_not_found():
    with pytest.raises(SessionNotFound):
        services.resolve_by_access_code("nope00")


@pytest.mark.django_db
@pytest.mark.parametrize("code", ["abc", "abc-12", "abcdefg", "ab cd1"])
def test_resolve_rejects_badly_shaped_codes(class_session, code):
    with pytest.raises(SessionNotFound):
        services.resolve_by_access_code(code)


@pytest.mark.django_db
def test_join_reports_ended_session(ended_session, class_session):
    assert services.join_session(class_session.access_code).pk == class_session.pk
    with pytest.raises(SessionEnded):
        services.join_session(ended_session.access_code)


@pytest.mark.django_db
def test_get_session_with_bad_id_raises_not_found():
    with pytest.raises(SessionNotFound):
        services.get_session("abc")
    with pytest.raises(SessionNotFound):
        services.get_session(999)


@pytest.mark.django_db
def test_list_instructor_sessions_newest_first(user, other_user):
    first = services.create_session("One", 10, user)
    second = services.create_session("Two", 10, user)
    services.create_session("Theirs", 10, other_user)

    assert [s.pk for s in services.list_instructor_sessions(user)] == [second.pk, first.pk]


@pytest.mark.django_db
def test_delete_session_requires_owner(class_session, other_user):
    with pytest.raises(Forbidden):
        services.delete_session(class_session, other_user)
    assert ClassSession.objects.filter(pk=class_session.pk).exists()


@pytest.mark.django_db
def test_delete_session_cascades_to_questions(class_session, user):
    board.submit(class_session.pk, "Will this be on the exam?")
    board.submit(class_session.pk, "Can you repeat that?")

    services.delete_session(class_session, user)

    assert not ClassSession.objects.filter(pk=class_session.pk).exists()
    assert Question.objects.count() == 0
