"""
Tests for board analytics: live counts, archival on clear and the frozen
snapshot of an ended session.
"""
from datetime import timedelta

import pytest
from django.utils import timezone

from analytics import services as analytics
from analytics.models import SessionAnalytics
from classes.services import create_session, delete_session
from common.exceptions import SessionNotFound
from questions import services as board
from questions.models import STICKY_NOTE_COLORS


def _in_window(session, minutes=1):
    return session.start_time + timedelta(minutes=minutes)


@pytest.mark.django_db
def test_algorithms_class_scenario(user):
    now = timezone.now()
    session = create_session("Algorithms", 60, user, now=now)
    assert len(session.access_code) == 6
    assert session.end_time == now + timedelta(seconds=3600)

    q = board.submit(session.pk, "What is Big-O?")
    assert q.status == "pending"
    assert q.color in STICKY_NOTE_COLORS

    board.set_status(q.pk, "important", user)
    listed = board.list_questions(session.pk)
    assert [(x.pk, x.status) for x in listed] == [(q.pk, "important")]

    board.clear_board(session.pk, user)
    assert board.list_questions(session.pk) == []

    snap = analytics.snapshot(session.pk)
    assert snap.total_questions == 1
    assert snap.important == 1
    assert snap.answered == 0
    assert snap.unanswered == 0


@pytest.mark.django_db
def test_count_board_is_a_plain_aggregate(class_session, user):
    a = board.submit(class_session.pk, "a")
    b = board.submit(class_session.pk, "b")
    board.submit(class_session.pk, "c")
    board.set_status(a.pk, "answered", user)
    board.set_status(b.pk, "important", user)

    counts = analytics.count_board(class_session)
    assert counts == analytics.BoardCounts(total_questions=3, answered=1, unanswered=1, important=1)
    assert not SessionAnalytics.objects.exists()


@pytest.mark.django_db
def test_live_snapshot_of_running_session_is_not_stored(class_session):
    board.submit(class_session.pk, "a")
    snap = analytics.snapshot(class_session.pk)

    assert snap.total_questions == 1
    assert snap.unanswered == 1
    assert not snap.is_final
    assert not SessionAnalytics.objects.exists()


@pytest.mark.django_db
def test_repeated_clears_accumulate(class_session, user):
    board.submit(class_session.pk, "a")
    board.clear_board(class_session.pk, user)
    b = board.submit(class_session.pk, "b")
    board.set_status(b.pk, "important", user)

    snap = analytics.snapshot(class_session.pk)
    assert (snap.total_questions, snap.unanswered, snap.important) == (2, 1, 1)
    assert snap.last_cleared_at is not None

    board.clear_board(class_session.pk, user)
    snap = analytics.snapshot(class_session.pk)
    assert (snap.total_questions, snap.unanswered, snap.important) == (2, 1, 1)


@pytest.mark.django_db
def test_ended_session_is_finalized_on_first_list(ended_session, user):
    a = board.submit(ended_session.pk, "a", now=_in_window(ended_session, 1))
    b = board.submit(ended_session.pk, "b", now=_in_window(ended_session, 2))
    board.set_status(a.pk, "answered", user)

    assert not SessionAnalytics.objects.exists()
    board.list_questions(ended_session.pk)

    row = SessionAnalytics.objects.get(class_session=ended_session)
    assert row.is_final
    assert (row.total_questions, row.answered, row.unanswered, row.important) == (2, 1, 1, 0)

    # later triage and clearing do not rewrite history
    board.set_status(b.pk, "important", user)
    board.clear_board(ended_session.pk, user)
    snap = analytics.snapshot(ended_session.pk)
    assert snap.is_final
    assert (snap.total_questions, snap.answered, snap.unanswered, snap.important) == (2, 1, 1, 0)


@pytest.mark.django_db
def test_clearing_an_ended_session_never_listed_finalizes_it(ended_session, user):
    q = board.submit(ended_session.pk, "a", now=_in_window(ended_session))
    board.set_status(q.pk, "important", user)

    board.clear_board(ended_session.pk, user)

    snap = analytics.snapshot(ended_session.pk)
    assert snap.is_final
    assert (snap.total_questions, snap.important) == (1, 1)


@pytest.mark.django_db
def test_finalization_happens_once(ended_session):
    board.submit(ended_session.pk, "a", now=_in_window(ended_session))
    first = analytics.snapshot(ended_session.pk)
    second = analytics.snapshot(ended_session.pk)
    assert first.finalized_at == second.finalized_at
    assert SessionAnalytics.objects.count() == 1


@pytest.mark.django_db
def test_snapshot_of_missing_session():
    with pytest.raises(SessionNotFound):
        analytics.snapshot(4242)


@pytest.mark.django_db
def test_analytics_deleted_with_session(class_session, user):
    board.submit(class_session.pk, "a")
    board.clear_board(class_session.pk, user)
    assert SessionAnalytics.objects.count() == 1

    delete_session(class_session, user)
    assert SessionAnalytics.objects.count() == 0
