"""
Question-count analytics for class sessions.

``count_board`` is a pure aggregate over the questions currently on a
board.  The stored ``SessionAnalytics`` row adds memory to it: boards that
were cleared are archived into the row, and once a session is seen as
ended its counts are frozen so later queries keep returning them.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime

from django.db import transaction
from django.db.models import Count, F
from django.utils import timezone

from classes.models import ClassSession
from classes.services import get_session, is_active
from questions.models import Question

from .models import SessionAnalytics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardCounts:
    total_questions: int = 0
    answered: int = 0
    unanswered: int = 0
    important: int = 0

    def __add__(self, other: "BoardCounts") -> "BoardCounts":
        return BoardCounts(
            total_questions=self.total_questions + other.total_questions,
            answered=self.answered + other.answered,
            unanswered=self.unanswered + other.unanswered,
            important=self.important + other.important,
        )

    @classmethod
    def from_row(cls, row: SessionAnalytics | None) -> "BoardCounts":
        if row is None:
            return cls()
        return cls(
            total_questions=row.total_questions,
            answered=row.answered,
            unanswered=row.unanswered,
            important=row.important,
        )


@dataclass(frozen=True)
class AnalyticsSnapshot:
    class_id: int
    counts: BoardCounts
    is_final: bool
    finalized_at: datetime | None = None
    last_cleared_at: datetime | None = None

    @property
    def total_questions(self) -> int:
        return self.counts.total_questions

    @property
    def answered(self) -> int:
        return self.counts.answered

    @property
    def unanswered(self) -> int:
        return self.counts.unanswered

    @property
    def important(self) -> int:
        return self.counts.important

    def as_dict(self) -> dict:
        data = {"class_id": self.class_id, **asdict(self.counts)}
        data.update(
            is_final=self.is_final,
            finalized_at=self.finalized_at,
            last_cleared_at=self.last_cleared_at,
        )
        return data


def count_board(session: ClassSession) -> BoardCounts:
    rows = (
        Question.objects.filter(class_session=session)
        .values("status")
        .annotate(n=Count("id"))
        .order_by()
    )
    by_status = {row["status"]: row["n"] for row in rows}
    return BoardCounts(
        total_questions=sum(by_status.values()),
        answered=by_status.get(Question.STATUS_ANSWERED, 0),
        unanswered=by_status.get(Question.STATUS_PENDING, 0),
        important=by_status.get(Question.STATUS_IMPORTANT, 0),
    )


def _locked_row(session: ClassSession) -> SessionAnalytics:
    # caller holds the transaction
    row, _ = SessionAnalytics.objects.select_for_update().get_or_create(class_session=session)
    return row


def _finalize(row: SessionAnalytics, live: BoardCounts, now: datetime) -> SessionAnalytics:
    final = BoardCounts.from_row(row) + live
    row.total_questions = final.total_questions
    row.answered = final.answered
    row.unanswered = final.unanswered
    row.important = final.important
    row.finalized_at = now
    row.save(update_fields=[
        "total_questions", "answered", "unanswered", "important", "finalized_at", "updated_at",
    ])
    logger.info("Finalized analytics for class %s: %s", row.class_session_id, final)
    return row


def finalize_if_ended(session: ClassSession, now: datetime | None = None) -> SessionAnalytics | None:
    """
    Freeze the counts of an ended session the first time it is observed.

    Returns the stored row, or None while the session is still running.
    """
    now = now or timezone.now()
    if is_active(session, now):
        return None
    existing = SessionAnalytics.objects.filter(class_session=session, finalized_at__isnull=False).first()
    if existing is not None:
        return existing
    with transaction.atomic():
        row = _locked_row(session)
        if row.finalized_at is None:
            row = _finalize(row, count_board(session), now)
    return row


def archive_board(session: ClassSession, now: datetime | None = None) -> SessionAnalytics:
    """
    Record the current board in the session's analytics before it is cleared.

    A finalized row already contains every question the board can hold, so
    it is left untouched apart from the clear timestamp.
    """
    now = now or timezone.now()
    with transaction.atomic():
        row = _locked_row(session)
        if row.finalized_at is None and not is_active(session, now):
            row = _finalize(row, count_board(session), now)
        elif row.finalized_at is None:
            live = count_board(session)
            SessionAnalytics.objects.filter(pk=row.pk).update(
                total_questions=F("total_questions") + live.total_questions,
                answered=F("answered") + live.answered,
                unanswered=F("unanswered") + live.unanswered,
                important=F("important") + live.important,
                updated_at=now,
            )
            logger.info("Archived %d question(s) of class %s before clearing", live.total_questions, session.pk)
        SessionAnalytics.objects.filter(pk=row.pk).update(last_cleared_at=now)
        row.refresh_from_db()
    return row


def snapshot(session_id, now: datetime | None = None) -> AnalyticsSnapshot:
    """
    Question counts for a session: total, answered, unanswered (pending) and
    important.

    Counts of cleared boards are included.  An ended session is finalized
    on first sight and its frozen counts are returned from then on.
    """
    now = now or timezone.now()
    session = get_session(session_id)

    row = finalize_if_ended(session, now)
    if row is None:
        row = SessionAnalytics.objects.filter(class_session=session).first()
    if row is not None and row.is_final:
        counts = BoardCounts.from_row(row)
    else:
        counts = BoardCounts.from_row(row) + count_board(session)

    return AnalyticsSnapshot(
        class_id=session.pk,
        counts=counts,
        is_final=bool(row and row.is_final),
        finalized_at=row.finalized_at if row else None,
        last_cleared_at=row.last_cleared_at if row else None,
    )
