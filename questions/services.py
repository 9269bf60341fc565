"""
Question board of a class session.

Students submit sticky notes while the session is running; the owning
instructor sets their status, deletes single notes or clears the whole
board.  Status is set rather than advanced: any of pending, answered and
important may follow any other.
"""
from __future__ import annotations

import logging
import random
from datetime import datetime

from django.db import IntegrityError, transaction
from django.utils import timezone

from analytics.services import archive_board, finalize_if_ended
from classes.services import ensure_owner, get_session, is_active
from common.exceptions import (
    DuplicateQuestion,
    InvalidInput,
    InvalidStatus,
    QuestionNotFound,
    SessionEnded,
)

from .models import (
    AUTHOR_MAX_LENGTH,
    DEFAULT_AUTHOR,
    QUESTION_MAX_LENGTH,
    STICKY_NOTE_COLORS,
    Question,
)

logger = logging.getLogger(__name__)

ALL_STATUSES = "all"


def _clean_text(text) -> str:
    if not isinstance(text, str):
        raise InvalidInput("Question text is required.")
    text = text.strip()
    if not text:
        raise InvalidInput("Question text is required.")
    if len(text) > QUESTION_MAX_LENGTH:
        raise InvalidInput(f"Question cannot exceed {QUESTION_MAX_LENGTH} characters.")
    return text


def _clean_author(author) -> str:
    if author is None:
        return DEFAULT_AUTHOR
    if not isinstance(author, str):
        raise InvalidInput("Author must be text.")
    author = author.strip()
    if len(author) > AUTHOR_MAX_LENGTH:
        raise InvalidInput(f"Author name cannot exceed {AUTHOR_MAX_LENGTH} characters.")
    return author or DEFAULT_AUTHOR


def _clean_status(value) -> str:
    if not isinstance(value, str) or value not in Question.STATUSES:
        raise InvalidStatus()
    return value


def submit(session_id, text, author=None, now: datetime | None = None) -> Question:
    """
    Post a question to a running session.

    Checks run in order: the session exists, it has not ended, the text is
    valid, the text is new for this session.  Uniqueness is decided by the
    database constraint so two concurrent identical submissions cannot
    both succeed.
    """
    now = now or timezone.now()
    session = get_session(session_id)
    if not is_active(session, now):
        raise SessionEnded()

    text = _clean_text(text)
    author = _clean_author(author)

    try:
        with transaction.atomic():
            question = Question.objects.create(
                class_session=session,
                text=text,
                author=author,
                color=random.choice(STICKY_NOTE_COLORS),
                status=Question.STATUS_PENDING,
                created_at=now,
            )
    except IntegrityError:
        logger.info("Rejected duplicate question for class %s", session.pk)
        raise DuplicateQuestion()

    logger.info("Question %s posted to class %s", question.pk, session.pk)
    return question


def list_questions(session_id, status_filter=None, now: datetime | None = None):
    """
    The board of a session, most recent first, optionally one status only.

    ``None``, ``""`` and ``"all"`` mean every status.  Safe to poll: the
    board is never modified here, though an ended session gets its
    analytics finalized on first sight.
    """
    session = get_session(session_id)
    qs = Question.objects.filter(class_session=session).select_related("class_session")
    if status_filter not in (None, "", ALL_STATUSES):
        qs = qs.filter(status=_clean_status(status_filter))

    finalize_if_ended(session, now)
    return list(qs.order_by("-created_at", "-id"))


def get_question(question_id) -> Question:
    try:
        question_id = int(question_id)
    except (TypeError, ValueError):
        raise QuestionNotFound()
    question = Question.objects.select_related("class_session").filter(pk=question_id).first()
    if question is None:
        raise QuestionNotFound()
    return question


def set_status(question_id, new_status, requester) -> Question:
    question = get_question(question_id)
    new_status = _clean_status(new_status)
    ensure_owner(question.class_session, requester, "Only the class instructor can change a question's status.")

    if question.status != new_status:
        previous = question.status
        question.status = new_status
        question.save(update_fields=["status", "updated_at"])
        logger.info("Question %s status %s -> %s by user %s", question.pk, previous, new_status, requester.pk)
    return question


def delete_question(question_id, requester) -> None:
    question = get_question(question_id)
    ensure_owner(question.class_session, requester, "Only the class instructor can delete a question.")
    question_pk = question.pk
    question.delete()
    logger.info("Question %s deleted by user %s", question_pk, requester.pk)


def clear_board(session_id, requester, now: datetime | None = None) -> int:
    """
    Remove every question of a session, keeping their counts in analytics.

    Returns the number of questions deleted.
    """
    now = now or timezone.now()
    session = get_session(session_id)
    ensure_owner(session, requester, "Only the class instructor can clear the board.")

    with transaction.atomic():
        archive_board(session, now)
        deleted, _ = Question.objects.filter(class_session=session).delete()

    logger.info("Cleared %d question(s) from class %s by user %s", deleted, session.pk, requester.pk)
    return deleted
