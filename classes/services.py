"""
Class session lifecycle.

Creation, lookup by access code, the derived active/ended state and
owner-only deletion.  Functions here raise the typed errors from
`common.exceptions`; the views decide how those reach the client.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta

from django.conf import settings
from django.db import IntegrityError, transaction
from django.utils import timezone

from common.exceptions import (
    CodeSpaceExhausted,
    Forbidden,
    InvalidInput,
    SessionEnded,
    SessionNotFound,
)

from .access_codes import generate_access_code, looks_like_access_code
from .models import ClassSession

logger = logging.getLogger(__name__)

SUBJECT_NAME_MAX_LENGTH = 255
# one week
DURATION_MAX_MINUTES = 10080


def is_active(session: ClassSession, now: datetime | None = None) -> bool:
    """A session accepts questions up to and including its end time."""
    return session.is_active_at(now)


def ensure_owner(session: ClassSession, requester, message: str | None = None) -> None:
    """The one authorization rule for every instructor action on a session."""
    if not session.is_owned_by(requester):
        raise Forbidden(message)


def instructor_display_name(user) -> str:
    max_length = ClassSession._meta.get_field("instructor_name").max_length
    name = getattr(user, "get_full_name", lambda: "")() or user.username or f"User {user.pk}"
    return name[:max_length].rstrip()


def _clean_duration(value) -> int:
    if isinstance(value, bool):
        raise InvalidInput("Duration (in minutes) must be a positive whole number.")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int) or value <= 0:
        raise InvalidInput("Duration (in minutes) must be a positive whole number.")
    if value > DURATION_MAX_MINUTES:
        raise InvalidInput(f"Duration cannot exceed {DURATION_MAX_MINUTES} minutes.")
    return value


def _code_in_use(code: str) -> bool:
    return ClassSession.objects.filter(access_code=code).exists()


def create_session(subject_name: str, duration_minutes, instructor, now: datetime | None = None) -> ClassSession:
    """
    Open a new class session owned by ``instructor``.

    The access code is re-drawn while it collides with a stored session,
    including when a concurrent creator wins the unique index between our
    check and our insert.  After ``CLASSBOARD_ACCESS_CODE_MAX_ATTEMPTS``
    draws the call gives up with ``CodeSpaceExhausted``.
    """
    subject = (subject_name or "").strip()
    if not subject:
        raise InvalidInput("Subject name is required.")
    if len(subject) > SUBJECT_NAME_MAX_LENGTH:
        raise InvalidInput(f"Subject name cannot exceed {SUBJECT_NAME_MAX_LENGTH} characters.")
    duration = _clean_duration(duration_minutes)
    if not instructor or not getattr(instructor, "is_authenticated", False):
        raise Forbidden("Only a signed-in instructor can create a class.")

    start_time = now or timezone.now()
    end_time = start_time + timedelta(minutes=duration)
    instructor_name = instructor_display_name(instructor)

    max_attempts = settings.CLASSBOARD_ACCESS_CODE_MAX_ATTEMPTS
    for attempt in range(1, max_attempts + 1):
        code = generate_access_code()
        if _code_in_use(code):
            logger.warning("Access code collision on attempt %d/%d", attempt, max_attempts)
            continue
        try:
            with transaction.atomic():
                session = ClassSession.objects.create(
                    subject_name=subject,
                    instructor=instructor,
                    instructor_name=instructor_name,
                    access_code=code,
                    duration_in_minutes=duration,
                    start_time=start_time,
                    end_time=end_time,
                )
        except IntegrityError:
            # another creator took the same code after our check
            logger.warning("Access code %s taken concurrently on attempt %d/%d", code, attempt, max_attempts)
            continue
        logger.info(
            "Class %s created by user %s (code=%s, ends %s)",
            session.pk, instructor.pk, code, end_time.isoformat(),
        )
        return session

    logger.error("Gave up allocating an access code after %d attempts", max_attempts)
    raise CodeSpaceExhausted()


def get_session(session_id) -> ClassSession:
    try:
        session_id = int(session_id)
    except (TypeError, ValueError):
        raise SessionNotFound()
    session = ClassSession.objects.filter(pk=session_id).first()
    if session is None:
        raise SessionNotFound()
    return session


def resolve_by_access_code(code: str) -> ClassSession:
    """
    Look a session up by its access code.

    Ended sessions are returned too; callers check activity themselves.
    """
    code = (code or "").strip()
    if not code:
        raise InvalidInput("Access code is required.")
    if not looks_like_access_code(code):
        raise SessionNotFound()
    session = ClassSession.objects.filter(access_code=code).first()
    if session is None:
        raise SessionNotFound()
    return session


def join_session(code: str, now: datetime | None = None) -> ClassSession:
    """Resolve ``code`` for a student; an ended session is reported, not joined."""
    session = resolve_by_access_code(code)
    if not is_active(session, now):
        raise SessionEnded()
    return session


def list_instructor_sessions(instructor):
    return ClassSession.objects.filter(instructor_id=instructor.pk).order_by("-created_at", "-id")


def delete_session(session: ClassSession, requester) -> None:
    """
    Delete ``session`` together with its questions and analytics.

    Only the owning instructor may delete a session.
    """
    ensure_owner(session, requester, "User not authorized to delete this class.")
    session_id = session.pk
    with transaction.atomic():
        session.delete()
    logger.info("Class %s deleted by user %s", session_id, requester.pk)
