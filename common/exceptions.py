"""
Error taxonomy for the classroom Q&A board.

Services raise these typed errors and never decide on an HTTP status.
The DRF exception handler at the bottom of this module is the single place
where error kinds are mapped onto responses.
"""
from __future__ import annotations

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class ClassBoardError(Exception):
    """Base class for every error raised by the board services."""

    code = "error"
    default_message = "The request could not be completed."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ClassBoardError):
    code = "invalid_input"
    default_message = "The request contains missing or malformed fields."


class InvalidStatus(InvalidInput):
    code = "invalid_status"
    default_message = "Status must be one of pending, answered or important."


class NotFound(ClassBoardError):
    code = "not_found"
    default_message = "Not found."


class SessionNotFound(NotFound):
    code = "session_not_found"
    default_message = "Class not found."


class QuestionNotFound(NotFound):
    code = "question_not_found"
    default_message = "Question not found."


class SessionEnded(ClassBoardError):
    code = "session_ended"
    default_message = "Class session has ended."


class DuplicateQuestion(ClassBoardError):
    code = "duplicate_question"
    default_message = "This question has already been asked in this class."


class Forbidden(ClassBoardError):
    code = "forbidden"
    default_message = "You are not the instructor of this class."


class CodeSpaceExhausted(ClassBoardError):
    code = "code_space_exhausted"
    default_message = "Could not allocate a unique access code, please retry."


class StorageFailure(ClassBoardError):
    code = "storage_failure"
    default_message = "Server error while talking to the database."


STATUS_BY_ERROR = [
    (InvalidInput, status.HTTP_400_BAD_REQUEST),
    (NotFound, status.HTTP_404_NOT_FOUND),
    (SessionEnded, status.HTTP_400_BAD_REQUEST),
    (DuplicateQuestion, status.HTTP_409_CONFLICT),
    (Forbidden, status.HTTP_403_FORBIDDEN),
    (CodeSpaceExhausted, status.HTTP_503_SERVICE_UNAVAILABLE),
    (StorageFailure, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


def status_for(exc: ClassBoardError) -> int:
    for error_class, http_status in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return http_status
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def classboard_exception_handler(exc, context):
    """
    DRF ``EXCEPTION_HANDLER`` that renders board errors as
    ``{"detail": ..., "code": ...}`` and falls back to DRF's own handler
    for everything else (validation errors, auth failures, 404s).
    """
    if isinstance(exc, DatabaseError):
        logger.exception("Unhandled database error in %s", context.get("view").__class__.__name__)
        exc = StorageFailure()

    if isinstance(exc, ClassBoardError):
        http_status = status_for(exc)
        if http_status >= 500:
            logger.error("%s: %s", exc.code, exc.message)
        return Response({"detail": exc.message, "code": exc.code}, status=http_status)

    return drf_exception_handler(exc, context)
