"""
Database models for the analytics app.

The ``SessionAnalytics`` model stores question counters for one class
session.  Counts of cleared boards are archived into the row, and the
first time the session is observed as ended the row is finalized and its
counters stop changing.  The one-to-one link guarantees one row per
session.
"""
from __future__ import annotations

from django.db import models


class SessionAnalytics(models.Model):
    """Archived or final question counts for a class session."""

    class_session = models.OneToOneField(
        "classes.ClassSession",
        on_delete=models.CASCADE,
        related_name="analytics",
    )
    total_questions = models.PositiveIntegerField(default=0)
    answered = models.PositiveIntegerField(default=0)
    unanswered = models.PositiveIntegerField(default=0)
    important = models.PositiveIntegerField(default=0)
    finalized_at = models.DateTimeField(null=True, blank=True, help_text="When the session was seen as ended.")
    last_cleared_at = models.DateTimeField(null=True, blank=True, help_text="Last board clear archived here.")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Session analytics"
        verbose_name_plural = "Session analytics"

    @property
    def is_final(self) -> bool:
        return self.finalized_at is not None

    def __str__(self) -> str:
        state = "final" if self.is_final else "archived"
        return f"Analytics for class {self.class_session_id} ({state}, {self.total_questions} questions)"
