"""
Database models for the classes app.

A `ClassSession` is a single time-boxed class meeting opened by an
instructor.  Students find it through its access code.  Whether a session
has ended is never stored: it is derived from `end_time` and the current
time on every read.
"""
from __future__ import annotations

from datetime import datetime

from django.conf import settings
from django.db import models
from django.utils import timezone


class ClassSession(models.Model):
    """
    A class meeting students can post questions to while it is running.

    Fields:
        subject_name: what the class is about, shown on the board header.
        instructor: FK to the owning user.
        instructor_name: display name copied from the instructor at creation.
        access_code: 6-char join code, unique across all stored sessions.
        duration_in_minutes: length of the session.
        start_time/end_time: the window during which questions are accepted.
            `end_time` is fixed at creation.
    """

    subject_name = models.CharField(max_length=255, help_text="Subject of the class.")
    instructor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="class_sessions",
        help_text="Instructor who owns the session.",
    )
    instructor_name = models.CharField(max_length=150, help_text="Instructor display name.")
    access_code = models.CharField(max_length=6, unique=True, help_text="Code students use to join.")
    duration_in_minutes = models.PositiveIntegerField()
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["instructor", "-created_at"], name="class_instructor_created_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(duration_in_minutes__gt=0),
                name="class_duration_positive",
            ),
        ]
        verbose_name = "Class session"
        verbose_name_plural = "Class sessions"

    def is_active_at(self, now: datetime | None = None) -> bool:
        return (now or timezone.now()) <= self.end_time

    @property
    def has_ended(self) -> bool:
        return not self.is_active_at()

    def is_owned_by(self, user) -> bool:
        return bool(user and getattr(user, "is_authenticated", False) and self.instructor_id == user.pk)

    def __str__(self) -> str:
        return f"{self.subject_name} [{self.access_code}]"
