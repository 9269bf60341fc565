"""
Database models for the questions app.

A `Question` is a sticky note posted by a student to a class session.
The board never holds the same text twice for one session; that rule is a
database constraint so concurrent submissions cannot both get through.

Indexes + ordering are chosen for the polling query (one session,
latest-first, optional status filter).
"""
from django.db import models
from django.utils import timezone

DEFAULT_AUTHOR = "Anonymous Student"
QUESTION_MAX_LENGTH = 500
AUTHOR_MAX_LENGTH = 100

STICKY_NOTE_COLORS = (
    "#FFE135",
    "#FF6B6B",
    "#4ECDC4",
    "#45B7D1",
    "#96CEB4",
    "#FFEAA7",
    "#DDA0DD",
    "#98D8C8",
)


class Question(models.Model):
    """
    A student's question on the board of a class session.

    Fields:
        class_session: FK to the owning session.
        text: trimmed question text, 1-500 characters.
        author: free-text name, "Anonymous Student" when left blank.
        color: sticky-note color, cosmetic only.
        status: pending / answered / important, set by the instructor.
    """

    STATUS_PENDING = "pending"
    STATUS_ANSWERED = "answered"
    STATUS_IMPORTANT = "important"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_ANSWERED, "Answered"),
        (STATUS_IMPORTANT, "Important"),
    ]
    STATUSES = frozenset(value for value, _ in STATUS_CHOICES)

    class_session = models.ForeignKey(
        "classes.ClassSession",
        on_delete=models.CASCADE,
        related_name="questions",
        help_text="Class session this question was posted to.",
    )
    text = models.CharField(max_length=QUESTION_MAX_LENGTH, help_text="Question text.")
    author = models.CharField(max_length=AUTHOR_MAX_LENGTH, default=DEFAULT_AUTHOR)
    color = models.CharField(
        max_length=7,
        choices=[(c, c) for c in STICKY_NOTE_COLORS],
        default=STICKY_NOTE_COLORS[0],
    )
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)
    created_at = models.DateTimeField(default=timezone.now, help_text="Creation timestamp.")
    updated_at = models.DateTimeField(auto_now=True, help_text="Last update timestamp.")

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["class_session", "text"],
                name="question_unique_text_per_class",
            ),
        ]
        indexes = [
            models.Index(fields=["class_session", "-created_at"], name="question_class_created_idx"),
            models.Index(fields=["class_session", "status"], name="question_class_status_idx"),
        ]
        verbose_name = "Question"
        verbose_name_plural = "Questions"

    def __str__(self) -> str:
        return f"[{self.class_session_id}] {self.status}: {self.text[:50]}"
