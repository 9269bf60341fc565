"""
Admin registration for the questions app.

Registers Question for moderation and review of boards.
"""

from django.contrib import admin

from .models import Question


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "class_session", "status", "author", "short_question", "color", "created_at")
    list_filter = ("status", "class_session")
    search_fields = ("text", "author", "class_session__subject_name", "class_session__access_code")
    readonly_fields = ("created_at", "updated_at")
    date_hierarchy = "created_at"

    @admin.display(description="question")
    def short_question(self, obj: Question) -> str:
        return (obj.text or "")[:80]
