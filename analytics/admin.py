"""
Django admin configuration for the analytics app.

Registers SessionAnalytics to aid inspection of archived and final
board counts.
"""
from django.contrib import admin
from .models import SessionAnalytics


@admin.register(SessionAnalytics)
class SessionAnalyticsAdmin(admin.ModelAdmin):
    list_display = (
        "class_session",
        "total_questions",
        "answered",
        "unanswered",
        "important",
        "finalized_at",
        "last_cleared_at",
    )
    list_filter = ("finalized_at",)
    readonly_fields = ("created_at", "updated_at")
