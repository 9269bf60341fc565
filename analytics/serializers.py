"""
Serializers for the analytics app.

Expose a session's question counts to the API.  Fields are read-only.
"""
from __future__ import annotations

from rest_framework import serializers


class SessionAnalyticsSerializer(serializers.Serializer):
    """Serializer for ``AnalyticsSnapshot`` values."""

    class_id = serializers.IntegerField(read_only=True)
    total_questions = serializers.IntegerField(read_only=True)
    answered = serializers.IntegerField(read_only=True)
    unanswered = serializers.IntegerField(read_only=True)
    important = serializers.IntegerField(read_only=True)
    is_final = serializers.BooleanField(read_only=True)
    finalized_at = serializers.DateTimeField(read_only=True, allow_null=True)
    last_cleared_at = serializers.DateTimeField(read_only=True, allow_null=True)
