"""
Views for the analytics app.

Provides the question counts of one class session.  Only the session's
instructor may read them.
"""
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from classes.services import ensure_owner, get_session

from . import services
from .serializers import SessionAnalyticsSerializer


class SessionAnalyticsView(APIView):
    """Counts of total / answered / unanswered / important questions."""

    permission_classes = [permissions.IsAuthenticated]

    @extend_schema(responses=SessionAnalyticsSerializer)
    def get(self, request, class_id):
        session = get_session(class_id)
        ensure_owner(session, request.user, "You do not have permission to view analytics for this class.")
        snap = services.snapshot(session.pk)
        return Response(SessionAnalyticsSerializer(snap).data)
