"""
Views for the classes app.

- POST   /api/classes/          create a session (instructor)
- GET    /api/classes/          the instructor's own sessions, newest first
- GET    /api/classes/{id}/     session details (public)
- DELETE /api/classes/{id}/     delete a session and its board (owner)
- POST   /api/classes/join/     resolve an access code for a student (public)
"""
from drf_spectacular.utils import extend_schema
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from common.permissions import IsAuthenticatedForWrites

from . import services
from .models import ClassSession
from .serializers import (
    ClassSessionCreateSerializer,
    ClassSessionSerializer,
    JoinClassSerializer,
    JoinedClassSerializer,
)


class ClassSessionViewSet(
    mixins.CreateModelMixin,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = ClassSessionSerializer
    permission_classes = [IsAuthenticatedForWrites]
    queryset = ClassSession.objects.all()  # required by DRF, but we override get_queryset()

    def get_permissions(self):
        if self.action == "list":
            return [IsAuthenticated()]
        if self.action in ["retrieve", "join"]:
            return [AllowAny()]
        return super().get_permissions()

    def get_queryset(self):
        if self.action == "list":
            return services.list_instructor_sessions(self.request.user)
        return ClassSession.objects.all()

    def get_object(self):
        return services.get_session(self.kwargs["pk"])

    @extend_schema(request=ClassSessionCreateSerializer, responses=ClassSessionSerializer)
    def create(self, request, *args, **kwargs):
        ser = ClassSessionCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        session = services.create_session(
            ser.validated_data["subject_name"],
            ser.validated_data["duration_in_minutes"],
            request.user,
        )
        return Response(self.get_serializer(session).data, status=status.HTTP_201_CREATED)

    def perform_destroy(self, instance):
        services.delete_session(instance, self.request.user)

    @extend_schema(request=JoinClassSerializer, responses=JoinedClassSerializer)
    @action(detail=False, methods=["post"])
    def join(self, request):
        """
        Students enter an access code; an ended session is reported as such
        rather than joined.
        """
        ser = JoinClassSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        session = services.join_session(ser.validated_data["access_code"])
        return Response(JoinedClassSerializer(session).data, status=status.HTTP_200_OK)
