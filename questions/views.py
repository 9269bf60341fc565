"""
Q&A board REST endpoints.

- POST   /api/questions/                          submit (student, public)
- GET    /api/questions/{id}/                     one question (public)
- DELETE /api/questions/{id}/                     delete one (instructor)
- PATCH  /api/questions/{id}/status/              set status (instructor)
- GET    /api/questions/class/{class_id}/         board, ?status=all|pending|answered|important
- DELETE /api/questions/class/{class_id}/clear/   clear the board (instructor)

The board list is polled by every client every few seconds, so it is
unpaginated and unthrottled.
"""
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import QuestionSerializer, QuestionStatusSerializer, QuestionSubmitSerializer


class QuestionViewSet(viewsets.ViewSet):
    def get_permissions(self):
        if self.action in ["create", "retrieve"]:
            return [AllowAny()]
        return [IsAuthenticated()]

    @extend_schema(request=QuestionSubmitSerializer, responses=QuestionSerializer)
    def create(self, request):
        ser = QuestionSubmitSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        question = services.submit(
            ser.validated_data["class_id"],
            ser.validated_data["text"],
            ser.validated_data["author"],
        )
        return Response(QuestionSerializer(question).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses=QuestionSerializer)
    def retrieve(self, request, pk=None):
        return Response(QuestionSerializer(services.get_question(pk)).data)

    def destroy(self, request, pk=None):
        services.delete_question(pk, request.user)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(request=QuestionStatusSerializer, responses=QuestionSerializer)
    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        ser = QuestionStatusSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        question = services.set_status(pk, ser.validated_data["status"], request.user)
        return Response(QuestionSerializer(question).data)


class ClassQuestionListView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = []

    @extend_schema(
        parameters=[OpenApiParameter("status", OpenApiTypes.STR, required=False)],
        responses=QuestionSerializer(many=True),
    )
    def get(self, request, class_id):
        questions = services.list_questions(class_id, request.query_params.get("status"))
        return Response(QuestionSerializer(questions, many=True).data)


class ClearBoardView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=None, responses={200: OpenApiTypes.OBJECT})
    def delete(self, request, class_id):
        deleted = services.clear_board(class_id, request.user)
        return Response(
            {"detail": "All questions cleared successfully.", "deleted": deleted},
            status=status.HTTP_200_OK,
        )
