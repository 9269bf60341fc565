from django.urls import path
from rest_framework.routers import SimpleRouter

from .views import ClassQuestionListView, ClearBoardView, QuestionViewSet

router = SimpleRouter()
router.register(r"questions", QuestionViewSet, basename="question")

urlpatterns = [
    path("questions/class/<int:class_id>/", ClassQuestionListView.as_view(), name="class-questions"),
    path("questions/class/<int:class_id>/clear/", ClearBoardView.as_view(), name="class-questions-clear"),
] + router.urls
