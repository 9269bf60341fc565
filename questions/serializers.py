"""
Serializers for the questions app.

Input serializers only coerce types; text, author and status rules are
enforced by `questions.services`.
"""
from rest_framework import serializers

from .models import Question


class QuestionSerializer(serializers.ModelSerializer):
    """A sticky note, enriched with the owning session's display fields."""

    class_id = serializers.IntegerField(source="class_session_id", read_only=True)
    subject_name = serializers.CharField(source="class_session.subject_name", read_only=True)
    instructor_name = serializers.CharField(source="class_session.instructor_name", read_only=True)

    class Meta:
        model = Question
        fields = [
            "id",
            "class_id",
            "subject_name",
            "instructor_name",
            "text",
            "author",
            "color",
            "status",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class QuestionSubmitSerializer(serializers.Serializer):
    class_id = serializers.IntegerField()
    text = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False, default="")
    author = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


class QuestionStatusSerializer(serializers.Serializer):
    status = serializers.CharField()
