"""
Serializers for the classes app.

Input serializers only coerce types; the lifecycle rules (non-empty
subject, positive duration) are enforced by `classes.services`.
"""
from rest_framework import serializers

from .models import ClassSession
from .services import DURATION_MAX_MINUTES


class ClassSessionSerializer(serializers.ModelSerializer):
    instructor_id = serializers.IntegerField(read_only=True)
    is_active = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = ClassSession
        fields = [
            "id",
            "subject_name",
            "instructor_id",
            "instructor_name",
            "access_code",
            "duration_in_minutes",
            "start_time",
            "end_time",
            "is_active",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_is_active(self, obj) -> bool:
        return obj.is_active_at(self.context.get("now"))


class ClassSessionCreateSerializer(serializers.Serializer):
    subject_name = serializers.CharField(required=False, allow_blank=True, default="")
    duration_in_minutes = serializers.IntegerField(
        required=False, allow_null=True, default=None, max_value=DURATION_MAX_MINUTES
    )


class JoinClassSerializer(serializers.Serializer):
    access_code = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=True)


class JoinedClassSerializer(serializers.ModelSerializer):
    """Summary a student sees after entering a valid code."""

    class_id = serializers.IntegerField(source="id", read_only=True)

    class Meta:
        model = ClassSession
        fields = ["class_id", "subject_name", "instructor_name", "end_time"]
        read_only_fields = fields
