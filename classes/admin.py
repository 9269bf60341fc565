"""
Admin registration for the classes app.
"""

from django.contrib import admin

from .models import ClassSession


@admin.register(ClassSession)
class ClassSessionAdmin(admin.ModelAdmin):
    list_display = ("id", "subject_name", "instructor_name", "access_code", "start_time", "end_time", "is_running")
    search_fields = ("subject_name", "access_code", "instructor_name", "instructor__username")
    readonly_fields = ("access_code", "start_time", "end_time", "created_at", "updated_at")
    date_hierarchy = "start_time"

    @admin.display(boolean=True, description="running")
    def is_running(self, obj: ClassSession) -> bool:
        return obj.is_active_at()
