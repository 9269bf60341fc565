"""
App configuration for the classes app.

No special startup logic is required at this time.
"""

from django.apps import AppConfig


class ClassesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "classes"
    verbose_name = "Class sessions"
