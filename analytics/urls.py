"""
URL configuration for the analytics app.

Include under ``/api/analytics/`` in the project-level URL config.
"""
from django.urls import path
from .views import SessionAnalyticsView


urlpatterns = [
    path("classes/<int:class_id>/", SessionAnalyticsView.as_view(), name="analytics-class"),
]
