"""
Initial migration for the classes app.

Creates the ClassSession model owned by an instructor, with a unique
access code and a positive duration.
"""
from django.db import migrations, models
import django.db.models.deletion
from django.conf import settings


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ClassSession",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("subject_name", models.CharField(help_text="Subject of the class.", max_length=255)),
                ("instructor_name", models.CharField(help_text="Instructor display name.", max_length=150)),
                (
                    "access_code",
                    models.CharField(help_text="Code students use to join.", max_length=6, unique=True),
                ),
                ("duration_in_minutes", models.PositiveIntegerField()),
                ("start_time", models.DateTimeField()),
                ("end_time", models.DateTimeField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "instructor",
                    models.ForeignKey(
                        help_text="Instructor who owns the session.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="class_sessions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Class session",
                "verbose_name_plural": "Class sessions",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["instructor", "-created_at"], name="class_instructor_created_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(duration_in_minutes__gt=0),
                        name="class_duration_positive",
                    ),
                ],
            },
        ),
    ]
