"""
Initial migration for the analytics app.

Creates the SessionAnalytics model holding archived/final question
counts, one row per class session.
"""
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("classes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="SessionAnalytics",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("total_questions", models.PositiveIntegerField(default=0)),
                ("answered", models.PositiveIntegerField(default=0)),
                ("unanswered", models.PositiveIntegerField(default=0)),
                ("important", models.PositiveIntegerField(default=0)),
                (
                    "finalized_at",
                    models.DateTimeField(blank=True, help_text="When the session was seen as ended.", null=True),
                ),
                (
                    "last_cleared_at",
                    models.DateTimeField(blank=True, help_text="Last board clear archived here.", null=True),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "class_session",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="analytics",
                        to="classes.classsession",
                    ),
                ),
            ],
            options={
                "verbose_name": "Session analytics",
                "verbose_name_plural": "Session analytics",
            },
        ),
    ]
