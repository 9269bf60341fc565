"""
Initial migration for the questions app.

Creates the Question model with a unique (class_session, text) constraint
so duplicate submissions are rejected by the database itself.
"""
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("classes", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("text", models.CharField(help_text="Question text.", max_length=500)),
                ("author", models.CharField(default="Anonymous Student", max_length=100)),
                (
                    "color",
                    models.CharField(
                        choices=[
                            ("#FFE135", "#FFE135"),
                            ("#FF6B6B", "#FF6B6B"),
                            ("#4ECDC4", "#4ECDC4"),
                            ("#45B7D1", "#45B7D1"),
                            ("#96CEB4", "#96CEB4"),
                            ("#FFEAA7", "#FFEAA7"),
                            ("#DDA0DD", "#DDA0DD"),
                            ("#98D8C8", "#98D8C8"),
                        ],
                        default="#FFE135",
                        max_length=7,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("answered", "Answered"),
                            ("important", "Important"),
                        ],
                        default="pending",
                        max_length=16,
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(default=django.utils.timezone.now, help_text="Creation timestamp."),
                ),
                ("updated_at", models.DateTimeField(auto_now=True, help_text="Last update timestamp.")),
                (
                    "class_session",
                    models.ForeignKey(
                        help_text="Class session this question was posted to.",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="questions",
                        to="classes.classsession",
                    ),
                ),
            ],
            options={
                "verbose_name": "Question",
                "verbose_name_plural": "Questions",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["class_session", "-created_at"], name="question_class_created_idx"),
                    models.Index(fields=["class_session", "status"], name="question_class_status_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("class_session", "text"),
                        name="question_unique_text_per_class",
                    ),
                ],
            },
        ),
    ]
