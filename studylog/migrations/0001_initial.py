import uuid

from django.db import migrations, models
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StudyLog",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.TextField()),
                ("minutes", models.FloatField()),
                ("date", models.DateField()),
                ("user_id", models.CharField(max_length=64)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "study_logs",
                "indexes": [models.Index(fields=["user_id", "created_at"], name="study_logs_user_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="Milestone",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=64)),
                (
                    "milestone_type",
                    models.CharField(
                        choices=[
                            ("streak_7", "streak_7"),
                            ("streak_14", "streak_14"),
                            ("streak_30", "streak_30"),
                            ("streak_100", "streak_100"),
                            ("hours_100", "hours_100"),
                            ("hours_200", "hours_200"),
                            ("hours_300", "hours_300"),
                            ("hours_500", "hours_500"),
                        ],
                        max_length=32,
                    ),
                ),
                ("achieved_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "milestones",
                "unique_together": {("user_id", "milestone_type")},
            },
        ),
        migrations.CreateModel(
            name="UserSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=64, unique=True)),
                ("reminder_enabled", models.BooleanField(default=True)),
                ("reminder_time", models.CharField(max_length=5)),
                (
                    "reminder_type",
                    models.CharField(
                        choices=[("push", "push"), ("email", "email"), ("both", "both")],
                        max_length=8,
                    ),
                ),
                ("reminder_days", models.CharField(blank=True, max_length=32)),
                ("updated_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "user_settings",
            },
        ),
    ]
