import uuid

from django.db import models
from django.utils import timezone

from ..domain.enums import ReminderType
from ..domain.milestones import MILESTONE_TYPES


class StudyLog(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.TextField()
    minutes = models.FloatField()
    date = models.DateField()
    user_id = models.CharField(max_length=64)
    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "study_logs"
        indexes = [
            models.Index(fields=["user_id", "created_at"], name="study_logs_user_created_idx"),
        ]


class Milestone(models.Model):
    user_id = models.CharField(max_length=64)
    milestone_type = models.CharField(
        max_length=32, choices=[(t, t) for t in MILESTONE_TYPES]
    )
    achieved_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "milestones"
        unique_together = (("user_id", "milestone_type"),)


class UserSettings(models.Model):
    user_id = models.CharField(max_length=64, unique=True)
    reminder_enabled = models.BooleanField(default=True)
    reminder_time = models.CharField(max_length=5)
    reminder_type = models.CharField(
        max_length=8, choices=[(t.value, t.value) for t in ReminderType]
    )
    # comma-joined weekday codes, e.g. "Mon,Wed,Fri"
    reminder_days = models.CharField(max_length=32, blank=True)
    updated_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "user_settings"

    @property
    def days(self):
        return self.reminder_days.split(",") if self.reminder_days else []
