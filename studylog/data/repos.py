import uuid

from django.db import IntegrityError, transaction
from django.utils import timezone

from .models import Milestone, StudyLog, UserSettings


def list_logs(user_id):
    return list(StudyLog.objects.filter(user_id=user_id).order_by("-created_at"))


def insert_log(user_id, title, minutes, log_date):
    return StudyLog.objects.create(
        user_id=user_id, title=title, minutes=minutes, date=log_date
    )


def delete_log(user_id, log_id):
    """
    Delete one log by id, scoped to its owner. Returns the affected row count;
    an id that is unknown, malformed or owned by someone else all yield 0.
    """
    try:
        pk = uuid.UUID(str(log_id))
    except ValueError:
        return 0
    deleted, _ = StudyLog.objects.filter(pk=pk, user_id=user_id).delete()
    return deleted


def delete_all_logs(user_id):
    deleted, _ = StudyLog.objects.filter(user_id=user_id).delete()
    return deleted


def minutes_and_created(user_id):
    return list(
        StudyLog.objects.filter(user_id=user_id)
        .order_by("-created_at")
        .values_list("minutes", "created_at")
    )


def list_milestones(user_id):
    return list(Milestone.objects.filter(user_id=user_id).order_by("achieved_at", "id"))


def achieved_types(user_id):
    return set(
        Milestone.objects.filter(user_id=user_id).values_list("milestone_type", flat=True)
    )


def insert_milestones(user_id, milestone_types):
    """
    Insert each (user, type) pair at most once. A pair that a concurrent
    request already stored is skipped. Returns the types actually inserted.
    """
    inserted = []
    now = timezone.now()
    for milestone_type in milestone_types:
        try:
            with transaction.atomic():
                Milestone.objects.create(
                    user_id=user_id, milestone_type=milestone_type, achieved_at=now
                )
        except IntegrityError:
            continue
        inserted.append(milestone_type)
    return inserted


def delete_milestones(user_id):
    deleted, _ = Milestone.objects.filter(user_id=user_id).delete()
    return deleted


def get_settings(user_id):
    return UserSettings.objects.filter(user_id=user_id).first()


def upsert_settings(user_id, enabled, time, reminder_type, days):
    settings, _ = UserSettings.objects.update_or_create(
        user_id=user_id,
        defaults={
            "reminder_enabled": enabled,
            "reminder_time": time,
            "reminder_type": reminder_type,
            "reminder_days": ",".join(days),
            "updated_at": timezone.now(),
        },
    )
    return settings
