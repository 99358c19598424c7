from django.db import transaction
import structlog
from ..data.repos import (
    achieved_types,
    delete_milestones,
    insert_milestones,
    list_milestones,
    minutes_and_created,
)
from ..domain.milestones import (
    approximate_streak,
    check_milestones,
    format_milestone_label,
    get_pending_milestones,
    is_streak_valid,
)
from ..utils.numbers import round_half_up
from ..utils.time import local_date_of, local_today

logger = structlog.get_logger()


def compute_stats(user_id, today=None):
    """Return (current_streak, total_hours) from the user's full log history."""
    today = today or local_today()
    rows = minutes_and_created(user_id)
    total_hours = sum(minutes / 60 for minutes, _ in rows)
    log_days = {local_date_of(created) for _, created in rows}
    if not is_streak_valid(max(log_days, default=None), today):
        return 0, total_hours
    return approximate_streak(log_days, today), total_hours


def check_and_persist(user_id, current_streak, total_hours):
    already = achieved_types(user_id)
    new_types = check_milestones(current_streak, total_hours, already)
    if new_types:
        new_types = insert_milestones(user_id, new_types)
        logger.info("milestones_unlocked",
            user_id=str(user_id),
            milestone_types=new_types,
            current_streak=current_streak,
            total_hours=total_hours,
        )
    return new_types


def recompute_milestones(user_id, reset=False):
    """
    Best-effort refresh after a log changes. Runs in its own savepoint;
    failures are logged and never reach the caller.
    """
    try:
        with transaction.atomic():
            if reset:
                delete_milestones(user_id)
            streak, total_hours = compute_stats(user_id)
            return check_and_persist(user_id, streak, total_hours)
    except Exception:
        logger.exception("milestone_recompute_failed", user_id=str(user_id), reset=reset)
        return []


def milestone_overview(user_id, language):
    records = list_milestones(user_id)
    streak, total_hours = compute_stats(user_id)
    achieved = [
        {
            "type": m.milestone_type,
            "label": format_milestone_label(m.milestone_type, language),
            "achieved_at": m.achieved_at,
        }
        for m in records
    ]
    pending = get_pending_milestones(
        streak, total_hours, {m.milestone_type for m in records}, language
    )
    return {
        "achieved": achieved,
        "pending": pending,
        "stats": {"current_streak": streak, "total_hours": round_half_up(total_hours * 100) / 100},
    }
