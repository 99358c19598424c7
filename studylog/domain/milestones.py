from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, List, Optional

from ..config import DEFAULT_LANGUAGE, MILESTONE_LABELS, MILESTONES, STREAK_WINDOW_DAYS
from ..utils.numbers import round_half_up
from .enums import MilestoneCategory


@dataclass(frozen=True)
class MilestoneDefinition:
    type: str
    category: MilestoneCategory
    target: int


@dataclass(frozen=True)
class Progress:
    percentage: int
    remaining: float


@dataclass(frozen=True)
class PendingMilestone:
    type: str
    label: str
    category: MilestoneCategory
    current: float
    target: int
    percentage: int
    remaining: float


DEFINITIONS = tuple(
    MilestoneDefinition(type_, MilestoneCategory(category), target)
    for type_, category, target in MILESTONES
)
MILESTONE_TYPES = tuple(d.type for d in DEFINITIONS)


def _metric(definition, current_streak, total_hours):
    if definition.category == MilestoneCategory.STREAK:
        return current_streak
    return total_hours


def check_milestones(current_streak, total_hours, already_achieved: Iterable[str]) -> List[str]:
    """Milestone types reached (threshold inclusive) and not yet achieved, in table order."""
    achieved = set(already_achieved)
    return [
        d.type
        for d in DEFINITIONS
        if d.type not in achieved and _metric(d, current_streak, total_hours) >= d.target
    ]


def calculate_progress(current, target) -> Progress:
    percentage = min(max(round_half_up(current / target * 100), 0), 100)
    remaining = max(target - current, 0)
    return Progress(percentage, remaining)


def format_milestone_label(milestone_type: str, language: str = DEFAULT_LANGUAGE) -> str:
    labels = MILESTONE_LABELS.get(language, MILESTONE_LABELS[DEFAULT_LANGUAGE])
    return labels.get(milestone_type, milestone_type)


def get_pending_milestones(
    current_streak, total_hours, already_achieved: Iterable[str], language: str = DEFAULT_LANGUAGE
) -> List[PendingMilestone]:
    achieved = set(already_achieved)
    pending = []
    for d in DEFINITIONS:
        if d.type in achieved:
            continue
        current = _metric(d, current_streak, total_hours)
        progress = calculate_progress(current, d.target)
        pending.append(
            PendingMilestone(
                type=d.type,
                label=format_milestone_label(d.type, language),
                category=d.category,
                current=current,
                target=d.target,
                percentage=progress.percentage,
                remaining=progress.remaining,
            )
        )
    # sorted() is stable, so ties keep table order
    return sorted(pending, key=lambda p: p.percentage)


def is_streak_valid(last_log_date: Optional[date], check_date: date) -> bool:
    """A streak survives while the last log was today or yesterday."""
    if last_log_date is None:
        return False
    return (check_date - last_log_date).days <= 1


def approximate_streak(log_days: Iterable[date], today: date) -> int:
    """
    Count distinct days inside the trailing window (today, yesterday) that
    carry at least one log.

    This is not a consecutive-day run; it caps at STREAK_WINDOW_DAYS.
    """
    window = {today - timedelta(days=i) for i in range(STREAK_WINDOW_DAYS)}
    return len(window.intersection(log_days))
