from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Mapping, Sequence, Tuple

from ..config import DAY_LABELS, DEFAULT_LANGUAGE
from ..utils.numbers import round_half_up


@dataclass(frozen=True)
class WeeklyBucket:
    day: str
    date: str
    minutes: float
    is_today: bool


@dataclass(frozen=True)
class TimeParts:
    hours: int
    minutes: float


@dataclass(frozen=True)
class Statistics:
    total_minutes: float
    average_minutes: int
    max_minutes: float
    min_minutes: float
    total_sessions: int


def sunday_weekday(day: date) -> int:
    """Weekday number with Sunday as 0."""
    return day.isoweekday() % 7


def week_bounds(reference_date: date) -> Tuple[date, date]:
    """
    Sunday and Saturday of the week containing reference_date. Raises
    OverflowError when that week runs past date.min or date.max.
    """
    start = reference_date - timedelta(days=sunday_weekday(reference_date))
    return start, start + timedelta(days=6)


def calculate_day_total(logs: Sequence[Mapping], date_str: str) -> float:
    # Plain string equality: "2026-02-16T10:00" never matches "2026-02-16"
    return sum(log["minutes"] for log in logs if log["date"] == date_str)


def generate_weekly_data(
    logs: Sequence[Mapping], reference_date, language: str = DEFAULT_LANGUAGE
) -> List[WeeklyBucket]:
    """
    Bucket logs into the Sunday-to-Saturday week containing reference_date.
    Always returns seven buckets.
    """
    if isinstance(reference_date, datetime):
        reference_date = reference_date.date()
    labels = DAY_LABELS.get(language, DAY_LABELS[DEFAULT_LANGUAGE])
    today_index = sunday_weekday(reference_date)
    start_of_week, _ = week_bounds(reference_date)

    buckets = []
    for index, label in enumerate(labels):
        date_str = (start_of_week + timedelta(days=index)).isoformat()
        buckets.append(
            WeeklyBucket(
                day=label,
                date=date_str,
                minutes=calculate_day_total(logs, date_str),
                is_today=index == today_index,
            )
        )
    return buckets


def calculate_weekly_total(buckets: Sequence[WeeklyBucket]) -> float:
    return sum(b.minutes for b in buckets)


def convert_minutes_to_time_string(total_minutes) -> TimeParts:
    return TimeParts(hours=int(total_minutes // 60), minutes=total_minutes % 60)


def filter_logs_by_date_range(logs: Sequence[Mapping], start_date: str, end_date: str) -> list:
    return [log for log in logs if start_date <= log["date"] <= end_date]


def calculate_statistics(logs: Sequence[Mapping]) -> Statistics:
    if not logs:
        return Statistics(0, 0, 0, 0, 0)

    minutes = [log["minutes"] for log in logs]
    total = sum(minutes)
    return Statistics(
        total_minutes=total,
        average_minutes=round_half_up(total / len(minutes)),
        max_minutes=max(minutes),
        min_minutes=min(minutes),
        total_sessions=len(minutes),
    )
