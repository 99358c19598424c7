from datetime import date, datetime

import pytest

from studylog.domain.weekly import (
    Statistics,
    calculate_day_total,
    calculate_statistics,
    calculate_weekly_total,
    convert_minutes_to_time_string,
    filter_logs_by_date_range,
    generate_weekly_data,
    week_bounds,
)

# Wednesday
REFERENCE = date(2026, 2, 18)

LOGS = [
    {"date": "2026-02-15", "minutes": 30},   # Sunday, in week
    {"date": "2026-02-18", "minutes": 60},
    {"date": "2026-02-18", "minutes": 45},
    {"date": "2026-02-21", "minutes": 20},   # Saturday, in week
    {"date": "2026-02-14", "minutes": 999},  # previous Saturday
    {"date": "2026-02-22", "minutes": 999},  # next Sunday
    {"date": "2026-02-18T09:00:00", "minutes": 999},  # never matches
]


def test_week_runs_sunday_to_saturday():
    buckets = generate_weekly_data(LOGS, REFERENCE, language="en")

    assert [b.day for b in buckets] == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert buckets[0].date == "2026-02-15"
    assert buckets[-1].date == "2026-02-21"
    assert [b.is_today for b in buckets] == [False, False, False, True, False, False, False]


def test_buckets_sum_by_exact_date_string():
    buckets = generate_weekly_data(LOGS, REFERENCE, language="en")

    assert [b.minutes for b in buckets] == [30, 0, 0, 105, 0, 0, 20]
    assert calculate_weekly_total(buckets) == 155


@pytest.mark.parametrize("count", [0, 1, 50])
def test_always_seven_buckets(count):
    logs = [{"date": "2026-02-16", "minutes": 10}] * count
    buckets = generate_weekly_data(logs, REFERENCE)

    assert len(buckets) == 7
    assert calculate_weekly_total(buckets) == 10 * count


def test_sunday_reference_starts_its_own_week():
    buckets = generate_weekly_data([], datetime(2026, 2, 22, 23, 59))

    assert buckets[0].date == "2026-02-22"
    assert buckets[0].is_today
    assert buckets[0].day == "日"


def test_day_total():
    assert calculate_day_total(LOGS, "2026-02-18") == 105
    assert calculate_day_total(LOGS, "2026-01-01") == 0


def test_time_string():
    parts = convert_minutes_to_time_string(155)
    assert (parts.hours, parts.minutes) == (2, 35)
    parts = convert_minutes_to_time_string(1440)
    assert (parts.hours, parts.minutes) == (24, 0)


def test_filter_by_range_is_inclusive():
    logs = filter_logs_by_date_range(LOGS, "2026-02-15", "2026-02-18")
    assert [log["minutes"] for log in logs] == [30, 60, 45]


def test_statistics():
    stats = calculate_statistics([{"minutes": 30}, {"minutes": 60}, {"minutes": 45}])

    assert stats == Statistics(
        total_minutes=135, average_minutes=45, max_minutes=60, min_minutes=30, total_sessions=3
    )


def test_statistics_average_rounds_half_up():
    assert calculate_statistics([{"minutes": 1}, {"minutes": 2}]).average_minutes == 2


def test_statistics_of_nothing_is_all_zero():
    assert calculate_statistics([]) == Statistics(0, 0, 0, 0, 0)


def test_week_bounds():
    assert week_bounds(REFERENCE) == (date(2026, 2, 15), date(2026, 2, 21))
    assert week_bounds(date(2026, 2, 15)) == (date(2026, 2, 15), date(2026, 2, 21))


@pytest.mark.parametrize("day", [date.min, date.max])
def test_week_bounds_past_the_calendar_overflow(day):
    with pytest.raises(OverflowError):
        week_bounds(day)
