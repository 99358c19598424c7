from datetime import date

import structlog
from ..data.repos import delete_log, insert_log, list_logs
from ..domain.enums import ErrorKind
from ..domain.weekly import (
    calculate_statistics,
    calculate_weekly_total,
    convert_minutes_to_time_string,
    filter_logs_by_date_range,
    generate_weekly_data,
    week_bounds,
)
from ..errors import NotFoundError
from .milestones import recompute_milestones

logger = structlog.get_logger()


def fetch_logs(user_id):
    return list_logs(user_id)


def create_log(user_id, title, minutes, log_date: str):
    log = insert_log(user_id, title, minutes, date.fromisoformat(log_date))
    logger.info("study_log_created",
        user_id=str(user_id),
        log_id=str(log.id),
        minutes=minutes,
        date=log_date,
    )

    recompute_milestones(user_id)
    return log


def remove_log(user_id, log_id):
    deleted = delete_log(user_id, log_id)
    if deleted == 0:
        logger.info("study_log_not_found", user_id=str(user_id), log_id=str(log_id))
        raise NotFoundError("Log not found", kind=ErrorKind.NOT_FOUND)

    logger.info("study_log_deleted", user_id=str(user_id), log_id=str(log_id))
    recompute_milestones(user_id, reset=True)
    return deleted


def weekly_summary(user_id, reference_date: date, language):
    week_start, week_end = week_bounds(reference_date)

    history = [
        {"date": log.date.isoformat(), "minutes": log.minutes} for log in list_logs(user_id)
    ]
    logs = filter_logs_by_date_range(history, week_start.isoformat(), week_end.isoformat())
    buckets = generate_weekly_data(logs, reference_date, language)
    total = calculate_weekly_total(buckets)
    return {
        "days": buckets,
        "total": total,
        "total_time": convert_minutes_to_time_string(total),
        "statistics": calculate_statistics(logs),
    }
