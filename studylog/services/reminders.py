import structlog
from ..config import REMINDER_DEFAULTS
from ..data.repos import get_settings, upsert_settings
from ..domain.enums import ErrorKind
from ..errors import ValidationError

logger = structlog.get_logger()


def get_reminder_settings(user_id):
    """Stored settings as a plain dict, or the defaults when none are stored."""
    row = get_settings(user_id)
    if row is None:
        return dict(REMINDER_DEFAULTS, days=list(REMINDER_DEFAULTS["days"]))
    return {
        "enabled": row.reminder_enabled,
        "time": row.reminder_time,
        "type": row.reminder_type,
        "days": row.days,
        "updated_at": row.updated_at,
    }


def save_reminder_settings(user_id, config):
    """Store an already validated config (enabled, time, reminder_type, days)."""
    row = upsert_settings(user_id, **config)
    logger.info("reminder_settings_saved",
        user_id=str(user_id),
        enabled=row.reminder_enabled,
        reminder_type=row.reminder_type,
    )
    return row


def send_test_reminder(user_id):
    """
    Check that reminders are on and report what would be sent. Nothing is
    delivered; the client raises the browser notification itself.
    """
    settings = get_reminder_settings(user_id)
    if not settings["enabled"]:
        raise ValidationError("Notifications are disabled", kind=ErrorKind.NOTIFICATIONS_DISABLED)

    reminder_type = settings["type"] or REMINDER_DEFAULTS["type"]
    logger.info("test_reminder_requested", user_id=str(user_id), reminder_type=reminder_type)
    return {
        "success": True,
        "message": "Test notification sent to browser",
        "type": reminder_type,
    }
