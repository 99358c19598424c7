from enum import Enum


class MilestoneCategory(str, Enum):
    STREAK = "streak"
    HOURS = "hours"


class ReminderType(str, Enum):
    PUSH = "push"
    EMAIL = "email"
    BOTH = "both"


class ErrorKind(str, Enum):
    MISSING_BODY = "MissingBody"
    INVALID_TITLE = "InvalidTitle"
    MISSING_MINUTES = "MissingMinutes"
    INVALID_MINUTES_TYPE = "InvalidMinutesType"
    MINUTES_OUT_OF_RANGE = "MinutesOutOfRange"
    MISSING_DATE = "MissingDate"
    INVALID_DATE_FORMAT = "InvalidDateFormat"
    INVALID_DATE = "InvalidDate"
    MISSING_HEADER = "MissingHeader"
    INVALID_SCHEME = "InvalidScheme"
    EMPTY_TOKEN = "EmptyToken"
    MISSING_URL = "MissingUrl"
    INVALID_URL = "InvalidUrl"
    MISSING_ID = "MissingId"
    INVALID_INPUT = "InvalidInput"
    INVALID_CREDENTIALS = "InvalidCredentials"
    NOT_FOUND = "NotFound"
    NOTIFICATIONS_DISABLED = "NotificationsDisabled"


REMINDER_TYPES = tuple(t.value for t in ReminderType)
