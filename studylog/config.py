MIN_MINUTES_EXCLUSIVE = 0
MAX_MINUTES = 24 * 60  # one full day

# Trailing window (today + yesterday) used by the approximate streak
STREAK_WINDOW_DAYS = 2

# (type, category, target) in evaluation order
MILESTONES = (
    ("streak_7", "streak", 7),
    ("streak_14", "streak", 14),
    ("streak_30", "streak", 30),
    ("streak_100", "streak", 100),
    ("hours_100", "hours", 100),
    ("hours_200", "hours", 200),
    ("hours_300", "hours", 300),
    ("hours_500", "hours", 500),
)

MILESTONE_LABELS = {
    "ja": {
        "streak_7": "7日連続学習",
        "streak_14": "14日連続学習",
        "streak_30": "30日連続学習",
        "streak_100": "100日連続学習",
        "hours_100": "100時間達成",
        "hours_200": "200時間達成",
        "hours_300": "300時間達成",
        "hours_500": "500時間達成",
    },
    "en": {
        "streak_7": "7-day study streak",
        "streak_14": "14-day study streak",
        "streak_30": "30-day study streak",
        "streak_100": "100-day study streak",
        "hours_100": "100 hours studied",
        "hours_200": "200 hours studied",
        "hours_300": "300 hours studied",
        "hours_500": "500 hours studied",
    },
}

# Sunday first
DAY_LABELS = {
    "ja": ("日", "月", "火", "水", "木", "金", "土"),
    "en": ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"),
}

DEFAULT_LANGUAGE = "ja"

WEEKDAY_CODES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

REMINDER_DEFAULTS = {
    "enabled": True,
    "time": "19:00",
    "type": "both",
    "days": list(WEEKDAY_CODES),
}
