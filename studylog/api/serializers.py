from datetime import date

from rest_framework import serializers

from ..config import WEEKDAY_CODES
from ..data.models import StudyLog
from ..domain.enums import REMINDER_TYPES, ErrorKind
from ..domain.validation import check_date_string, is_number
from ..domain.weekly import week_bounds

TIME_PATTERN = r"\A([01][0-9]|2[0-3]):[0-5][0-9]\Z"

# Error codes that mean "field absent or of the wrong shape"
PRESENCE_CODES = {"required", "null", "blank", "not_a_list", "not_a_dict"}


class NumberField(serializers.FloatField):
    """Render whole numbers as ints (60, not 60.0)."""

    def to_representation(self, value):
        value = super().to_representation(value)
        return int(value) if float(value).is_integer() else value


class StrictNumberField(serializers.FloatField):
    """JSON numbers only; numeric strings and booleans are refused."""

    def to_internal_value(self, data):
        if not is_number(data):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictBooleanField(serializers.BooleanField):
    """Only true JSON booleans; "yes", 1 and friends are refused."""

    def to_internal_value(self, data):
        if not isinstance(data, bool):
            self.fail("invalid")
        return data


def top_level_codes(codes, name):
    """Codes reported on the field itself, not on its list items."""
    value = codes.get(name)
    return set(value) if isinstance(value, list) else set()


class ReminderConfigSerializer(serializers.Serializer):
    enabled = StrictBooleanField()
    time = serializers.RegexField(TIME_PATTERN, trim_whitespace=False)
    type = serializers.ChoiceField(choices=REMINDER_TYPES, source="reminder_type")
    days = serializers.ListField(child=serializers.ChoiceField(choices=WEEKDAY_CODES))

    # First failing field wins, in this order
    field_messages = (
        ("time", "Invalid time format. Use HH:mm"),
        ("type", "Invalid reminder type"),
        ("days", "Invalid day values"),
    )

    def validate_days(self, value):
        # The days are a set; repeats are dropped, first occurrence kept
        return list(dict.fromkeys(value))

    @classmethod
    def error_message(cls, codes):
        if "non_field_errors" in codes or "enabled" in codes:
            return "Invalid input"
        if any(top_level_codes(codes, name) & PRESENCE_CODES for name, _ in cls.field_messages):
            return "Invalid input"
        for name, message in cls.field_messages:
            if name in codes:
                return message
        return "Invalid input"


class MilestoneCheckSerializer(serializers.Serializer):
    currentStreak = StrictNumberField(source="current_streak")
    totalHours = StrictNumberField(source="total_hours")


class WeeklyQuerySerializer(serializers.Serializer):
    date = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate_date(self, value):
        problem = check_date_string(value)
        if problem:
            kind, message = problem
            raise serializers.ValidationError(message, code=kind.value)
        reference = date.fromisoformat(value)
        try:
            week_bounds(reference)
        except OverflowError:
            raise serializers.ValidationError(
                "Date is outside the supported calendar range", code=ErrorKind.INVALID_DATE.value
            )
        return reference


class StudyLogSerializer(serializers.ModelSerializer):
    minutes = NumberField()

    class Meta:
        model = StudyLog
        fields = ["id", "title", "minutes", "date", "user_id", "created_at"]


class WeeklyBucketSerializer(serializers.Serializer):
    day = serializers.CharField()
    date = serializers.CharField()
    minutes = NumberField()
    isToday = serializers.BooleanField(source="is_today")


class TimePartsSerializer(serializers.Serializer):
    hours = serializers.IntegerField()
    minutes = NumberField()


class StatisticsSerializer(serializers.Serializer):
    totalMinutes = NumberField(source="total_minutes")
    averageMinutes = serializers.IntegerField(source="average_minutes")
    maxMinutes = NumberField(source="max_minutes")
    minMinutes = NumberField(source="min_minutes")
    totalSessions = serializers.IntegerField(source="total_sessions")


class WeeklySummarySerializer(serializers.Serializer):
    days = WeeklyBucketSerializer(many=True)
    total = NumberField()
    totalTime = TimePartsSerializer(source="total_time")
    statistics = StatisticsSerializer()


class AchievedMilestoneSerializer(serializers.Serializer):
    type = serializers.CharField()
    label = serializers.CharField()
    achievedAt = serializers.DateTimeField(source="achieved_at")


class PendingMilestoneSerializer(serializers.Serializer):
    type = serializers.CharField()
    label = serializers.CharField()
    category = serializers.CharField(source="category.value")
    current = NumberField()
    target = serializers.IntegerField()
    percentage = serializers.IntegerField()
    remaining = NumberField()


class MilestoneStatsSerializer(serializers.Serializer):
    currentStreak = serializers.IntegerField(source="current_streak")
    totalHours = serializers.FloatField(source="total_hours")


class MilestoneOverviewSerializer(serializers.Serializer):
    achieved = AchievedMilestoneSerializer(many=True)
    pending = PendingMilestoneSerializer(many=True)
    stats = MilestoneStatsSerializer()


class ReminderSettingsSerializer(serializers.Serializer):
    enabled = serializers.BooleanField()
    time = serializers.CharField()
    type = serializers.CharField()
    days = serializers.ListField(child=serializers.CharField())
    updatedAt = serializers.DateTimeField(source="updated_at", required=False)


class SavedReminderSettingsSerializer(serializers.Serializer):
    id = serializers.CharField(source="user_id")
    userId = serializers.CharField(source="user_id")
    enabled = serializers.BooleanField(source="reminder_enabled")
    time = serializers.CharField(source="reminder_time")
    type = serializers.CharField(source="reminder_type")
    days = serializers.ListField(child=serializers.CharField())
    updatedAt = serializers.DateTimeField(source="updated_at")
