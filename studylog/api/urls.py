from django.urls import path
from .views import (
    MilestonesView,
    ReminderSettingsView,
    ReminderTestView,
    StudyLogsView,
    WeeklySummaryView,
)

urlpatterns = [
    path("study-logs", StudyLogsView.as_view(), name="study-logs"),
    path("study-logs/weekly", WeeklySummaryView.as_view(), name="study-logs-weekly"),
    path("milestones", MilestonesView.as_view(), name="milestones"),
    path("reminder-settings", ReminderSettingsView.as_view(), name="reminder-settings"),
    path("reminder-settings/test", ReminderTestView.as_view(), name="reminder-settings-test"),
]
