from django.apps import AppConfig


class StudyLogConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "studylog"
