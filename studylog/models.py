# Django discovers models through <app>.models
from .data.models import Milestone, StudyLog, UserSettings  # noqa: F401
