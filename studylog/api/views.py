from django.conf import settings
from rest_framework import serializers, views, status
from rest_framework.response import Response
import structlog
import uuid
from ..domain.enums import ErrorKind
from ..domain.validation import (
    extract_id_from_url,
    validate_study_log_body,
)
from ..errors import ValidationError
from ..services.milestones import check_and_persist, milestone_overview
from ..services.reminders import get_reminder_settings, save_reminder_settings, send_test_reminder
from ..services.study_logs import create_log, fetch_logs, remove_log, weekly_summary
from ..utils.time import local_today
from .serializers import (
    MilestoneCheckSerializer,
    MilestoneOverviewSerializer,
    ReminderConfigSerializer,
    ReminderSettingsSerializer,
    SavedReminderSettingsSerializer,
    StudyLogSerializer,
    WeeklyQuerySerializer,
    WeeklySummarySerializer,
)

base_logger = structlog.get_logger()

# Client-facing error string per validation failure
STUDY_LOG_ERRORS = {
    ErrorKind.MISSING_BODY: "Missing required fields",
    ErrorKind.INVALID_TITLE: "Missing required fields",
    ErrorKind.MISSING_MINUTES: "Missing required fields",
    ErrorKind.MISSING_DATE: "Missing required fields",
    ErrorKind.INVALID_MINUTES_TYPE: "Invalid minutes value",
    ErrorKind.MINUTES_OUT_OF_RANGE: "Invalid minutes value",
    ErrorKind.INVALID_DATE_FORMAT: "Invalid date",
    ErrorKind.INVALID_DATE: "Invalid date",
}


def request_logger():
    return base_logger.bind(request_id=str(uuid.uuid4()))


def display_language(request):
    return request.query_params.get("lang") or settings.STUDYTRACKER_LANGUAGE


class StudyLogsView(views.APIView):
    def get(self, request):
        logger = request_logger()
        user_id = request.principal.id

        logs = fetch_logs(user_id)

        logger.info("study_logs_api_response", user_id=user_id, log_count=len(logs))
        return Response(StudyLogSerializer(logs, many=True).data)

    def post(self, request):
        logger = request_logger()

        body = request.data
        if isinstance(body, dict) and body.get("date") is None:
            # Server-side date when the client leaves it out
            body = {**body, "date": local_today().isoformat()}

        result = validate_study_log_body(body)
        if not result.valid:
            logger.info("study_log_rejected", kind=result.kind.value, reason=result.error)
            raise ValidationError(
                STUDY_LOG_ERRORS[result.kind], details=result.error, kind=result.kind
            )

        user_id = request.principal.id
        # owner always comes from the token, never from the body
        log = create_log(user_id, body["title"], body["minutes"], body["date"])

        logger.info("study_log_api_response", user_id=user_id, log_id=str(log.id), status=200)
        return Response(StudyLogSerializer([log], many=True).data, status=status.HTTP_200_OK)

    def delete(self, request):
        logger = request_logger()

        log_id = extract_id_from_url(request.build_absolute_uri())
        user_id = request.principal.id

        remove_log(user_id, log_id)

        logger.info("study_log_delete_api_response", user_id=user_id, log_id=log_id)
        return Response({"message": "Deleted successfully"})


class WeeklySummaryView(views.APIView):
    def get(self, request):
        logger = request_logger()

        qs = WeeklyQuerySerializer(data=request.query_params)
        try:
            qs.is_valid(raise_exception=True)
        except serializers.ValidationError as e:
            problem = e.detail["date"][0]
            raise ValidationError("Invalid date", details=str(problem), kind=ErrorKind(problem.code))
        reference = qs.validated_data.get("date") or local_today()

        user_id = request.principal.id
        summary = weekly_summary(user_id, reference, display_language(request))

        logger.info(
            "weekly_summary_api_response",
            user_id=user_id,
            reference_date=reference.isoformat(),
            total_minutes=summary["total"],
        )
        return Response(WeeklySummarySerializer(summary).data)


class MilestonesView(views.APIView):
    def get(self, request):
        logger = request_logger()
        user_id = request.principal.id

        overview = milestone_overview(user_id, display_language(request))

        logger.info(
            "milestones_api_response",
            user_id=user_id,
            achieved_count=len(overview["achieved"]),
            pending_count=len(overview["pending"]),
        )
        return Response(MilestoneOverviewSerializer(overview).data)

    def post(self, request):
        logger = request_logger()
        user_id = request.principal.id

        s = MilestoneCheckSerializer(data=request.data)
        try:
            s.is_valid(raise_exception=True)
        except serializers.ValidationError:
            raise ValidationError("Invalid input", kind=ErrorKind.INVALID_INPUT)

        new_milestones = check_and_persist(user_id, **s.validated_data)
        count = len(new_milestones)

        logger.info("milestone_check_api_response", user_id=user_id, new_count=count)
        return Response(
            {
                "newMilestones": new_milestones,
                "count": count,
                "message": f"{count} new milestone(s) unlocked!" if count else "No new milestones",
            }
        )


class ReminderSettingsView(views.APIView):
    def get(self, request):
        user_id = request.principal.id
        return Response(ReminderSettingsSerializer(get_reminder_settings(user_id)).data)

    def post(self, request):
        logger = request_logger()
        user_id = request.principal.id

        s = ReminderConfigSerializer(data=request.data)
        try:
            s.is_valid(raise_exception=True)
        except serializers.ValidationError as e:
            raise ValidationError(s.error_message(e.get_codes()), kind=ErrorKind.INVALID_INPUT)

        row = save_reminder_settings(user_id, s.validated_data)

        logger.info("reminder_settings_api_response", user_id=user_id)
        return Response(SavedReminderSettingsSerializer(row).data)


class ReminderTestView(views.APIView):
    def post(self, request):
        user_id = request.principal.id
        return Response(send_test_reminder(user_id))
