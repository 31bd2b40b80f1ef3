# beacon/tasks.py
from celery import shared_task

from .errors import ReportError
from .recorder import get_recorder
from .reporter import HitReporter
from .serializers import HitReportSerializer

recorder = get_recorder("beacon.tasks")


@shared_task(ignore_result=True, max_retries=0)
def report_hit(payload, user_agent=""):
    ser = HitReportSerializer(data={"payload": payload, "user_agent": user_agent})
    if not ser.is_valid():
        recorder.record_error("Dropping malformed hit: %s", ser.errors)
        return False

    data = ser.validated_data
    reporter = HitReporter.from_settings(recorder=recorder)
    try:
        reporter.report(data["payload"], data["user_agent"])
    except ReportError:
        # Already recorded by the reporter; hits are best-effort.
        return False
    return True
