from django.utils import timezone


def local_today():
    """Today's date in the configured TIME_ZONE."""
    return timezone.localdate()


def local_date_of(dt_utc):
    return timezone.localtime(dt_utc).date()
