from dataclasses import dataclass
from datetime import date, datetime, tzinfo

import pytz
from django.conf import settings
from django.utils import timezone


@dataclass(frozen=True)
class TrackingContext:
    """
    Who is asking and when. Captured once per request so every window
    and bucket computed for that request agrees on "now".
    """

    user_id: int
    now: datetime
    tz: tzinfo

    @property
    def today(self) -> date:
        return self.now.date()


def _default_timezone():
    try:
        return pytz.timezone(settings.TIME_ZONE)
    except pytz.exceptions.UnknownTimeZoneError:
        return pytz.UTC


def get_user_timezone(request):
    """
    Get the user's timezone from the cookie set by JavaScript.
    Falls back to the configured TIME_ZONE if no valid timezone is set.
    """
    user_tz_name = request.COOKIES.get('user_timezone')
    if not user_tz_name:
        return _default_timezone()
    try:
        return pytz.timezone(user_tz_name)
    except pytz.exceptions.UnknownTimeZoneError:
        return _default_timezone()


def build_context(request, now=None):
    """Snapshot the requesting user and the current instant in their timezone."""
    user_tz = get_user_timezone(request)
    now = (now or timezone.now()).astimezone(user_tz)
    return TrackingContext(user_id=request.user.id, now=now, tz=user_tz)
