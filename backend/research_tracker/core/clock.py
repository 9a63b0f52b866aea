import datetime as dt
from zoneinfo import ZoneInfo

from research_tracker.core.config import settings


def now() -> dt.datetime:
    return dt.datetime.now(ZoneInfo(settings.TZ))


def today() -> dt.date:
    return now().date()
