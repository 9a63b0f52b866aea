"""Deadline classification.

Everything here takes ``today`` from the caller; nothing reads the clock.
"""
import datetime as dt

from research_tracker.core.config import settings
from research_tracker.db.models.enums import DeadlineStatus

ALERT_STATUSES = (DeadlineStatus.approaching, DeadlineStatus.overdue)


def days_until(deadline: dt.date, today: dt.date) -> int:
    return (deadline - today).days


def classify(deadline: dt.date | None, today: dt.date, approaching_days: int | None = None) -> DeadlineStatus:
    if deadline is None:
        return DeadlineStatus.no_deadline
    if approaching_days is None:
        approaching_days = settings.DEADLINE_APPROACHING_DAYS
    days = days_until(deadline, today)
    if days < 0:
        return DeadlineStatus.overdue
    # both ends inclusive
    if days <= approaching_days:
        return DeadlineStatus.approaching
    return DeadlineStatus.on_track
