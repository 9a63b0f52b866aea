"""Append-only status history.

Entries are never edited or deleted; they go away only with their project.
"""
import datetime as dt

from research_tracker.db.models.enums import ProjectStatus
from research_tracker.db.models.project import Project
from research_tracker.db.models.status_history import StatusHistory
from research_tracker.db.models.user import User


def _wall_clock(a: dt.datetime, b: dt.datetime) -> tuple[dt.datetime, dt.datetime]:
    # rows read back from a tz-less backend come out naive, in the zone they were written in
    if a.tzinfo is None or b.tzinfo is None:
        return a.replace(tzinfo=None), b.replace(tzinfo=None)
    return a, b


def append(
    project: Project,
    previous_status: ProjectStatus | None,
    new_status: ProjectStatus,
    changed_by: User | None,
    now: dt.datetime,
) -> StatusHistory:
    if previous_status == new_status:
        raise ValueError(f"status history needs a transition, got {new_status} -> {new_status}")
    if project.status_history:
        last, current = _wall_clock(project.status_history[-1].changed_at, now)
        if current < last:
            raise ValueError(f"status change at {now} predates the last recorded change at {last}")
    entry = StatusHistory(
        project_id=project.id,
        old_status=previous_status,
        new_status=new_status,
        changed_by=changed_by,
        changed_at=now,
    )
    if project.status_history is None:
        project.status_history = []
    project.status_history.append(entry)
    return entry


def record_creation(project: Project, changed_by: User | None, now: dt.datetime) -> StatusHistory:
    return append(project, None, project.status, changed_by, now)
