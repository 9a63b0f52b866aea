"""Rules for mutating a project: status transitions and deadline bookkeeping."""
import datetime as dt

from research_tracker.core.logging import logger
from research_tracker.db.models.enums import ProjectStatus
from research_tracker.db.models.project import Project
from research_tracker.db.models.user import User
from research_tracker.services import status_ledger
from research_tracker.services.deadlines import classify


def set_status(project: Project, new_status: ProjectStatus, changed_by: User | None, now: dt.datetime) -> None:
    """Move ``project`` to ``new_status``; re-assigning the current status records nothing."""
    old_status = project.status
    if old_status == new_status:
        return
    status_ledger.append(project, old_status, new_status, changed_by, now)
    project.status = new_status
    logger.info(
        "project_status_changed",
        project_id=project.id,
        old_status=getattr(old_status, "value", old_status),
        new_status=new_status.value,
        changed_by=changed_by.username if changed_by is not None else None,
    )


def refresh_deadline_status(project: Project, today: dt.date) -> None:
    project.deadline_status = classify(project.deadline, today)


def set_deadline(project: Project, deadline: dt.date | None, today: dt.date) -> None:
    project.deadline = deadline
    refresh_deadline_status(project, today)
