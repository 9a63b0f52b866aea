"""Read-only reductions over projects, users and status history."""
import datetime as dt
from collections import Counter
from collections.abc import Sequence

from research_tracker.core.config import settings
from research_tracker.core.logging import logger
from research_tracker.db.models.enums import ProjectStatus
from research_tracker.db.models.project import Project
from research_tracker.db.models.status_history import StatusHistory
from research_tracker.db.models.user import User
from research_tracker.schemas.auth import UserOut
from research_tracker.schemas.dashboard import (
    DashboardStatsOut,
    StatusChangeOut,
    UpcomingDeadlineOut,
    UserSummaryOut,
)
from research_tracker.services.deadlines import ALERT_STATUSES, classify, days_until


def _count_by_status(projects: Sequence[Project]) -> dict[ProjectStatus, int]:
    counts = Counter(ProjectStatus(p.status) for p in projects)
    return {s: counts.get(s, 0) for s in ProjectStatus}


def _status_change(entry: StatusHistory, titles: dict[int, str]) -> StatusChangeOut:
    title = titles.get(entry.project_id)
    if title is None:
        logger.warning("status_change_unresolved_project", history_id=entry.id, project_id=entry.project_id)
    changed_by = entry.changed_by.username if entry.changed_by is not None else None
    if changed_by is None:
        logger.warning("status_change_unresolved_user", history_id=entry.id, project_id=entry.project_id)
    return StatusChangeOut(
        project_id=entry.project_id,
        project_title=title,
        old_status=entry.old_status,
        new_status=entry.new_status,
        changed_at=entry.changed_at,
        changed_by=changed_by,
    )


def recent_changes(history: Sequence[StatusHistory], limit: int) -> list[StatusHistory]:
    ordered = sorted(history, key=lambda h: (h.changed_at, h.id or 0), reverse=True)
    return ordered[:limit]


def deadline_alerts(projects: Sequence[Project], today: dt.date) -> list[UpcomingDeadlineOut]:
    rows = []
    for p in sorted((p for p in projects if p.deadline is not None), key=lambda p: p.deadline):
        status = classify(p.deadline, today)
        if status not in ALERT_STATUSES:
            continue
        rows.append(UpcomingDeadlineOut(
            project_id=p.id,
            project_title=p.title,
            deadline=p.deadline,
            days_until_deadline=days_until(p.deadline, today),
            status=status,
        ))
    return rows


def summarize(
    projects: Sequence[Project],
    users: Sequence[User],
    recent_history: Sequence[StatusHistory],
    today: dt.date,
) -> DashboardStatsOut:
    by_status = _count_by_status(projects)
    titles = {p.id: p.title for p in projects}
    changes = [_status_change(h, titles) for h in recent_changes(recent_history, settings.RECENT_CHANGES_LIMIT)]
    stats = DashboardStatsOut(
        total_users=len(users),
        total_projects=len(projects),
        active_projects=by_status[ProjectStatus.in_progress],
        pending_reviews=0,  # no review subsystem
        projects_by_status=by_status,
        recent_status_changes=changes,
        upcoming_deadlines=deadline_alerts(projects, today),
    )
    logger.info(
        "dashboard_stats",
        total_users=stats.total_users,
        active_projects=stats.active_projects,
        recent_changes=len(stats.recent_status_changes),
        upcoming_deadlines=len(stats.upcoming_deadlines),
    )
    return stats


def summarize_user(user: User, projects: Sequence[Project]) -> UserSummaryOut:
    by_status = _count_by_status(projects)
    return UserSummaryOut(
        user=UserOut.model_validate(user),
        active_projects=by_status[ProjectStatus.in_progress],
        total_projects=len(projects),
        review_count=0,
        projects_by_status=by_status,
    )


def upcoming(projects: Sequence[Project], today: dt.date) -> list[Project]:
    horizon = today + dt.timedelta(days=settings.DEADLINE_APPROACHING_DAYS)
    return [p for p in projects if p.deadline is not None and today <= p.deadline <= horizon]


def overdue(projects: Sequence[Project], today: dt.date) -> list[Project]:
    return [p for p in projects if p.deadline is not None and p.deadline < today]
