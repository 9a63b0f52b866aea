import datetime as dt
from pydantic import BaseModel

from research_tracker.db.models.enums import ProjectStatus, DeadlineStatus
from research_tracker.schemas.auth import UserOut

class StatusChangeOut(BaseModel):
    project_id: int
    project_title: str | None = None
    old_status: ProjectStatus | None = None
    new_status: ProjectStatus
    changed_at: dt.datetime
    changed_by: str | None = None  # username

class UpcomingDeadlineOut(BaseModel):
    project_id: int
    project_title: str
    deadline: dt.date
    days_until_deadline: int
    status: DeadlineStatus

class DashboardStatsOut(BaseModel):
    total_users: int
    total_projects: int
    active_projects: int
    pending_reviews: int = 0
    projects_by_status: dict[ProjectStatus, int]
    recent_status_changes: list[StatusChangeOut]
    upcoming_deadlines: list[UpcomingDeadlineOut]

class UserSummaryOut(BaseModel):
    user: UserOut
    active_projects: int
    total_projects: int
    review_count: int = 0
    projects_by_status: dict[ProjectStatus, int]
