import datetime as dt
from pydantic import BaseModel, ConfigDict

from research_tracker.db.models.enums import ProjectStatus, DeadlineStatus
from research_tracker.schemas.auth import UserOut

class ProjectCreate(BaseModel):
    title: str
    description: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    deadline: dt.date | None = None


class ProjectUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    status: ProjectStatus | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    deadline: dt.date | None = None
    reminder_sent: bool | None = None

class StatusHistoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: int
    old_status: ProjectStatus | None = None
    new_status: ProjectStatus
    changed_at: dt.datetime
    changed_by: UserOut | None = None

class ProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    status: ProjectStatus
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    deadline: dt.date | None = None
    deadline_status: DeadlineStatus
    reminder_sent: bool = False
    owner: UserOut | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None
