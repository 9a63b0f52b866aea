import datetime as dt
from sqlalchemy.orm import Session

from research_tracker.core.errors import ValidationError
from research_tracker.core.logging import logger
from research_tracker.db.models.enums import ProjectStatus
from research_tracker.db.models.project import Project
from research_tracker.db.models.user import User
from research_tracker.schemas.project import ProjectCreate, ProjectUpdate
from research_tracker.services import status_ledger
from research_tracker.services.projects import refresh_deadline_status, set_deadline, set_status

# Loaded projects always leave this module with a freshly computed deadline_status.

def _refreshed(projects: list[Project], today: dt.date) -> list[Project]:
    for p in projects:
        refresh_deadline_status(p, today)
    return projects

def list_projects(db: Session, today: dt.date):
    return _refreshed(db.query(Project).order_by(Project.id).all(), today)

def list_projects_by_owner(db: Session, owner_id: int, today: dt.date):
    return _refreshed(db.query(Project).filter(Project.owner_id == owner_id).order_by(Project.id).all(), today)

def list_projects_by_status(db: Session, status: ProjectStatus, today: dt.date):
    return _refreshed(db.query(Project).filter(Project.status == status).order_by(Project.id).all(), today)

def list_projects_with_deadline(db: Session, today: dt.date):
    q = db.query(Project).filter(Project.deadline.is_not(None)).order_by(Project.deadline, Project.id)
    return _refreshed(q.all(), today)

def get_project(db: Session, project_id: int, today: dt.date) -> Project | None:
    p = db.get(Project, project_id)
    if p is not None:
        refresh_deadline_status(p, today)
    return p

def save_project(db: Session, p: Project, today: dt.date) -> Project:
    refresh_deadline_status(p, today)
    db.add(p)
    db.commit()
    db.refresh(p)
    return p

def create_project(db: Session, data: ProjectCreate, owner: User | None, now: dt.datetime, today: dt.date) -> Project:
    if not data.title.strip():
        raise ValidationError("Title is required")
    p = Project(
        title=data.title.strip(),
        description=data.description,
        status=ProjectStatus.draft,
        start_date=data.start_date,
        end_date=data.end_date,
        reminder_sent=False,
        owner=owner,
    )
    set_deadline(p, data.deadline, today)
    status_ledger.record_creation(p, owner, now)
    p = save_project(db, p, today)
    logger.info("project_created", project_id=p.id, owner_id=p.owner_id, deadline_status=p.deadline_status.value)
    return p


def update_project(db: Session, p: Project, data: ProjectUpdate, changed_by: User | None, now: dt.datetime, today: dt.date) -> Project:
    fields = data.model_fields_set
    if data.title is not None:
        if not data.title.strip():
            raise ValidationError("Title is required")
        p.title = data.title.strip()
    if "description" in fields:
        p.description = data.description
    if "start_date" in fields:
        p.start_date = data.start_date
    if "end_date" in fields:
        p.end_date = data.end_date
    if data.reminder_sent is not None:
        p.reminder_sent = data.reminder_sent
    if data.status is not None:
        set_status(p, data.status, changed_by, now)
    if "deadline" in fields:
        set_deadline(p, data.deadline, today)
    return save_project(db, p, today)


def delete_project(db: Session, p: Project) -> None:
    project_id = p.id
    db.delete(p)
    db.commit()
    logger.info("project_deleted", project_id=project_id)
