from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from research_tracker.core import clock
from research_tracker.core.deps import get_db, get_current_user
from research_tracker.core.errors import NotFoundError
from research_tracker.crud.projects import (
    create_project,
    delete_project,
    get_project,
    list_projects,
    list_projects_by_owner,
    list_projects_by_status,
    list_projects_with_deadline,
    update_project,
)
from research_tracker.crud.status_history import list_project_history
from research_tracker.crud.users import get_user
from research_tracker.db.models.enums import ProjectStatus
from research_tracker.db.models.user import User
from research_tracker.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate, StatusHistoryOut
from research_tracker.services import dashboard

router = APIRouter()

def _load(db: Session, project_id: int):
    p = get_project(db, project_id, clock.today())
    if not p:
        raise NotFoundError("Project not found")
    return p

@router.get("", response_model=list[ProjectOut])
def get_projects(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return list_projects(db, clock.today())

@router.post("", response_model=ProjectOut)
def post_project(data: ProjectCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return create_project(db, data, owner=user, now=clock.now(), today=clock.today())

# fixed paths are registered before /{project_id}

@router.get("/deadlines/upcoming", response_model=list[ProjectOut])
def get_upcoming_deadlines(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    today = clock.today()
    return dashboard.upcoming(list_projects_with_deadline(db, today), today)

@router.get("/deadlines/overdue", response_model=list[ProjectOut])
def get_overdue_projects(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    today = clock.today()
    return dashboard.overdue(list_projects_with_deadline(db, today), today)

@router.get("/user/{user_id}", response_model=list[ProjectOut])
def get_projects_by_user(user_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    if not get_user(db, user_id):
        raise NotFoundError("User not found")
    return list_projects_by_owner(db, user_id, clock.today())

@router.get("/status/{status}", response_model=list[ProjectOut])
def get_projects_by_status(status: ProjectStatus, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return list_projects_by_status(db, status, clock.today())

@router.get("/{project_id}", response_model=ProjectOut)
def get_project_detail(project_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return _load(db, project_id)

@router.put("/{project_id}", response_model=ProjectOut)
def put_project(
    project_id: int,
    data: ProjectUpdate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    p = _load(db, project_id)
    return update_project(db, p, data, changed_by=user, now=clock.now(), today=clock.today())

@router.delete("/{project_id}")
def remove_project(project_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    delete_project(db, _load(db, project_id))
    return {"status": "ok"}

@router.get("/{project_id}/status-history", response_model=list[StatusHistoryOut])
def get_project_status_history(project_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    _load(db, project_id)
    return list_project_history(db, project_id)
