from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from research_tracker.core import clock
from research_tracker.core.config import settings
from research_tracker.core.deps import get_db, get_current_user
from research_tracker.core.errors import NotFoundError
from research_tracker.crud.projects import list_projects, list_projects_by_owner
from research_tracker.crud.status_history import recent_history
from research_tracker.crud.users import get_user, list_users
from research_tracker.schemas.dashboard import DashboardStatsOut, UserSummaryOut
from research_tracker.services.dashboard import summarize, summarize_user

router = APIRouter()

@router.get("/stats", response_model=DashboardStatsOut)
def stats(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    today = clock.today()
    return summarize(
        projects=list_projects(db, today),
        users=list_users(db),
        recent_history=recent_history(db, settings.RECENT_CHANGES_LIMIT),
        today=today,
    )

@router.get("/user-summary/{user_id}", response_model=UserSummaryOut)
def user_summary(user_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User not found")
    return summarize_user(user, list_projects_by_owner(db, user_id, clock.today()))
