from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from research_tracker.core.deps import get_db, get_current_user
from research_tracker.core.errors import NotFoundError
from research_tracker.crud.users import get_user, list_users
from research_tracker.schemas.auth import UserOut

router = APIRouter()

@router.get("", response_model=list[UserOut])
def users(db: Session = Depends(get_db), _user=Depends(get_current_user)):
    return list_users(db)

@router.get("/{user_id}", response_model=UserOut)
def user_detail(user_id: int, db: Session = Depends(get_db), _user=Depends(get_current_user)):
    u = get_user(db, user_id)
    if not u:
        raise NotFoundError("User not found")
    return u
