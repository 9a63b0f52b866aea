from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from research_tracker.core.deps import get_db, get_current_user
from research_tracker.schemas.auth import LoginIn, RegisterIn, TokenOut, UserOut
from research_tracker.crud.users import create_user, get_user_by_username
from research_tracker.core.security import verify_password, create_access_token

router = APIRouter()

@router.post("/register", response_model=UserOut)
def register(data: RegisterIn, db: Session = Depends(get_db)):
    return create_user(db, data)

@router.post("/login", response_model=TokenOut)
def login(data: LoginIn, db: Session = Depends(get_db)):
    user = get_user_by_username(db, data.username)
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if not verify_password(data.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return TokenOut(access_token=create_access_token(sub=user.username, user_id=user.id))

@router.get("/me", response_model=UserOut)
def me(user = Depends(get_current_user)):
    return user
