from sqlalchemy import func
from sqlalchemy.orm import Session

from research_tracker.core.errors import ConflictError, ValidationError
from research_tracker.core.logging import logger
from research_tracker.core.security import hash_password
from research_tracker.db.models.user import User
from research_tracker.schemas.auth import RegisterIn

def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)

def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).one_or_none()

def list_users(db: Session):
    return db.query(User).order_by(User.id).all()

def count_users(db: Session) -> int:
    return db.query(func.count(User.id)).scalar() or 0

def create_user(db: Session, data: RegisterIn) -> User:
    username = (data.username or "").strip()
    if not username:
        raise ValidationError("Username is required")
    if not (data.password or "").strip():
        raise ValidationError("Password is required")
    if get_user_by_username(db, username):
        logger.warning("registration_conflict", username=username)
        raise ConflictError("Username already exists")

    u = User(
        username=username,
        password_hash=hash_password(data.password),
        email=data.email,
        first_name=data.first_name,
        last_name=data.last_name,
        department=data.department,
        institution=data.institution,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    logger.info("user_registered", user_id=u.id, username=u.username)
    return u
