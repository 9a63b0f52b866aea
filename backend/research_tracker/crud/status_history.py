from sqlalchemy.orm import Session, selectinload

from research_tracker.db.models.status_history import StatusHistory

def list_project_history(db: Session, project_id: int) -> list[StatusHistory]:
    return (
        db.query(StatusHistory)
        .options(selectinload(StatusHistory.changed_by))
        .filter(StatusHistory.project_id == project_id)
        .order_by(StatusHistory.changed_at, StatusHistory.id)
        .all()
    )

def recent_history(db: Session, limit: int = 10) -> list[StatusHistory]:
    return (
        db.query(StatusHistory)
        .options(selectinload(StatusHistory.changed_by))
        .order_by(StatusHistory.changed_at.desc(), StatusHistory.id.desc())
        .limit(limit)
        .all()
    )
