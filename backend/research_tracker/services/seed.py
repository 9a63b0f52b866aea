import datetime as dt
from sqlalchemy.orm import Session

from research_tracker.core import clock
from research_tracker.core.config import settings
from research_tracker.core.logging import logger
from research_tracker.crud.projects import create_project, list_projects, save_project
from research_tracker.crud.users import count_users, create_user
from research_tracker.db.models.enums import ProjectStatus
from research_tracker.db.session import SessionLocal
from research_tracker.schemas.auth import RegisterIn
from research_tracker.schemas.project import ProjectCreate
from research_tracker.services.projects import set_status


def _months(today: dt.date, n: int) -> dt.date:
    return today + dt.timedelta(days=30 * n)


def seed_defaults(db: Session, now: dt.datetime, today: dt.date) -> bool:
    """Create the default user and sample projects on an empty database.

    Returns False without touching anything when any user already exists.
    """
    if count_users(db):
        return False

    user = create_user(db, RegisterIn(
        username=settings.DEFAULT_USER_USERNAME,
        password=settings.DEFAULT_USER_PASSWORD,
        email=settings.DEFAULT_USER_EMAIL,
        first_name="Default",
        last_name="User",
        department="Research",
        institution="Default Institution",
    ))

    if not list_projects(db, today):
        samples = [
            ("AI Research Project", "Research on advanced machine learning algorithms",
             ProjectStatus.in_progress, today, _months(today, 6)),
            ("Climate Change Study", "Analysis of global climate patterns",
             ProjectStatus.draft, _months(today, 1), _months(today, 8)),
            ("Medical Research", "Study on new treatment methods",
             ProjectStatus.completed, _months(today, -6), _months(today, -1)),
        ]
        for title, description, status, start, end in samples:
            p = create_project(db, ProjectCreate(title=title, description=description, start_date=start, end_date=end),
                               owner=user, now=now, today=today)
            set_status(p, status, user, now)
            save_project(db, p, today)

    logger.info("seed_done", username=user.username)
    return True


def seed_on_startup():
    db: Session = SessionLocal()
    try:
        seed_defaults(db, clock.now(), clock.today())
    finally:
        db.close()
