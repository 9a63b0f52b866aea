# import all models so Base.metadata knows every table
from research_tracker.db.models.enums import ProjectStatus, DeadlineStatus
from research_tracker.db.models.user import User
from research_tracker.db.models.status_history import StatusHistory
from research_tracker.db.models.project import Project
