from enum import Enum
from sqlalchemy import Enum as SAEnum

class ProjectStatus(str, Enum):
    draft = "DRAFT"
    in_review = "IN_REVIEW"
    approved = "APPROVED"
    in_progress = "IN_PROGRESS"
    completed = "COMPLETED"
    on_hold = "ON_HOLD"
    cancelled = "CANCELLED"

class DeadlineStatus(str, Enum):
    no_deadline = "NO_DEADLINE"
    on_track = "ON_TRACK"
    approaching = "APPROACHING"  # within DEADLINE_APPROACHING_DAYS
    overdue = "OVERDUE"

def string_enum(enum_cls: type[Enum]) -> SAEnum:
    # stored as plain VARCHAR with the member values, not a native DB enum
    return SAEnum(enum_cls, native_enum=False, length=32, values_callable=lambda e: [m.value for m in e])
