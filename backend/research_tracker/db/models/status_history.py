import datetime as dt
from sqlalchemy import ForeignKey, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from research_tracker.db.base import Base
from research_tracker.db.models.enums import ProjectStatus, string_enum

class StatusHistory(Base):
    """One status transition of a project. Rows are written once and never updated."""

    __tablename__ = "status_history"

    id: Mapped[int] = mapped_column(primary_key=True)
    project_id: Mapped[int] = mapped_column(ForeignKey("project.id", ondelete="CASCADE"), index=True)
    changed_by_id: Mapped[int | None] = mapped_column(ForeignKey("user.id", ondelete="SET NULL"), nullable=True)

    old_status: Mapped[ProjectStatus | None] = mapped_column(string_enum(ProjectStatus), nullable=True)  # null = creation entry
    new_status: Mapped[ProjectStatus] = mapped_column(string_enum(ProjectStatus))
    changed_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), index=True)

    changed_by = relationship("User")
