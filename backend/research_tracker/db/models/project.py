import datetime as dt
from sqlalchemy import String, Text, Date, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from research_tracker.db.base import Base
from research_tracker.db.models._mixins import TimestampMixin
from research_tracker.db.models.enums import ProjectStatus, DeadlineStatus, string_enum
from research_tracker.db.models.status_history import StatusHistory

class Project(Base, TimestampMixin):
    __tablename__ = "project"

    id: Mapped[int] = mapped_column(primary_key=True)
    owner_id: Mapped[int | None] = mapped_column(ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True)

    title: Mapped[str] = mapped_column(String(256))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[ProjectStatus] = mapped_column(string_enum(ProjectStatus), default=ProjectStatus.draft, index=True)

    start_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    deadline: Mapped[dt.date | None] = mapped_column(Date, nullable=True, index=True)
    deadline_status: Mapped[DeadlineStatus] = mapped_column(string_enum(DeadlineStatus), default=DeadlineStatus.no_deadline)
    reminder_sent: Mapped[bool] = mapped_column(Boolean, default=False)

    owner = relationship("User")
    # owned ledger; entries hold project_id only, no back-reference
    status_history: Mapped[list[StatusHistory]] = relationship(
        order_by=(StatusHistory.changed_at, StatusHistory.id),
        cascade="all, delete-orphan",
    )
