"""ProjectClickLog ORM — append-only event log, one row per project click.

Invariants:
    - No uniqueness on project_name; rows are never updated or deleted
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class ProjectClickLog(Base):
    """A single project click event."""
    __tablename__ = "project_click_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_name: Mapped[str] = mapped_column(String(255), nullable=False)
    clicked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
