"""ProjectClick ORM — per-project click counter.

Invariants:
    - One row per project_name (unique constraint is the upsert conflict target)
    - click_count only grows; last_clicked_at moves on every increment
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class ProjectClick(Base):
    """Click counter for a single portfolio project."""
    __tablename__ = "project_clicks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_name: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False,
    )
    click_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
    last_clicked_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
