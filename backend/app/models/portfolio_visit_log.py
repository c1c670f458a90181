"""PortfolioVisitLog ORM — append-only log of portfolio visits."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class PortfolioVisitLog(Base):
    """A single portfolio visit event."""
    __tablename__ = "portfolio_visit_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    visited_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now(),
    )
