"""TabVisit ORM — per-tab visit counter."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class TabVisit(Base):
    """Visit counter for a single portfolio tab."""
    __tablename__ = "tab_visits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tab_name: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False,
    )
    visit_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
