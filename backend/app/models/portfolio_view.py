"""PortfolioView ORM — single-row counter of portfolio page views.

Invariants:
    - identifier is unique; in practice only "portfolio-views" is ever written
    - count starts at 0 and only grows
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class PortfolioView(Base):
    """Portfolio-wide view counter."""
    __tablename__ = "portfolio_views"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    identifier: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False,
    )
    count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
