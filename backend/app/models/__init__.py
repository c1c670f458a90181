"""ORM Models — SQLAlchemy declarative models for counters and event logs.

Invariants:
    - All models inherit from Base (db/base.py)
    - Counter tables have one row per unique key; log tables are append-only

Design Decisions:
    - One file per table for locality
    - All models imported here so Base.metadata is complete before
      bootstrap_database() runs create_all
"""

from app.models.portfolio_view import PortfolioView  # noqa: F401
from app.models.portfolio_visit_log import PortfolioVisitLog  # noqa: F401
from app.models.project_click import ProjectClick  # noqa: F401
from app.models.project_click_log import ProjectClickLog  # noqa: F401
from app.models.tab_visit import TabVisit  # noqa: F401
