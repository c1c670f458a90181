"""Counter Store — atomic insert-or-increment, reads, and event log appends.

Invariants:
    - Every increment is ONE statement: INSERT ... ON CONFLICT (key) DO UPDATE
      SET n = n + 1 RETURNING n. No read-modify-write, no application locks
    - Reads never create rows
    - Listings are ordered by count descending, key ascending on ties
    - Each public coroutine commits its own unit of work and raises
      DatabaseError (rolled back) on any SQLAlchemy failure

Design Decisions:
    - Dialect insert constructs (postgresql / sqlite) instead of raw SQL: same
      statement shape in production and in the SQLite test database
    - Click counter and click log committed together: a failure leaves neither
"""

import logging
from typing import Any

from sqlalchemy import func, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from app.core.domain_types import CounterKey, PORTFOLIO_VIEWS_KEY
from app.infrastructure.database import maps_database_errors
from app.models.portfolio_view import PortfolioView
from app.models.portfolio_visit_log import PortfolioVisitLog
from app.models.project_click import ProjectClick
from app.models.project_click_log import ProjectClickLog
from app.models.tab_visit import TabVisit

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _upsert_insert(db: AsyncSession, model: type):
    """Dialect-specific INSERT that supports ON CONFLICT."""
    dialect = db.get_bind().dialect.name
    try:
        return _UPSERT_INSERTS[dialect](model)
    except KeyError:
        raise NotImplementedError(
            f"No native upsert available for dialect '{dialect}'",
        ) from None


async def _increment(
    db: AsyncSession,
    model: type,
    key_column: InstrumentedAttribute,
    count_column: InstrumentedAttribute,
    key: str,
    **touch: Any,
) -> int:
    """Insert key with count 1, or add 1 to the existing row; return the new count."""
    stmt = _upsert_insert(db, model).values(
        {key_column.key: key, count_column.key: 1, **touch},
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[key_column],
        set_={count_column.key: count_column + 1, **touch},
    ).returning(count_column)
    result = await db.execute(stmt)
    return result.scalar_one()


# ─── Portfolio views ────────────────────────────────────────────

@maps_database_errors
async def increment_portfolio_views(db: AsyncSession) -> int:
    count = await _increment(
        db, PortfolioView, PortfolioView.identifier, PortfolioView.count,
        PORTFOLIO_VIEWS_KEY,
    )
    await db.commit()
    logger.debug("Portfolio views incremented", extra={"count": count})
    return count


@maps_database_errors
async def get_portfolio_views(db: AsyncSession) -> int:
    """Current view count, or 0 when nothing has been recorded yet."""
    result = await db.execute(
        select(PortfolioView.count).where(
            PortfolioView.identifier == PORTFOLIO_VIEWS_KEY,
        ),
    )
    count = result.scalar_one_or_none()
    return count if count is not None else 0


@maps_database_errors
async def log_portfolio_visit(db: AsyncSession) -> None:
    await db.execute(insert(PortfolioVisitLog).values(visited_at=func.now()))
    await db.commit()


# ─── Project clicks ─────────────────────────────────────────────

@maps_database_errors
async def increment_project_clicks(db: AsyncSession, project_name: CounterKey) -> int:
    """Bump the project's click counter and append one click log row."""
    count = await _increment(
        db, ProjectClick, ProjectClick.project_name, ProjectClick.click_count,
        project_name, last_clicked_at=func.now(),
    )
    await db.execute(
        insert(ProjectClickLog).values(
            project_name=project_name, clicked_at=func.now(),
        ),
    )
    await db.commit()
    logger.debug(
        "Project click recorded",
        extra={"key": project_name, "count": count},
    )
    return count


@maps_database_errors
async def list_project_clicks(db: AsyncSession) -> list[dict]:
    result = await db.execute(
        select(ProjectClick.project_name, ProjectClick.click_count).order_by(
            ProjectClick.click_count.desc(), ProjectClick.project_name.asc(),
        ),
    )
    return [dict(row) for row in result.mappings()]


# ─── Tab visits ─────────────────────────────────────────────────

@maps_database_errors
async def increment_tab_visits(db: AsyncSession, tab_name: CounterKey) -> int:
    count = await _increment(
        db, TabVisit, TabVisit.tab_name, TabVisit.visit_count, tab_name,
    )
    await db.commit()
    return count


@maps_database_errors
async def list_tab_visits(db: AsyncSession) -> list[dict]:
    result = await db.execute(
        select(TabVisit.tab_name, TabVisit.visit_count).order_by(
            TabVisit.visit_count.desc(), TabVisit.tab_name.asc(),
        ),
    )
    return [dict(row) for row in result.mappings()]
