"""Portfolio Views — site-wide view counter and visit log.

Invariants:
    - POST /increment returns the post-increment count
    - GET returns 0 before the first increment and never creates the row
    - POST /logs appends exactly one portfolio_visit_logs row
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.counter_helpers import counter_operation
from app.core.domain_types import CounterResource
from app.infrastructure.database import get_db
from app.schemas.counters import (
    ErrorResponse, ViewCountResponse, VisitLoggedResponse,
)
from app.services import counter_store

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/views", tags=["views"],
    responses={500: {"model": ErrorResponse}},
)


@router.post("/increment", response_model=ViewCountResponse)
async def increment_views(db: AsyncSession = Depends(get_db)):
    with counter_operation(
        "Server error incrementing view count", CounterResource.PORTFOLIO_VIEWS,
    ):
        count = await counter_store.increment_portfolio_views(db)
    return ViewCountResponse(count=count)


@router.get("", response_model=ViewCountResponse)
async def get_views(db: AsyncSession = Depends(get_db)):
    with counter_operation(
        "Server error fetching view count", CounterResource.PORTFOLIO_VIEWS,
    ):
        count = await counter_store.get_portfolio_views(db)
    return ViewCountResponse(count=count)


@router.post("/logs", response_model=VisitLoggedResponse)
async def log_visit(db: AsyncSession = Depends(get_db)):
    with counter_operation(
        "Server error logging portfolio visit", CounterResource.PORTFOLIO_VIEWS,
    ):
        await counter_store.log_portfolio_visit(db)
    return VisitLoggedResponse(message="Portfolio visit logged")
