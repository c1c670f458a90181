"""Tab Visits — per-tab visit counters."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.counter_helpers import counter_operation
from app.core.domain_types import CounterKey, CounterResource
from app.infrastructure.database import get_db
from app.schemas.counters import (
    ErrorResponse, TabVisitResponse, TabVisitRow, TabVisitsResponse,
)
from app.services import counter_store

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/tabs", tags=["tabs"],
    responses={500: {"model": ErrorResponse}},
)


@router.post("/increment/{tab_name}", response_model=TabVisitResponse)
async def increment_tab(tab_name: str, db: AsyncSession = Depends(get_db)):
    with counter_operation(
        f"Server error incrementing visit count for {tab_name}.",
        CounterResource.TAB_VISITS, tab_name,
    ):
        count = await counter_store.increment_tab_visits(db, CounterKey(tab_name))
    return TabVisitResponse(tab_name=tab_name, visit_count=count)


@router.get("/visits", response_model=TabVisitsResponse)
async def list_tab_visits(db: AsyncSession = Depends(get_db)):
    with counter_operation(
        "Server error fetching tab visit counts", CounterResource.TAB_VISITS,
    ):
        rows = await counter_store.list_tab_visits(db)
    return TabVisitsResponse(tab_visits=[TabVisitRow(**row) for row in rows])
