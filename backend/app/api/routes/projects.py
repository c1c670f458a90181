"""Project Clicks — per-project click counters plus an append-only click log.

Invariants:
    - POST /click/{project_name} increments the counter and writes one log row
    - GET /clicks lists every project ordered by click_count descending
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.counter_helpers import counter_operation
from app.core.domain_types import CounterKey, CounterResource
from app.infrastructure.database import get_db
from app.schemas.counters import (
    ErrorResponse, ProjectClickResponse, ProjectClickRow, ProjectClicksResponse,
)
from app.services import counter_store

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/projects", tags=["projects"],
    responses={500: {"model": ErrorResponse}},
)


@router.post("/click/{project_name}", response_model=ProjectClickResponse)
async def click_project(project_name: str, db: AsyncSession = Depends(get_db)):
    with counter_operation(
        f"Server error incrementing click count for {project_name}.",
        CounterResource.PROJECT_CLICKS, project_name,
    ):
        count = await counter_store.increment_project_clicks(
            db, CounterKey(project_name),
        )
    return ProjectClickResponse(project_name=project_name, click_count=count)


@router.get("/clicks", response_model=ProjectClicksResponse)
async def list_project_clicks(db: AsyncSession = Depends(get_db)):
    with counter_operation(
        "Server error fetching click counts", CounterResource.PROJECT_CLICKS,
    ):
        rows = await counter_store.list_project_clicks(db)
    return ProjectClicksResponse(
        project_clicks=[ProjectClickRow(**row) for row in rows],
    )
