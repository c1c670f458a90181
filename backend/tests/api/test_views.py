"""Portfolio Views Routes — view counter and visit log over HTTP.

Tests:
    - GET before any increment returns 0 and creates no row
    - Sequential increments return 1..N
    - Visit log appends one row per call
"""

from app.models.portfolio_view import PortfolioView
from app.models.portfolio_visit_log import PortfolioVisitLog


async def test_get_views_without_increment_returns_zero(client, count_rows):
    res = await client.get("/api/views")

    assert res.status_code == 200
    assert res.json() == {"success": True, "count": 0}
    assert await count_rows(PortfolioView) == 0


async def test_first_increment_creates_counter_with_one(client):
    res = await client.post("/api/views/increment")

    assert res.status_code == 200
    assert res.json() == {"success": True, "count": 1}


async def test_increments_are_cumulative(client):
    counts = []
    for _ in range(5):
        res = await client.post("/api/views/increment")
        counts.append(res.json()["count"])

    assert counts == [1, 2, 3, 4, 5]
    res = await client.get("/api/views")
    assert res.json() == {"success": True, "count": 5}


async def test_increments_share_a_single_row(client, count_rows):
    await client.post("/api/views/increment")
    await client.post("/api/views/increment")

    assert await count_rows(PortfolioView) == 1


async def test_log_visit_appends_row(client, count_rows):
    first = await client.post("/api/views/logs")
    second = await client.post("/api/views/logs")

    assert first.status_code == 200
    assert first.json()["success"] is True
    assert isinstance(first.json()["message"], str)
    assert second.status_code == 200
    assert await count_rows(PortfolioVisitLog) == 2


async def test_log_visit_does_not_touch_view_count(client):
    await client.post("/api/views/logs")

    res = await client.get("/api/views")
    assert res.json()["count"] == 0
