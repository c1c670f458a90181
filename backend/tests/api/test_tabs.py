"""Tab Visit Routes — per-tab visit counters."""


async def test_third_increment_returns_three(client):
    for _ in range(3):
        res = await client.post("/api/tabs/increment/about")

    assert res.status_code == 200
    assert res.json() == {"success": True, "tabName": "about", "visitCount": 3}


async def test_tabs_are_counted_independently(client):
    await client.post("/api/tabs/increment/about")
    await client.post("/api/tabs/increment/about")
    res = await client.post("/api/tabs/increment/contact")

    assert res.json()["visitCount"] == 1


async def test_list_sorted_by_visit_count_descending(client):
    for name, visits in (("projects", 2), ("about", 4), ("contact", 1)):
        for _ in range(visits):
            await client.post(f"/api/tabs/increment/{name}")

    res = await client.get("/api/tabs/visits")

    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "tabVisits": [
            {"tab_name": "about", "visit_count": 4},
            {"tab_name": "projects", "visit_count": 2},
            {"tab_name": "contact", "visit_count": 1},
        ],
    }


async def test_missing_tab_name_does_not_match_route(client):
    res = await client.post("/api/tabs/increment/")

    assert res.status_code in (404, 405)
