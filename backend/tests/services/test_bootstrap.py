"""Schema Bootstrap — create_all on startup is complete and idempotent."""

from sqlalchemy import inspect

import app.infrastructure.database as db_module
from app.infrastructure.database import bootstrap_database, close_db, init_db

EXPECTED_TABLES = {
    "portfolio_views",
    "portfolio_visit_logs",
    "project_clicks",
    "project_click_logs",
    "tab_visits",
}


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda c: inspect(c).get_table_names()))


async def test_bootstrap_creates_every_table(tmp_path, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    manager = init_db(f"sqlite+aiosqlite:///{tmp_path / 'boot.db'}")

    await bootstrap_database()

    assert EXPECTED_TABLES <= await _table_names(manager.engine)
    await close_db()


async def test_bootstrap_is_idempotent(tmp_path, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    manager = init_db(f"sqlite+aiosqlite:///{tmp_path / 'boot.db'}")

    await bootstrap_database()
    await bootstrap_database()

    assert EXPECTED_TABLES <= await _table_names(manager.engine)
    await close_db()


async def test_close_db_releases_manager(tmp_path, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    init_db(f"sqlite+aiosqlite:///{tmp_path / 'boot.db'}")

    await close_db()

    assert db_module.db_manager is None
