import importlib
import os
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient

from tests.db_utils import create_postgres_test_database


def _migrate(database_url: str) -> None:
    config = Config("alembic.ini")
    config.set_main_option("sqlalchemy.url", database_url)
    command.upgrade(config, "head")


def _build_app(database_url: str):
    """Point settings at ``database_url`` and rebuild the engine and app around it."""
    os.environ["DATABASE_URL"] = database_url

    import app.cargohub.core.config as config
    import app.cargohub.db.session as session
    import app.main as main

    for module in (config, session, main):
        importlib.reload(module)
    return main.create_app(), session


@pytest.fixture()
def client(tmp_path: Path):
    database_url = os.getenv("DATABASE_URL", "")
    drop_database = None
    if database_url.startswith("postgres"):
        database_url, drop_database = create_postgres_test_database(database_url)
    else:
        database_url = f"sqlite+pysqlite:///{tmp_path / 'cargohub.db'}"

    _migrate(database_url)
    app, session = _build_app(database_url)

    with TestClient(app) as test_client:
        yield test_client

    session.engine.dispose()
    if drop_database is not None:
        drop_database()


@pytest.fixture()
def db_session(client):
    from app.cargohub.db.session import SessionLocal

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def seed_catalog(db_session):
    """Two items and two locations in warehouse 1, referenced by most transfer tests."""
    from app.cargohub.db.models import Item, Location

    db_session.add_all(
        [
            Item(uid="UID001", code="CODE-1", description="Pallet jack"),
            Item(uid="UID002", code="CODE-2", description="Shrink wrap"),
            Location(id=1, warehouse_id=1, code="A.1.0", row="A", rack="1", shelf="0"),
            Location(id=2, warehouse_id=1, code="B.2.1", row="B", rack="2", shelf="1"),
        ]
    )
    db_session.commit()
    return {"items": ["UID001", "UID002"], "locations": [1, 2]}
