"""
Game Inventory — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── store: In-memory InventoryStore (no database)
    ├── console_service / game_service: services around `store`
    ├── seeded: two consoles and one game already in `store`
    ├── test_client: HTTPX AsyncClient talking to an app built around `store`
    └── sqlite_store: SqlAlchemyInventoryStore on a fresh SQLite file
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from game_inventory.database import create_engine, create_schema
from game_inventory.main import create_app
from game_inventory.schemas.console import ConsoleForm
from game_inventory.schemas.game import GameForm
from game_inventory.services.console_service import ConsoleService
from game_inventory.services.game_service import GameService
from game_inventory.store.sqlalchemy_store import SqlAlchemyInventoryStore

from memory_store import InMemoryInventoryStore


@pytest.fixture
def store():
    return InMemoryInventoryStore()


@pytest.fixture
def console_service(store):
    return ConsoleService(store)


@pytest.fixture
def game_service(store):
    return GameService(store)


@pytest_asyncio.fixture
async def seeded(store):
    """
    Two consoles and one game, created straight through the store.

    Returns a dict with keys: switch, ps5, zelda.
    """
    switch = await store.create_console(
        ConsoleForm(name="Nintendo Switch", description="Hybrid handheld console")
    )
    ps5 = await store.create_console(
        ConsoleForm(name="PlayStation 5", description="Sony home console")
    )
    zelda = await store.create_game(
        GameForm(
            name="Tears of the Kingdom",
            description="Open-world adventure",
            console=switch.id,
            price=59.99,
            number_in_stock=3,
        )
    )
    return {"switch": switch, "ps5": ps5, "zelda": zelda}


@pytest_asyncio.fixture
async def test_client(store):
    """
    HTTPX AsyncClient routed directly into the app via ASGITransport.

    The app is built around the in-memory `store`; the lifespan does not
    run under ASGITransport, so nothing touches a database. Redirects are
    not followed so tests can assert on 303 and Location.
    """
    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def sqlite_store(tmp_path):
    """
    SqlAlchemyInventoryStore on a throwaway SQLite file.

    A file (not :memory:) so every session gets its own connection to the
    same database, which gathered reads need.
    """
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}")
    await create_schema(engine)
    store = SqlAlchemyInventoryStore(engine)
    yield store
    await store.close()
