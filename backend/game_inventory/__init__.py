"""
Game Inventory — Application Package Initializer
=================================================

What: Marks the `game_inventory` directory as a Python package.
Who:  Used by uvicorn (`game_inventory.main:app`), Alembic and pytest.

Architecture Note:
    The application follows a layered layout:

    ┌─────────────────────────────────────┐
    │     Routes + Templates (HTML)       │  ← HTTP and rendering only
    ├─────────────────────────────────────┤
    │   Services (Console / Game ops)     │  ← Validation, existence checks,
    │                                     │    concurrent reads
    ├─────────────────────────────────────┤
    │   Validation  │  Schemas (records)  │  ← Pure functions / pydantic
    ├─────────────────────────────────────┤
    │     Store (InventoryStore ABC)      │  ← Async SQLAlchemy or in-memory
    └─────────────────────────────────────┘

    Services receive their store through the constructor, so each layer can
    be tested with a substitute for the one below it.
"""

__version__ = "1.0.0"
