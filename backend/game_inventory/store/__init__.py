# Store package init
"""
Game Inventory — Entity Store Package
======================================

What:  Persistence for consoles and games behind one async interface.

Store Inventory:
    - InventoryStore (abstract): the contract services depend on
    - SqlAlchemyInventoryStore: async SQLAlchemy implementation
      (PostgreSQL via asyncpg in production, SQLite via aiosqlite in tests)
"""

from game_inventory.store.base import InventoryStore
from game_inventory.store.sqlalchemy_store import SqlAlchemyInventoryStore

__all__ = ["InventoryStore", "SqlAlchemyInventoryStore"]
