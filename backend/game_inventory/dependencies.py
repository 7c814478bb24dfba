"""
Game Inventory — FastAPI Dependencies
======================================

What:  Dependency providers for the store, the services and path ids.
How:   The lifespan puts one InventoryStore on `app.state.store`; every
       request gets services built around it. Tests hand their own store to
       `create_app()`.

Path ids:
    Route ids are declared as plain strings and parsed here. A malformed id
    cannot name any record, so it raises NotFoundError (404 page) instead
    of FastAPI's 422 JSON body.
"""

import uuid

from fastapi import Depends, Request

from game_inventory.exceptions import NotFoundError
from game_inventory.services.console_service import ConsoleService
from game_inventory.services.game_service import GameService
from game_inventory.store.base import InventoryStore


def get_store(request: Request) -> InventoryStore:
    return request.app.state.store


def get_console_service(store: InventoryStore = Depends(get_store)) -> ConsoleService:
    return ConsoleService(store)


def get_game_service(store: InventoryStore = Depends(get_store)) -> GameService:
    return GameService(store)


def _parse_id(value: str, resource: str) -> uuid.UUID:
    try:
        return uuid.UUID(value)
    except ValueError:
        raise NotFoundError(resource=resource, resource_id=value)


def console_id_path(console_id: str) -> uuid.UUID:
    return _parse_id(console_id, "console")


def game_id_path(game_id: str) -> uuid.UUID:
    return _parse_id(game_id, "game")
