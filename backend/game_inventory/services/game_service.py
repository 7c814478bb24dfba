"""
Game Inventory — Game Service
==============================

What:  Game operations plus the home page counts.
Who:   Called by the game route handlers; calls the InventoryStore.

Games have no dependents, so unlike consoles they are created without a
duplicate check and deleted without a guard.
"""

import asyncio
import logging
import uuid
from typing import List, Optional, Tuple

from game_inventory.exceptions import FormValidationError, NotFoundError
from game_inventory.schemas.common import InventoryCounts
from game_inventory.schemas.console import ConsoleRecord
from game_inventory.schemas.game import GameRecord
from game_inventory.store.base import InventoryStore
from game_inventory.validation import validate_game

logger = logging.getLogger(__name__)

GAME_LIST_URL = "/games"


class GameService:
    """
    Business logic for game pages.

    Form failures raise FormValidationError; the route then asks
    `get_create_form()` for the console choices again, because a
    redisplayed form needs its select control repopulated.
    """

    def __init__(self, store: InventoryStore):
        self.store = store

    async def get_counts(self) -> InventoryCounts:
        """Game and console counts for the home page, read concurrently."""
        game_count, console_count = await asyncio.gather(
            self.store.count_games(),
            self.store.count_consoles(),
        )
        return InventoryCounts(game_count=game_count, console_count=console_count)

    async def list_games(self) -> List[GameRecord]:
        return await self.store.list_games()

    async def get_game_detail(self, game_id: uuid.UUID) -> GameRecord:
        """
        Fetch one game with its console.

        Raises:
            NotFoundError: No game has this id.
        """
        game = await self.store.get_game(game_id)
        if game is None:
            raise NotFoundError(resource="game", resource_id=str(game_id))
        return game

    async def get_create_form(self) -> List[ConsoleRecord]:
        """Consoles, ascending by name, for the form's console select."""
        return await self.store.list_consoles()

    async def create_game(self, fields) -> str:
        """
        Validate and persist a new game, returning its url.

        Raises:
            FormValidationError: Any field failed; nothing was written.
        """
        result = validate_game(fields)
        if not result.is_valid:
            raise FormValidationError(errors=result.errors, values=result.values)

        game = await self.store.create_game(result.form)
        logger.info("Game created: %s (console %s)", game.id, game.console_id)
        return game.url

    async def get_update_form(
        self, game_id: uuid.UUID
    ) -> Tuple[GameRecord, List[ConsoleRecord]]:
        """
        The game being edited and the console choices, read concurrently.

        Raises:
            NotFoundError: No game has this id.
        """
        game, consoles = await asyncio.gather(
            self.store.get_game(game_id),
            self.store.list_consoles(),
        )
        if game is None:
            raise NotFoundError(resource="game", resource_id=str(game_id))
        return game, consoles

    async def update_game(self, game_id: uuid.UUID, fields) -> str:
        """
        Validate and full-replace the game at `game_id`, console reference included.

        Raises:
            FormValidationError: Any field failed; nothing was written.
            NotFoundError: No game has this id. Nothing is inserted.
        """
        result = validate_game(fields)
        if not result.is_valid:
            raise FormValidationError(errors=result.errors, values=result.values)

        game = await self.store.replace_game(game_id, result.form)
        if game is None:
            raise NotFoundError(resource="game", resource_id=str(game_id))
        logger.info("Game updated: %s", game_id)
        return game.url

    async def get_game_for_delete(self, game_id: uuid.UUID) -> Optional[GameRecord]:
        return await self.store.get_game(game_id)

    async def delete_game(self, game_id: uuid.UUID) -> str:
        """Delete unconditionally and return the list url."""
        deleted = await self.store.delete_game(game_id)
        if deleted:
            logger.info("Game deleted: %s", game_id)
        return GAME_LIST_URL
