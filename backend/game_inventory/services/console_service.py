"""
Game Inventory — Console Service
=================================

What:  Console operations: list, detail, create, update, guarded delete.
Who:   Called by the console route handlers; calls the InventoryStore.

Orchestration (create):
    ┌──────────┐    ┌────────────┐    ┌──────────────┐    ┌──────────┐
    │  Form    │───▶│  Validate  │───▶│ Name lookup  │───▶│  Insert  │
    │  (Route) │    │            │    │ (idempotent) │    │          │
    └──────────┘    └────────────┘    └──────────────┘    └──────────┘

Concurrency:
    Detail and delete need the console and its dependent games. The two
    reads are independent, so they are awaited together with
    asyncio.gather. They are not a snapshot: a write landing between them
    is an accepted race.
"""

import asyncio
import logging
import uuid
from typing import List, Optional, Tuple

from game_inventory.exceptions import (
    DeleteBlockedError,
    FormValidationError,
    NotFoundError,
)
from game_inventory.schemas.console import ConsoleRecord
from game_inventory.schemas.game import GameSummary
from game_inventory.store.base import InventoryStore
from game_inventory.validation import validate_console

logger = logging.getLogger(__name__)

CONSOLE_LIST_URL = "/consoles"


class ConsoleService:
    """
    Business logic for console pages.

    Error Handling Strategy:
        Unknown ids raise NotFoundError. Invalid forms raise
        FormValidationError before anything is written. A delete refused
        because games still reference the console raises
        DeleteBlockedError. Store faults pass through as DatabaseError.
    """

    def __init__(self, store: InventoryStore):
        self.store = store

    async def list_consoles(self) -> List[ConsoleRecord]:
        return await self.store.list_consoles()

    async def _console_with_games(
        self, console_id: uuid.UUID
    ) -> Tuple[Optional[ConsoleRecord], List[GameSummary]]:
        console, games = await asyncio.gather(
            self.store.get_console(console_id),
            self.store.list_games_for_console(console_id),
        )
        return console, games

    async def get_console_detail(
        self, console_id: uuid.UUID
    ) -> Tuple[ConsoleRecord, List[GameSummary]]:
        """
        Fetch a console and the games that reference it.

        Raises:
            NotFoundError: No console has this id.
        """
        console, games = await self._console_with_games(console_id)
        if console is None:
            raise NotFoundError(resource="console", resource_id=str(console_id))
        return console, games

    async def create_console(self, fields) -> str:
        """
        Validate and persist a new console, returning the url to redirect to.

        A console with the same name is not duplicated: its url is returned
        instead, so resubmitting the form is harmless.

        Raises:
            FormValidationError: Any field failed; nothing was written.
        """
        result = validate_console(fields)
        if not result.is_valid:
            raise FormValidationError(errors=result.errors, values=result.values)

        existing = await self.store.find_console_by_name(result.form.name)
        if existing is not None:
            logger.info("Console '%s' already exists: %s", existing.name, existing.id)
            return existing.url

        console = await self.store.create_console(result.form)
        logger.info("Console created: %s", console.id)
        return console.url

    async def get_console_for_update(self, console_id: uuid.UUID) -> ConsoleRecord:
        console = await self.store.get_console(console_id)
        if console is None:
            raise NotFoundError(resource="console", resource_id=str(console_id))
        return console

    async def update_console(self, console_id: uuid.UUID, fields) -> str:
        """
        Validate and full-replace the console at `console_id`.

        Raises:
            FormValidationError: Any field failed; nothing was written.
            NotFoundError: No console has this id. Nothing is inserted.
        """
        result = validate_console(fields)
        if not result.is_valid:
            raise FormValidationError(errors=result.errors, values=result.values)

        console = await self.store.replace_console(console_id, result.form)
        if console is None:
            raise NotFoundError(resource="console", resource_id=str(console_id))
        logger.info("Console updated: %s", console_id)
        return console.url

    async def get_console_for_delete(
        self, console_id: uuid.UUID
    ) -> Tuple[Optional[ConsoleRecord], List[GameSummary]]:
        """Console and its dependent games for the confirmation page; console may be None."""
        return await self._console_with_games(console_id)

    async def delete_console(self, console_id: uuid.UUID) -> str:
        """
        Delete a console that no game references; return the list url.

        A console that is already gone is not an error.

        Raises:
            DeleteBlockedError: Games still reference the console; both the
                console and its games are left unchanged.
        """
        console, games = await self._console_with_games(console_id)
        if console is None:
            return CONSOLE_LIST_URL
        if games:
            logger.info(
                "Console %s not deleted: %d dependent game(s)", console_id, len(games)
            )
            raise DeleteBlockedError(record=console, dependents=games)

        await self.store.delete_console(console_id)
        logger.info("Console deleted: %s", console_id)
        return CONSOLE_LIST_URL
