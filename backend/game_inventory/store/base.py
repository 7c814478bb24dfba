"""
Game Inventory — Abstract Entity Store Interface
=================================================

What:  Abstract base class defining the persistence contract for consoles
       and games.
Why:   Services receive a store through their constructor. Production wires
       in SqlAlchemyInventoryStore; tests wire in an in-memory store with
       the same contract.
How:   Every method is a coroutine, so each call is one suspension point.
       Independent calls may be awaited concurrently; implementations must
       not share per-call state between them.

Contract shared by all implementations:
    - List methods return records ordered ascending by name.
    - Lookups return None for unknown identifiers; they never raise
      NotFoundError (that is a service decision).
    - replace_* performs a full-replace write and returns None when no
      record has the given id. It never inserts.
    - Unexpected persistence faults are raised as DatabaseError.
"""

import uuid
from abc import ABC, abstractmethod
from typing import List, Optional

from game_inventory.schemas.console import ConsoleForm, ConsoleRecord
from game_inventory.schemas.game import GameForm, GameRecord, GameSummary


class InventoryStore(ABC):
    """Async create/read/update/delete interface over consoles and games."""

    # ── Consoles ──────────────────────────────────────────────────────────

    @abstractmethod
    async def list_consoles(self) -> List[ConsoleRecord]:
        """All consoles, ascending by name."""
        ...

    @abstractmethod
    async def get_console(self, console_id: uuid.UUID) -> Optional[ConsoleRecord]:
        ...

    @abstractmethod
    async def find_console_by_name(self, name: str) -> Optional[ConsoleRecord]:
        """First console whose name equals `name` exactly, or None."""
        ...

    @abstractmethod
    async def create_console(self, form: ConsoleForm) -> ConsoleRecord:
        ...

    @abstractmethod
    async def replace_console(
        self, console_id: uuid.UUID, form: ConsoleForm
    ) -> Optional[ConsoleRecord]:
        ...

    @abstractmethod
    async def delete_console(self, console_id: uuid.UUID) -> bool:
        """Delete by id. Returns False when nothing was deleted."""
        ...

    @abstractmethod
    async def count_consoles(self) -> int:
        ...

    # ── Games ─────────────────────────────────────────────────────────────

    @abstractmethod
    async def list_games(self) -> List[GameRecord]:
        """All games, ascending by name, each with its console joined."""
        ...

    @abstractmethod
    async def get_game(self, game_id: uuid.UUID) -> Optional[GameRecord]:
        """One game with its console joined, or None."""
        ...

    @abstractmethod
    async def list_games_for_console(self, console_id: uuid.UUID) -> List[GameSummary]:
        """Dependent games of a console, projected to name and description."""
        ...

    @abstractmethod
    async def create_game(self, form: GameForm) -> GameRecord:
        ...

    @abstractmethod
    async def replace_game(
        self, game_id: uuid.UUID, form: GameForm
    ) -> Optional[GameRecord]:
        ...

    @abstractmethod
    async def delete_game(self, game_id: uuid.UUID) -> bool:
        """Delete by id. Returns False when nothing was deleted."""
        ...

    @abstractmethod
    async def count_games(self) -> int:
        ...

    # ── Lifecycle ─────────────────────────────────────────────────────────

    @abstractmethod
    async def ping(self) -> bool:
        """
        Lightweight connectivity check for the health endpoint.

        Returns True if the backing database answers, False otherwise.
        """
        ...

    async def close(self) -> None:
        """Release backing resources. Called once at application shutdown."""
        return None
