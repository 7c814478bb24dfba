"""
Game Inventory — In-Memory Store for Tests
===========================================

What:  An InventoryStore that keeps records in dicts.
Why:   Service and route tests exercise real store behaviour (ordering,
       joins, foreign key refusal) without a database.
How:   Every method yields to the event loop once before touching data, so
       gathered calls interleave the way real I/O would.

Mirrors the SQL store's constraints:
    - creating or replacing a game with an unknown console raises DatabaseError
    - deleting a console that games still reference raises DatabaseError
"""

import asyncio
import uuid
from typing import Dict, List, Optional

from game_inventory.exceptions import DatabaseError
from game_inventory.schemas.console import ConsoleForm, ConsoleRecord
from game_inventory.schemas.game import GameForm, GameRecord, GameSummary
from game_inventory.store.base import InventoryStore


class InMemoryInventoryStore(InventoryStore):

    def __init__(self):
        self.consoles: Dict[uuid.UUID, ConsoleRecord] = {}
        self.games: Dict[uuid.UUID, GameRecord] = {}
        self.closed = False

    def _joined(self, game: GameRecord) -> GameRecord:
        return game.model_copy(update={"console": self.consoles.get(game.console_id)})

    def _require_console(self, console_id: uuid.UUID) -> None:
        if console_id not in self.consoles:
            raise DatabaseError(context={"operation": "foreign_key", "console_id": str(console_id)})

    # ── Consoles ──────────────────────────────────────────────────────────

    async def list_consoles(self) -> List[ConsoleRecord]:
        await asyncio.sleep(0)
        return sorted(self.consoles.values(), key=lambda c: c.name)

    async def get_console(self, console_id: uuid.UUID) -> Optional[ConsoleRecord]:
        await asyncio.sleep(0)
        return self.consoles.get(console_id)

    async def find_console_by_name(self, name: str) -> Optional[ConsoleRecord]:
        await asyncio.sleep(0)
        return next((c for c in self.consoles.values() if c.name == name), None)

    async def create_console(self, form: ConsoleForm) -> ConsoleRecord:
        await asyncio.sleep(0)
        console = ConsoleRecord(id=uuid.uuid4(), name=form.name, description=form.description)
        self.consoles[console.id] = console
        return console

    async def replace_console(
        self, console_id: uuid.UUID, form: ConsoleForm
    ) -> Optional[ConsoleRecord]:
        await asyncio.sleep(0)
        if console_id not in self.consoles:
            return None
        console = ConsoleRecord(id=console_id, name=form.name, description=form.description)
        self.consoles[console_id] = console
        return console

    async def delete_console(self, console_id: uuid.UUID) -> bool:
        await asyncio.sleep(0)
        if any(g.console_id == console_id for g in self.games.values()):
            raise DatabaseError(context={"operation": "delete_console"})
        return self.consoles.pop(console_id, None) is not None

    async def count_consoles(self) -> int:
        await asyncio.sleep(0)
        return len(self.consoles)

    # ── Games ─────────────────────────────────────────────────────────────

    async def list_games(self) -> List[GameRecord]:
        await asyncio.sleep(0)
        return [self._joined(g) for g in sorted(self.games.values(), key=lambda g: g.name)]

    async def get_game(self, game_id: uuid.UUID) -> Optional[GameRecord]:
        await asyncio.sleep(0)
        game = self.games.get(game_id)
        return self._joined(game) if game else None

    async def list_games_for_console(self, console_id: uuid.UUID) -> List[GameSummary]:
        await asyncio.sleep(0)
        return [
            GameSummary(id=g.id, name=g.name, description=g.description)
            for g in sorted(self.games.values(), key=lambda g: g.name)
            if g.console_id == console_id
        ]

    async def create_game(self, form: GameForm) -> GameRecord:
        await asyncio.sleep(0)
        self._require_console(form.console_id)
        game = GameRecord(id=uuid.uuid4(), **form.model_dump())
        self.games[game.id] = game
        return game

    async def replace_game(
        self, game_id: uuid.UUID, form: GameForm
    ) -> Optional[GameRecord]:
        await asyncio.sleep(0)
        if game_id not in self.games:
            return None
        self._require_console(form.console_id)
        game = GameRecord(id=game_id, **form.model_dump())
        self.games[game_id] = game
        return game

    async def delete_game(self, game_id: uuid.UUID) -> bool:
        await asyncio.sleep(0)
        return self.games.pop(game_id, None) is not None

    async def count_games(self) -> int:
        await asyncio.sleep(0)
        return len(self.games)

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def ping(self) -> bool:
        return not self.closed

    async def close(self) -> None:
        self.closed = True
