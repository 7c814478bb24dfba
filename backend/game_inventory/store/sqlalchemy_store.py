"""
Game Inventory — SQLAlchemy Entity Store
=========================================

What:  InventoryStore implementation on async SQLAlchemy.
How:   Every method opens its own AsyncSession from the factory. An
       AsyncSession does not allow concurrent operations, so a session per
       call is what lets services gather independent reads. Writes run in
       `session_factory.begin()` and commit when the block exits.
Who:   Created by the app lifespan; called only through the InventoryStore
       interface.

Error Handling:
    SQLAlchemyError from any call is logged with its context and re-raised
    as DatabaseError, which the global handler renders as a 500 page.
    Foreign key violations (a game pointing at a missing console, or a
    console delete racing a game insert) arrive this way too.
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import delete, func, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.orm import joinedload

from game_inventory.database import create_session_factory, dispose_engine
from game_inventory.exceptions import DatabaseError
from game_inventory.models.console import Console
from game_inventory.models.game import Game
from game_inventory.schemas.console import ConsoleForm, ConsoleRecord
from game_inventory.schemas.game import GameForm, GameRecord, GameSummary
from game_inventory.store.base import InventoryStore

logger = logging.getLogger(__name__)


def _console_record(console: Console) -> ConsoleRecord:
    return ConsoleRecord.model_validate(console)


def _game_record(game: Game, with_console: bool = True) -> GameRecord:
    return GameRecord(
        id=game.id,
        name=game.name,
        description=game.description,
        console_id=game.console_id,
        price=game.price,
        number_in_stock=game.number_in_stock,
        console=_console_record(game.console) if with_console else None,
    )


class SqlAlchemyInventoryStore(InventoryStore):
    """
    Inventory store backed by a relational database.

    Args:
        engine: Async engine from `database.create_engine()`. The store owns
                it from here on and disposes it in `close()`.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._session_factory = create_session_factory(engine)

    @asynccontextmanager
    async def _session(
        self, operation: str, write: bool = False
    ) -> AsyncIterator[AsyncSession]:
        try:
            if write:
                async with self._session_factory.begin() as session:
                    yield session
            else:
                async with self._session_factory() as session:
                    yield session
        except SQLAlchemyError as e:
            logger.error("Database error during %s: %s", operation, str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": operation, "error_type": type(e).__name__},
            )

    # ── Consoles ──────────────────────────────────────────────────────────

    async def list_consoles(self) -> List[ConsoleRecord]:
        async with self._session("list_consoles") as session:
            result = await session.execute(select(Console).order_by(Console.name))
            return [_console_record(c) for c in result.scalars().all()]

    async def get_console(self, console_id: uuid.UUID) -> Optional[ConsoleRecord]:
        async with self._session("get_console") as session:
            console = await session.get(Console, console_id)
            return _console_record(console) if console else None

    async def find_console_by_name(self, name: str) -> Optional[ConsoleRecord]:
        async with self._session("find_console_by_name") as session:
            result = await session.execute(
                select(Console).where(Console.name == name).limit(1)
            )
            console = result.scalar_one_or_none()
            return _console_record(console) if console else None

    async def create_console(self, form: ConsoleForm) -> ConsoleRecord:
        async with self._session("create_console", write=True) as session:
            console = Console(name=form.name, description=form.description)
            session.add(console)
            await session.flush()  # Assigns the id inside the transaction
            return _console_record(console)

    async def replace_console(
        self, console_id: uuid.UUID, form: ConsoleForm
    ) -> Optional[ConsoleRecord]:
        async with self._session("replace_console", write=True) as session:
            result = await session.execute(
                update(Console)
                .where(Console.id == console_id)
                .values(name=form.name, description=form.description)
            )
            if result.rowcount == 0:
                return None
        return ConsoleRecord(id=console_id, name=form.name, description=form.description)

    async def delete_console(self, console_id: uuid.UUID) -> bool:
        async with self._session("delete_console", write=True) as session:
            result = await session.execute(
                delete(Console).where(Console.id == console_id)
            )
            return result.rowcount > 0

    async def count_consoles(self) -> int:
        async with self._session("count_consoles") as session:
            result = await session.execute(select(func.count()).select_from(Console))
            return result.scalar() or 0

    # ── Games ─────────────────────────────────────────────────────────────

    async def list_games(self) -> List[GameRecord]:
        async with self._session("list_games") as session:
            result = await session.execute(
                select(Game).options(joinedload(Game.console)).order_by(Game.name)
            )
            return [_game_record(g) for g in result.scalars().all()]

    async def get_game(self, game_id: uuid.UUID) -> Optional[GameRecord]:
        async with self._session("get_game") as session:
            game = await session.get(Game, game_id, options=[joinedload(Game.console)])
            return _game_record(game) if game else None

    async def list_games_for_console(self, console_id: uuid.UUID) -> List[GameSummary]:
        async with self._session("list_games_for_console") as session:
            result = await session.execute(
                select(Game.id, Game.name, Game.description)
                .where(Game.console_id == console_id)
                .order_by(Game.name)
            )
            return [
                GameSummary(id=row.id, name=row.name, description=row.description)
                for row in result.all()
            ]

    async def create_game(self, form: GameForm) -> GameRecord:
        async with self._session("create_game", write=True) as session:
            game = Game(
                name=form.name,
                description=form.description,
                console_id=form.console_id,
                price=form.price,
                number_in_stock=form.number_in_stock,
            )
            session.add(game)
            await session.flush()
            return _game_record(game, with_console=False)

    async def replace_game(
        self, game_id: uuid.UUID, form: GameForm
    ) -> Optional[GameRecord]:
        async with self._session("replace_game", write=True) as session:
            result = await session.execute(
                update(Game)
                .where(Game.id == game_id)
                .values(
                    name=form.name,
                    description=form.description,
                    console_id=form.console_id,
                    price=form.price,
                    number_in_stock=form.number_in_stock,
                )
            )
            if result.rowcount == 0:
                return None
        return GameRecord(
            id=game_id,
            name=form.name,
            description=form.description,
            console_id=form.console_id,
            price=form.price,
            number_in_stock=form.number_in_stock,
        )

    async def delete_game(self, game_id: uuid.UUID) -> bool:
        async with self._session("delete_game", write=True) as session:
            result = await session.execute(delete(Game).where(Game.id == game_id))
            return result.rowcount > 0

    async def count_games(self) -> int:
        async with self._session("count_games") as session:
            result = await session.execute(select(func.count()).select_from(Game))
            return result.scalar() or 0

    # ── Lifecycle ─────────────────────────────────────────────────────────

    async def ping(self) -> bool:
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning("Database ping failed: %s", str(e))
            return False

    async def close(self) -> None:
        await dispose_engine(self._engine)
