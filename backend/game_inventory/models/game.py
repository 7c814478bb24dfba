"""
Game Inventory — Game SQLAlchemy Model
=======================================

What:  ORM model representing the `games` table.
Who:   Used by the SQLAlchemy store for CRUD and by Alembic for migrations.

Table Design:
    - console_id is a required foreign key with ON DELETE RESTRICT, so the
      database refuses to orphan games even if the service guard is bypassed
    - console_id indexed: console detail and delete both query by it
    - price is a float, number_in_stock an integer; both validated as
      non-negative before they reach the store
"""

import uuid

from sqlalchemy import Float, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from game_inventory.database import Base
from game_inventory.models.console import Console


class Game(Base):
    """A game title held in stock for exactly one console."""

    __tablename__ = "games"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    console_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("consoles.id", ondelete="RESTRICT"),
        nullable=False,
    )

    price: Mapped[float] = mapped_column(Float, nullable=False)

    number_in_stock: Mapped[int] = mapped_column(Integer, nullable=False)

    console: Mapped[Console] = relationship(lazy="raise")

    __table_args__ = (
        Index("idx_games_name", "name"),
        Index("idx_games_console_id", "console_id"),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return (
            f"<Game(id={self.id}, name='{self.name}', "
            f"console_id={self.console_id})>"
        )
