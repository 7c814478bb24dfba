"""
Game Inventory — Console SQLAlchemy Model
==========================================

What:  ORM model representing the `consoles` table.
Who:   Used by the SQLAlchemy store for CRUD and by Alembic for migrations.

Table Design:
    - UUID primary key assigned in Python at insert time
    - name indexed: every list page orders by it, create looks it up by value
    - No url column: the reference path is derived from the id on read
    - No relationship collection: dependent games are always fetched with an
      explicit query so the detail and delete pages can run it concurrently
"""

import uuid

from sqlalchemy import Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from game_inventory.database import Base


class Console(Base):
    """
    A console that games in the inventory belong to.

    Lifecycle:
        Created by the console create form, replaced in full by the update
        form, deleted only while no Game references it.
    """

    __tablename__ = "consoles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        Index("idx_consoles_name", "name"),
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation for debugging."""
        return f"<Console(id={self.id}, name='{self.name}')>"
