"""Create consoles and games tables

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates `consoles` and `games`, with games.console_id referencing
       consoles.id (ON DELETE RESTRICT).
Rollback: downgrade() drops both tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "consoles",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    # List pages order by name; create looks consoles up by name
    op.create_index("idx_consoles_name", "consoles", ["name"])

    op.create_table(
        "games",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("console_id", sa.Uuid(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("number_in_stock", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["console_id"], ["consoles.id"], ondelete="RESTRICT"
        ),
    )
    op.create_index("idx_games_name", "games", ["name"])
    # Console detail and delete both select games by console
    op.create_index("idx_games_console_id", "games", ["console_id"])


def downgrade() -> None:
    """Drop games first; its foreign key blocks dropping consoles."""
    op.drop_index("idx_games_console_id", table_name="games")
    op.drop_index("idx_games_name", table_name="games")
    op.drop_table("games")
    op.drop_index("idx_consoles_name", table_name="consoles")
    op.drop_table("consoles")
