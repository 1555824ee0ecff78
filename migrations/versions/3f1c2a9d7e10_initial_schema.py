"""initial_schema

Create the users table:
- UUID primary key
- Unique email (enforces one user per address under concurrent writes)
- Age constrained to 1-150

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-19 10:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7e10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.CheckConstraint("age BETWEEN 1 AND 150", name="ck_users_age_range"),
    )
    op.create_index("idx_users_created_at", "users", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_users_created_at", table_name="users")
    op.drop_table("users")
