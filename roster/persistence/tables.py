"""SQLAlchemy table definitions for Roster.

These table definitions are used with SQLAlchemy Core; domain models are
mapped manually in ``roster.persistence.mappers``.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    Uuid,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),  # Assigned by the domain on create
    Column("name", String(100), nullable=False),
    Column("email", String(100), nullable=False),
    Column("age", Integer, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    # Source of truth for email uniqueness; service pre-checks only
    # produce friendlier errors
    UniqueConstraint("email", name="uq_users_email"),
    CheckConstraint("age BETWEEN 1 AND 150", name="ck_users_age_range"),
    Index("idx_users_created_at", "created_at"),
)
