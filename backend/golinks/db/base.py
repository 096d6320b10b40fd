"""SQLAlchemy Declarative Base — shared base class for all ORM models.

Invariants:
    - Base is the single source of truth for table metadata (Alembic reads it)

Design Decisions:
    - Separate file for Base: models and migrations import it without cycles
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all golinks ORM models."""
    pass
