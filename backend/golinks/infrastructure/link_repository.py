"""SQL Link Repository — LinkRepository implementation over the golinks table.

Invariants:
    - Every method maps SQLAlchemy failures to DatabaseError
    - insert() on an existing name raises DuplicateLinkError, never overwrites
    - insert() and delete() commit their own transaction
    - Rows that no longer validate are skipped by list_all() and get() and logged

Design Decisions:
    - Session injected per request (get_db) or per startup task (db_manager.session)
    - Existence checked before insert so the common duplicate case is a clean 409;
      the primary key still catches a concurrent insert of the same name
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from golinks.core.domain_types import Identifier, LinkRecord
from golinks.core.errors import DuplicateLinkError, GoLinksError
from golinks.infrastructure.database import to_database_error
from golinks.models.golink import GoLink

logger = logging.getLogger(__name__)


class SqlLinkRepository:
    """Durable link store backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[LinkRecord]:
        async with self._mapped_errors():
            result = await self.db.execute(select(GoLink))
            rows = result.scalars().all()
        return [r for r in map(_valid_record, rows) if r is not None]

    async def get(self, name: Identifier) -> LinkRecord | None:
        async with self._mapped_errors():
            result = await self.db.execute(
                select(GoLink).where(GoLink.name == name.value),
            )
            row = result.scalar_one_or_none()
        return _valid_record(row) if row else None

    async def insert(self, record: LinkRecord) -> None:
        async with self._mapped_errors():
            existing = await self.db.get(GoLink, record.name.value)
            if existing is not None:
                raise DuplicateLinkError(record.name.value)
            self.db.add(GoLink(name=record.name.value, url=record.url))
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                raise DuplicateLinkError(record.name.value)

    async def delete(self, name: Identifier) -> bool:
        """Delete the row; False when no row had that name."""
        async with self._mapped_errors():
            result = await self.db.execute(
                delete(GoLink).where(GoLink.name == name.value),
            )
            await self.db.commit()
        return result.rowcount > 0

    @asynccontextmanager
    async def _mapped_errors(self) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            await self.db.rollback()
            raise to_database_error(e) from e


def _valid_record(row: GoLink) -> LinkRecord | None:
    """Domain record for row, or None (logged) when it no longer validates."""
    try:
        return row.to_record()
    except GoLinksError as e:
        logger.warning(
            f"Skipping stored link that no longer validates: {e.message}",
            extra={"link_name": row.name, "error_code": e.code},
        )
        return None
