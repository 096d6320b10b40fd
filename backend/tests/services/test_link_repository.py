"""SQL Link Repository — CRUD against an in-memory SQLite database."""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from golinks.core.domain_types import Identifier, LinkRecord
from golinks.core.errors import DatabaseError, DuplicateLinkError
from golinks.infrastructure.link_repository import SqlLinkRepository
from golinks.models.golink import GoLink

DOCS = LinkRecord.create("docs", "https://docs.example.com")


async def test_insert_then_get(test_db):
    repo = SqlLinkRepository(test_db)
    await repo.insert(DOCS)
    assert await repo.get(Identifier.parse("docs")) == DOCS


async def test_get_missing_returns_none(test_db):
    assert await SqlLinkRepository(test_db).get(Identifier.parse("nope")) is None


async def test_insert_duplicate_raises(test_db):
    repo = SqlLinkRepository(test_db)
    await repo.insert(DOCS)
    with pytest.raises(DuplicateLinkError):
        await repo.insert(LinkRecord.create("docs", "https://other.example.com"))
    # Original row untouched
    assert await repo.get(Identifier.parse("docs")) == DOCS


async def test_insert_is_committed(test_db, test_session_factory):
    await SqlLinkRepository(test_db).insert(DOCS)
    async with test_session_factory() as other:
        result = await other.execute(select(GoLink.url).where(GoLink.name == "docs"))
        assert result.scalar_one() == "https://docs.example.com"


async def test_delete_reports_whether_row_existed(test_db):
    repo = SqlLinkRepository(test_db)
    await repo.insert(DOCS)
    assert await repo.delete(Identifier.parse("docs")) is True
    assert await repo.delete(Identifier.parse("docs")) is False
    assert await repo.get(Identifier.parse("docs")) is None


async def test_list_all_returns_every_record(test_db):
    repo = SqlLinkRepository(test_db)
    wiki = LinkRecord.create("wiki", "https://wiki.example.com")
    await repo.insert(DOCS)
    await repo.insert(wiki)
    assert set(await repo.list_all()) == {DOCS, wiki}


async def test_list_all_skips_rows_that_no_longer_validate(test_db):
    test_db.add(GoLink(name="broken", url="not-a-url"))
    await test_db.commit()
    repo = SqlLinkRepository(test_db)
    await repo.insert(DOCS)
    assert await repo.list_all() == [DOCS]


async def test_sqlalchemy_errors_become_database_errors(test_db, monkeypatch):
    async def broken_execute(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(test_db, "execute", broken_execute)
    with pytest.raises(DatabaseError):
        await SqlLinkRepository(test_db).get(Identifier.parse("docs"))


async def test_get_treats_row_that_no_longer_validates_as_missing(test_db, caplog):
    test_db.add(GoLink(name="broken", url="not-a-url"))
    await test_db.commit()
    with caplog.at_level("WARNING", logger="golinks.infrastructure.link_repository"):
        assert await SqlLinkRepository(test_db).get(Identifier.parse("broken")) is None
    assert "no longer validates" in caplog.text
