"""GoLink ORM — the durable (name, url) table.

Invariants:
    - name is the primary key (unique, case-sensitive)
    - url is non-nullable text, validated before it reaches the table

Design Decisions:
    - Natural key over surrogate id: links are only ever addressed by name
    - created_at kept for operators; the domain record ignores it
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from golinks.core.domain_types import LinkRecord
from golinks.db.base import Base


class GoLink(Base):
    """One go-link row."""
    __tablename__ = "golinks"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_record(self) -> LinkRecord:
        return LinkRecord.create(self.name, self.url)
