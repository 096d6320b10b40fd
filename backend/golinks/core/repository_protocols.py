"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - The durable store is accessed only through LinkRepository
    - Implementations raise DatabaseError for store failures and
      DuplicateLinkError for an insert on an existing name

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO; the cache never calls them
"""

from typing import Protocol

from golinks.core.domain_types import Identifier, LinkRecord


class LinkRepository(Protocol):
    """Contract for link persistence, implemented by shell."""
    async def list_all(self) -> list[LinkRecord]: ...
    async def get(self, name: Identifier) -> LinkRecord | None: ...
    async def insert(self, record: LinkRecord) -> None: ...
    async def delete(self, name: Identifier) -> bool: ...
