"""Core Layer — domain types, errors, and the in-memory resolution cache.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO, no async: the cache is pure in-memory state

Design Decisions:
    - Functional core separated from imperative shell (resolver and store adapter
      live in services/ and infrastructure/)
"""
