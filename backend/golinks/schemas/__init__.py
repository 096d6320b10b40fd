"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary; they reuse core validators so the
      boundary and the domain agree

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
