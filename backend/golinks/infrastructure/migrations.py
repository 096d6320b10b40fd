"""Migrations Runner — upgrade the database schema to Alembic head at startup.

Invariants:
    - Uses the same alembic/ scripts as the `alembic` CLI
    - Failure raises and aborts startup (never serve against an unknown schema)

Design Decisions:
    - Runs in a worker thread: alembic/env.py drives its own event loop via asyncio.run
"""

import asyncio
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[2]


def build_alembic_config(database_url: str) -> Config:
    """Alembic config pointing at the bundled scripts and the given database."""
    cfg = Config(str(_BACKEND_DIR / "alembic.ini"))
    cfg.set_main_option("script_location", str(_BACKEND_DIR / "alembic"))
    cfg.attributes["database_url"] = database_url
    return cfg


def upgrade_to_head(database_url: str) -> None:
    command.upgrade(build_alembic_config(database_url), "head")


async def run_migrations(database_url: str) -> None:
    """Upgrade to head without blocking the event loop."""
    logger.info("Running database migrations")
    await asyncio.to_thread(upgrade_to_head, database_url)
    logger.info("Database schema is up to date")
