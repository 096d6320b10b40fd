"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or migrate on import
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RUN_MIGRATIONS", "false")
os.environ.setdefault("LOG_FORMAT", "text")
