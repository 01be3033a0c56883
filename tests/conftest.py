"""Root conftest — shared test configuration."""

import os

# Keep tests off any real PostgreSQL configured in the environment
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///test.db"
os.environ.setdefault("LOG_FORMAT", "text")
