"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or reuse a real signing secret
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
