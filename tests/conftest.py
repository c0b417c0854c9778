"""Root conftest — shared test configuration."""

import os

# Settings are read at import of store_api.main; tests never reach a real database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-token-secret")
