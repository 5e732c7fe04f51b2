"""Root conftest — shared test configuration."""

import os

# Importing reviews_api.main builds an app; keep it off real databases
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
