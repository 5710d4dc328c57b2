"""Pytest configuration: point the app at a throwaway database before import."""

import os
from pathlib import Path

_ROOT = Path(__file__).resolve().parent.parent

# Must run before anything imports src.book_api.runtime.context
os.environ["BOOK_API_CONFIG"] = str(_ROOT / "config.yaml")
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BOOK_STORE_BACKEND"] = "table"
os.environ["FUNCTION_AUTH_ENABLED"] = "true"
os.environ["BOOK_API_FUNCTION_KEY"] = "test-function-key"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("LOG_FILE", None)

from tests.fixtures import *  # noqa: E402,F401,F403
