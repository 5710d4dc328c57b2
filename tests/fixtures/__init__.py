"""Shared pytest fixtures for the book API tests."""

from .books import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
