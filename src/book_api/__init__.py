"""Book API.

HTTP service for managing book records keyed by ISBN, built on FastAPI with a
SQLModel-backed table store.
"""

__version__ = "0.1.0"
