"""Integrations with third-party libraries (pydantic, SQLAlchemy)."""
