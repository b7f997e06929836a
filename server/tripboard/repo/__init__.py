"""Data access layer: abstract interfaces and their SQLAlchemy implementations."""
