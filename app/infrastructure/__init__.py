"""Infrastructure: persistence (SQLAlchemy async) and repositories."""
