"""PostgreSQL persistence (SQLAlchemy async)."""
