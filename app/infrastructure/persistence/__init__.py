"""Persistence: SQLAlchemy engine, ORM models, record stores."""
