"""Persistence: SQLAlchemy async engine, models, repositories, unit of work."""
