"""Database Metadata — SQLAlchemy declarative Base shared by models, alembic and tests."""
