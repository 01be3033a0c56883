"""Database Metadata — declarative Base shared by models, startup and tests."""
