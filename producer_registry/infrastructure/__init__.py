"""Infrastructure — database session management and logging setup.

Invariants:
    - Single async engine per application (created via init_db in the lifespan)
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for tests
"""
