"""Database Infrastructure — async session factory and SQLAlchemy Base.

Invariants:
    - Single async engine per app instance (owned by DatabaseSessionManager)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite driver by default: the contact book ships as a single-file store
"""
