"""Database Layer — SQLAlchemy declarative base shared by ORM models and Alembic.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - asyncpg driver for PostgreSQL (native async, no thread pool overhead)
"""
