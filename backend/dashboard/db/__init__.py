"""Database Metadata — declarative Base shared by all ORM models.

Invariants:
    - Engine and sessions live in infrastructure/database.py, not here

Design Decisions:
    - asyncpg driver for PostgreSQL in production, aiosqlite in tests
"""
