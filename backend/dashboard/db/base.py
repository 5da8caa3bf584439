"""SQLAlchemy Declarative Base — shared base class for dashboard tables.

Invariants:
    - All models inherit from Base
    - Base.metadata is the table set the test fixtures create in SQLite

Design Decisions:
    - Separate file for Base: models import it without importing each other
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for invoices, customers and users."""
    pass
