"""Invoice ORM — one billed amount for one customer.

Invariants:
    - id is UUID primary key generated by the store on insert (uuid4 default)
    - amount is integer cents, never dollars
    - status is one of InvoiceStatus values ("pending" | "paid")
    - date is the UTC calendar date stamped at creation; updates never touch it

Design Decisions:
    - Column is named `amount` (not `amount_cents`) to match the existing table
    - status stored as String, validated upstream by the form schema, so the
      column accepts rows written by other tools without an enum migration
"""

import uuid
import datetime

from sqlalchemy import String, Integer, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from dashboard.db.base import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    customer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("customers.id"), nullable=False,
    )
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    customer: Mapped["Customer"] = relationship(
        "Customer", back_populates="invoices",
    )
