"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - InvoiceId, CustomerId, UserId wrap UUIDs — never use bare UUID in domain logic
    - Amounts are stored as integer cents; dollars only exist at the form boundary
    - All valid states encoded as Enums — no raw string matching
    - View paths are constants: actions never build redirect targets from input

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to the DB `status` column without converters
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

InvoiceId = NewType("InvoiceId", UUID)
CustomerId = NewType("CustomerId", UUID)
UserId = NewType("UserId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

AmountCents = NewType("AmountCents", int)   # > 0 for persisted invoices


# ─── Enums ───────────────────────────────────────────────────────

class InvoiceStatus(str, Enum):
    """Invoice payment state — maps to DB `status` column."""
    PENDING = "pending"
    PAID = "paid"


class MutationKind(str, Enum):
    """Which invoice action is running. Selects form schema and messages."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# ─── View Paths ──────────────────────────────────────────────────

DASHBOARD_PATH = "/dashboard"
INVOICES_VIEW_PATH = "/dashboard/invoices"
LOGIN_PATH = "/login"
