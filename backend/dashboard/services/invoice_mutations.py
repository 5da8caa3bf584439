"""Invoice Mutations — the write statements behind the invoice actions.

Invariants:
    - Exactly one statement per call (INSERT / UPDATE / DELETE), bound parameters only
    - create stamps date = today (UTC); update never touches date
    - amount is written in integer cents (InvoiceForm.amount_cents)
    - Any persistence failure is rolled back, logged with its cause, and re-raised as
      InvoiceMutationError carrying only the user-facing message
    - Zero rows affected on update/delete is a silent success (logged as a warning)

Design Decisions:
    - One statement + commit, no explicit transaction block: each call touches one
      row by primary key, the store's row atomicity is enough
    - ValueError is contained alongside SQLAlchemyError: a malformed customer id is
      rejected here exactly as the store would reject the uuid literal
    - today_utc is a module function so tests can pin the clock with monkeypatch
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from uuid import UUID

from sqlalchemy import delete, insert, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from dashboard.core.domain_types import InvoiceId, MutationKind
from dashboard.core.errors import ErrorContext, InvoiceMutationError
from dashboard.models.invoice import Invoice
from dashboard.schemas.invoice import InvoiceForm

logger = logging.getLogger(__name__)

MUTATION_FAILURE_MESSAGES = {
    MutationKind.CREATE: "Database Error: Failed to Create Invoice.",
    MutationKind.UPDATE: "Database Error: Failed to Update Invoice.",
    MutationKind.DELETE: "Database Error: Failed to Delete Invoice.",
}


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


class InvoiceMutations:
    """Issues invoice write statements with error containment."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, payload: InvoiceForm) -> None:
        await self._execute(
            MutationKind.CREATE,
            lambda: insert(Invoice).values(
                customer_id=UUID(payload.customer_id),
                amount=payload.amount_cents,
                status=payload.status.value,
                date=today_utc(),
            ),
        )

    async def update(self, invoice_id: InvoiceId, payload: InvoiceForm) -> None:
        await self._execute(
            MutationKind.UPDATE,
            lambda: update(Invoice)
            .where(Invoice.id == invoice_id)
            .values(
                customer_id=UUID(payload.customer_id),
                amount=payload.amount_cents,
                status=payload.status.value,
            ),
            invoice_id,
        )

    async def delete(self, invoice_id: InvoiceId) -> None:
        await self._execute(
            MutationKind.DELETE,
            lambda: delete(Invoice).where(Invoice.id == invoice_id),
            invoice_id,
        )

    async def _execute(
        self,
        kind: MutationKind,
        build_statement: Callable[[], Executable],
        invoice_id: InvoiceId | None = None,
    ) -> None:
        log_extra = {
            "action": kind.value,
            "invoice_id": str(invoice_id) if invoice_id else None,
        }
        try:
            result = await self.db.execute(build_statement())
            await self.db.commit()
        except (SQLAlchemyError, ValueError) as e:
            await self.db.rollback()
            logger.error(
                f"Error during invoice {kind.value}: {e}",
                exc_info=True, extra=log_extra,
            )
            raise InvoiceMutationError(
                MUTATION_FAILURE_MESSAGES[kind], kind.value,
                ErrorContext(invoice_id=log_extra["invoice_id"]),
            ) from e

        # Zero-row update/delete stays a success: logged, not surfaced
        if invoice_id is not None and result.rowcount == 0:
            logger.warning(
                f"Invoice {kind.value} matched no rows",
                extra={**log_extra, "rowcount": 0},
            )
