"""Invoice Queries — read side of the dashboard, served through the view cache.

Invariants:
    - The invoices list is read-through cached under INVOICES_VIEW_PATH; it is only
      recomputed after an invoice action revalidates it
    - A list read that overlaps a revalidate is returned but not cached, so a
      pre-commit snapshot can never outlive the write that made it stale
    - Amounts leave this module in cents for the list and in dollars (string, 2 dp)
      for the edit form, so cents / 100 round-trips the submitted amount
    - Missing invoice -> ResourceNotFoundError (404)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.amounts import cents_to_amount
from dashboard.core.domain_types import INVOICES_VIEW_PATH, InvoiceId
from dashboard.core.errors import ErrorContext, ResourceNotFoundError
from dashboard.infrastructure.view_cache import ViewCache
from dashboard.models.customer import Customer
from dashboard.models.invoice import Invoice

logger = logging.getLogger(__name__)


async def fetch_invoices_view(db: AsyncSession, cache: ViewCache) -> list[dict]:
    """Invoices joined with customer, newest first."""
    cached = cache.get(INVOICES_VIEW_PATH)
    if cached is not None:
        return cached

    generation = cache.generation(INVOICES_VIEW_PATH)
    result = await db.execute(
        select(Invoice, Customer.name, Customer.email)
        .join(Customer, Invoice.customer_id == Customer.id)
        .order_by(Invoice.date.desc()),
    )
    view = [
        {
            "id": str(invoice.id),
            "customerId": str(invoice.customer_id),
            "name": name,
            "email": email,
            "amount": invoice.amount,
            "status": invoice.status,
            "date": invoice.date.isoformat(),
        }
        for invoice, name, email in result.all()
    ]
    cache.put(INVOICES_VIEW_PATH, view, generation)
    logger.info(
        f"Rendered invoices view ({len(view)} rows)",
        extra={"view_path": INVOICES_VIEW_PATH},
    )
    return view


async def fetch_invoice_for_edit(db: AsyncSession, invoice_id: InvoiceId) -> dict:
    result = await db.execute(select(Invoice).where(Invoice.id == invoice_id))
    invoice = result.scalar_one_or_none()
    if invoice is None:
        raise ResourceNotFoundError(
            "Invoice", str(invoice_id),
            ErrorContext(invoice_id=str(invoice_id), action="edit"),
        )
    return {
        "id": str(invoice.id),
        "customerId": str(invoice.customer_id),
        "amount": str(cents_to_amount(invoice.amount)),
        "status": invoice.status,
    }
