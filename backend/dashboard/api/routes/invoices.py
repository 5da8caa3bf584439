"""Invoice Routes — form posts for create/update/delete plus the invoices view.

Invariants:
    - Every route is gated by enforce_access (dashboard pages need a login)
    - Form bodies are passed to actions untouched; validation lives in schemas/invoice.py
    - Malformed invoice ids are rejected by FastAPI (UUID path type) before any action
    - Successful create/update -> 303 to /dashboard/invoices; failures -> 422 FormState
    - Delete -> 204; a failed delete surfaces as InvoiceMutationError (503 envelope)
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.api.dependencies import enforce_access, render_outcome
from dashboard.core.action_outcome import FormState
from dashboard.core.domain_types import InvoiceId
from dashboard.infrastructure.database import get_db
from dashboard.infrastructure.view_cache import ViewCache, get_view_cache
from dashboard.services.invoice_actions import InvoiceActions
from dashboard.services.invoice_mutations import InvoiceMutations
from dashboard.services.invoice_queries import (
    fetch_invoice_for_edit, fetch_invoices_view,
)

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/dashboard/invoices",
    tags=["invoices"],
    dependencies=[Depends(enforce_access)],
)


def get_invoice_actions(
    db: AsyncSession = Depends(get_db),
    cache: ViewCache = Depends(get_view_cache),
) -> InvoiceActions:
    """Per-request invoice actions bound to the request's session and the view cache."""
    return InvoiceActions(InvoiceMutations(db), cache)


@router.get("")
async def list_invoices(
    db: AsyncSession = Depends(get_db),
    cache: ViewCache = Depends(get_view_cache),
):
    """Invoices view (cached until the next invoice action)."""
    return {"invoices": await fetch_invoices_view(db, cache)}


@router.post("/create")
async def create_invoice(
    request: Request, actions: InvoiceActions = Depends(get_invoice_actions),
):
    form = await request.form()
    outcome = await actions.create_invoice(FormState(), form)
    return render_outcome(outcome)


@router.get("/{invoice_id}/edit")
async def get_invoice_for_edit(
    invoice_id: UUID, db: AsyncSession = Depends(get_db),
):
    return await fetch_invoice_for_edit(db, InvoiceId(invoice_id))


@router.post("/{invoice_id}/edit")
async def update_invoice(
    invoice_id: UUID,
    request: Request,
    actions: InvoiceActions = Depends(get_invoice_actions),
):
    form = await request.form()
    outcome = await actions.update_invoice(
        InvoiceId(invoice_id), FormState(), form,
    )
    return render_outcome(outcome)


@router.post("/{invoice_id}/delete", status_code=status.HTTP_204_NO_CONTENT)
async def delete_invoice(
    invoice_id: UUID, actions: InvoiceActions = Depends(get_invoice_actions),
):
    await actions.delete_invoice(InvoiceId(invoice_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
