"""Invoice Actions — validate -> persist -> revalidate -> redirect, per form submission.

Invariants:
    - Validation failure: Failed(FormState(errors, message)); nothing persisted,
      cache untouched, no redirect
    - Persistence failure: Failed(FormState(message="Database Error: ...")); cache
      untouched, no redirect
    - Success: the invoices view is revalidated, THEN Redirect("/dashboard/invoices")
      is returned — always both, always in that order
    - Only InvoiceMutationError is contained; any other exception propagates
    - delete has no validation stage and no redirect; its failure propagates as
      InvoiceMutationError for the HTTP layer to render

Design Decisions:
    - Redirect is a returned value (core/action_outcome.py), so the `except` around
      persistence cannot intercept navigation by construction
    - prev_state is accepted to keep the form-action signature (state, form) but is
      not consulted: every submission is validated from scratch
"""

import logging
from collections.abc import Mapping
from typing import Any

from dashboard.core.action_outcome import ActionOutcome, Failed, FormState, redirect
from dashboard.core.domain_types import INVOICES_VIEW_PATH, InvoiceId, MutationKind
from dashboard.core.errors import InvoiceMutationError
from dashboard.core.repository_protocols import ViewRevalidator
from dashboard.schemas.invoice import validate_invoice_form
from dashboard.services.invoice_mutations import InvoiceMutations

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGES = {
    MutationKind.CREATE: "Missing Fields. Failed to Create Invoice.",
    MutationKind.UPDATE: "Missing Fields. Failed to Update Invoice.",
}


class InvoiceActions:
    """Create/update/delete entry points invoked by invoice form posts."""

    def __init__(self, mutations: InvoiceMutations, cache: ViewRevalidator):
        self.mutations = mutations
        self.cache = cache

    async def create_invoice(
        self, prev_state: FormState, form_data: Mapping[str, Any],
    ) -> ActionOutcome:
        result = validate_invoice_form(MutationKind.CREATE, form_data)
        if not result.success:
            return _invalid(MutationKind.CREATE, result.field_errors)
        try:
            await self.mutations.create(result.data)
        except InvoiceMutationError as e:
            return Failed(FormState(message=e.message))
        return self._finish(MutationKind.CREATE)

    async def update_invoice(
        self,
        invoice_id: InvoiceId,
        prev_state: FormState,
        form_data: Mapping[str, Any],
    ) -> ActionOutcome:
        result = validate_invoice_form(MutationKind.UPDATE, form_data)
        if not result.success:
            return _invalid(MutationKind.UPDATE, result.field_errors)
        try:
            await self.mutations.update(invoice_id, result.data)
        except InvoiceMutationError as e:
            return Failed(FormState(message=e.message))
        return self._finish(MutationKind.UPDATE)

    async def delete_invoice(self, invoice_id: InvoiceId) -> None:
        await self.mutations.delete(invoice_id)
        self.cache.revalidate(INVOICES_VIEW_PATH)
        logger.info(
            "Invoice deleted",
            extra={"action": MutationKind.DELETE.value, "invoice_id": str(invoice_id)},
        )

    def _finish(self, kind: MutationKind) -> ActionOutcome:
        self.cache.revalidate(INVOICES_VIEW_PATH)
        logger.info(f"Invoice {kind.value} committed", extra={"action": kind.value})
        return redirect(INVOICES_VIEW_PATH)


def _invalid(kind: MutationKind, field_errors: dict[str, list[str]]) -> Failed:
    logger.info(
        f"Invoice {kind.value} rejected: {sorted(field_errors)}",
        extra={"action": kind.value},
    )
    return Failed(FormState(
        errors=field_errors, message=MISSING_FIELDS_MESSAGES[kind],
    ))
