"""Invoice Actions — the validate -> persist -> revalidate -> redirect pipeline.

Tests cover:
    - Validation failure: FormState errors + message, no persistence, no revalidation
    - Persistence failure: FormState "Database Error" message, no revalidation, no redirect
    - Success: revalidate the invoices view, then Redirect to it (in that order)
    - delete: persist then revalidate, no redirect; failure propagates, no revalidation
    - End-to-end against SQLite for the documented create scenario
"""

from datetime import date
from uuid import uuid4

import pytest
from sqlalchemy import select

from dashboard.core.action_outcome import Failed, FormState, Redirect
from dashboard.core.domain_types import INVOICES_VIEW_PATH, InvoiceId
from dashboard.core.errors import InvoiceMutationError
from dashboard.models.invoice import Invoice
from dashboard.services import invoice_mutations
from dashboard.services.invoice_actions import InvoiceActions
from dashboard.services.invoice_mutations import InvoiceMutations


def _actions(cache, mutations) -> InvoiceActions:
    return InvoiceActions(mutations, cache)


def _valid_form(customer_id="c1"):
    return {"customerId": str(customer_id), "amount": "50.5", "status": "pending"}


# ─── create / update: validation failures ────────────────────────

async def test_create_validation_failure_returns_errors(recording_cache, recording_mutations):
    actions = _actions(recording_cache, recording_mutations)

    outcome = await actions.create_invoice(
        FormState(), {"customerId": "", "amount": "0", "status": "bogus"},
    )

    assert isinstance(outcome, Failed)
    assert set(outcome.state.errors) == {"customerId", "amount", "status"}
    assert outcome.state.message == "Missing Fields. Failed to Create Invoice."
    assert recording_mutations.calls == []
    assert recording_cache.revalidated == []


@pytest.mark.parametrize("amount", ["0", "-5", "abc", ""])
async def test_bad_amount_never_persists(recording_cache, recording_mutations, amount):
    actions = _actions(recording_cache, recording_mutations)

    outcome = await actions.update_invoice(
        InvoiceId(uuid4()), FormState(), {**_valid_form(), "amount": amount},
    )

    assert isinstance(outcome, Failed)
    assert outcome.state.errors == {"amount": ["Amount must be greater than $0"]}
    assert outcome.state.message == "Missing Fields. Failed to Update Invoice."
    assert recording_mutations.calls == []
    assert recording_cache.revalidated == []


# ─── create / update: persistence failures ───────────────────────

async def test_create_persistence_failure_returns_message(
    recording_cache, recording_mutations,
):
    recording_mutations.error = InvoiceMutationError(
        "Database Error: Failed to Create Invoice.", "create",
    )

    outcome = await _actions(recording_cache, recording_mutations).create_invoice(
        FormState(), _valid_form(),
    )

    assert outcome == Failed(FormState(message="Database Error: Failed to Create Invoice."))
    assert "Database Error" in outcome.state.message
    assert recording_cache.revalidated == []


async def test_update_persistence_failure_does_not_redirect(
    recording_cache, failing_db,
):
    actions = InvoiceActions(InvoiceMutations(failing_db), recording_cache)

    outcome = await actions.update_invoice(
        InvoiceId(uuid4()), FormState(), _valid_form(uuid4()),
    )

    assert not isinstance(outcome, Redirect)
    assert outcome.state.message == "Database Error: Failed to Update Invoice."
    assert outcome.state.errors is None
    assert recording_cache.revalidated == []


async def test_unrelated_exceptions_propagate(recording_cache, recording_mutations):
    mutations = recording_mutations

    async def boom(payload):
        raise RuntimeError("bug")

    mutations.create = boom

    with pytest.raises(RuntimeError):
        await _actions(recording_cache, mutations).create_invoice(FormState(), _valid_form())
    assert recording_cache.revalidated == []


# ─── create / update: success ────────────────────────────────────

async def test_create_success_revalidates_then_redirects(
    event_log, recording_cache, recording_mutations,
):
    outcome = await _actions(recording_cache, recording_mutations).create_invoice(
        FormState(), _valid_form(),
    )

    assert outcome == Redirect(path=INVOICES_VIEW_PATH)
    assert event_log == [("persist", "create"), ("revalidate", INVOICES_VIEW_PATH)]


async def test_update_success_revalidates_then_redirects(
    event_log, recording_cache, recording_mutations,
):
    invoice_id = InvoiceId(uuid4())

    outcome = await _actions(recording_cache, recording_mutations).update_invoice(
        invoice_id, FormState(message="stale"), _valid_form(),
    )

    assert outcome == Redirect(path=INVOICES_VIEW_PATH)
    assert event_log == [("persist", "update"), ("revalidate", INVOICES_VIEW_PATH)]
    assert recording_mutations.calls[0][1] == invoice_id


# ─── delete ──────────────────────────────────────────────────────

async def test_delete_revalidates_without_redirect(
    event_log, recording_cache, recording_mutations,
):
    result = await _actions(recording_cache, recording_mutations).delete_invoice(
        InvoiceId(uuid4()),
    )

    assert result is None
    assert event_log == [("persist", "delete"), ("revalidate", INVOICES_VIEW_PATH)]


async def test_delete_failure_propagates_without_revalidation(
    recording_cache, recording_mutations,
):
    mutations = recording_mutations
    mutations.error = InvoiceMutationError(
        "Database Error: Failed to Delete Invoice.", "delete",
    )

    with pytest.raises(InvoiceMutationError):
        await _actions(recording_cache, mutations).delete_invoice(InvoiceId(uuid4()))
    assert recording_cache.revalidated == []


# ─── end-to-end against SQLite ───────────────────────────────────

async def test_create_scenario_persists_and_redirects(
    test_db, seed_customer, view_cache, monkeypatch,
):
    monkeypatch.setattr(invoice_mutations, "today_utc", lambda: date(2024, 6, 1))
    view_cache.put(INVOICES_VIEW_PATH, [])

    outcome = await InvoiceActions(InvoiceMutations(test_db), view_cache).create_invoice(
        FormState(), _valid_form(seed_customer.id),
    )

    assert outcome == Redirect(path="/dashboard/invoices")
    assert INVOICES_VIEW_PATH not in view_cache
    result = await test_db.execute(
        select(Invoice.customer_id, Invoice.amount, Invoice.status, Invoice.date),
    )
    assert result.one() == (seed_customer.id, 5050, "pending", date(2024, 6, 1))
