"""Domain Types — verifies enum values and view path constants.

Tests:
    - InvoiceStatus has exactly pending and paid, serialized as strings
    - Identity types wrap UUIDs
    - Invoice actions target the invoices view under the dashboard
"""

from uuid import uuid4

from dashboard.core.domain_types import (
    DASHBOARD_PATH, INVOICES_VIEW_PATH,
    InvoiceId, CustomerId, InvoiceStatus, MutationKind,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert InvoiceId(uid) == uid
    assert CustomerId(uid) == uid


def test_invoice_status_values():
    assert {s.value for s in InvoiceStatus} == {"pending", "paid"}
    assert InvoiceStatus("paid") is InvoiceStatus.PAID


def test_mutation_kinds():
    assert {k.value for k in MutationKind} == {"create", "update", "delete"}


def test_invoices_view_is_under_dashboard():
    assert INVOICES_VIEW_PATH == "/dashboard/invoices"
    assert INVOICES_VIEW_PATH.startswith(DASHBOARD_PATH + "/")
