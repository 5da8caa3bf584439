"""Invoice Form Schemas — declarative shape, coercion and constraints for invoice forms.

Invariants:
    - Form keys are the submitted names: customerId, amount, status
    - id and date are never accepted from the form (id comes from the path, date is computed)
    - amount is coerced from its string form to a finite Decimal, > 0, at least one cent,
      and no more than MAX_AMOUNT (the largest value the cents column stores)
    - Every failing field is reported (not just the first); each field maps to one
      user-facing message, listed once, in declaration order
    - validate_invoice_form never touches the database

Design Decisions:
    - Pydantic collects all field errors in one pass; we translate its error list into
      the form's field -> messages mapping instead of surfacing pydantic wording
    - Missing and None values are dropped before validation so "missing" and "empty
      select" report the same message
    - Create/Update forms are separate classes sharing one shape so either can diverge
      without touching the other's callers
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from dashboard.core.amounts import MAX_AMOUNT, amount_to_cents
from dashboard.core.domain_types import AmountCents, InvoiceStatus, MutationKind

FIELD_MESSAGES: dict[str, str] = {
    "customerId": "Please select a customer",
    "amount": "Amount must be greater than $0",
    "status": "Please select a status",
}


class InvoiceForm(BaseModel):
    """Validated invoice payload."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("amount")
    @classmethod
    def at_least_one_cent(cls, v: Decimal) -> Decimal:
        try:
            cents = amount_to_cents(v)
        except InvalidOperation:
            raise ValueError("amount is out of range") from None
        if cents <= 0:
            raise ValueError("amount rounds to zero cents")
        return v

    @property
    def amount_cents(self) -> AmountCents:
        return amount_to_cents(self.amount)


class CreateInvoiceForm(InvoiceForm):
    """Create form — same shape as InvoiceForm."""


class UpdateInvoiceForm(InvoiceForm):
    """Update form — same shape as InvoiceForm."""


_FORMS: dict[MutationKind, type[InvoiceForm]] = {
    MutationKind.CREATE: CreateInvoiceForm,
    MutationKind.UPDATE: UpdateInvoiceForm,
}


@dataclass(frozen=True)
class InvoiceFormResult:
    """Either a validated form (success) or field errors, never both."""
    success: bool
    data: InvoiceForm | None = None
    field_errors: dict[str, list[str]] = field(default_factory=dict)


def validate_invoice_form(
    kind: MutationKind, raw: Mapping[str, Any],
) -> InvoiceFormResult:
    """Validate submitted form fields for a create or update action."""
    form_cls = _FORMS.get(kind)
    if form_cls is None:
        raise ValueError(f"No invoice form for {kind.value} actions")
    submitted = {
        name: raw.get(name) for name in FIELD_MESSAGES
        if raw.get(name) is not None
    }
    try:
        return InvoiceFormResult(success=True, data=form_cls.model_validate(submitted))
    except ValidationError as e:
        return InvoiceFormResult(success=False, field_errors=_collect_field_errors(e))


def _collect_field_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        name = str(error["loc"][0]) if error["loc"] else "__root__"
        message = FIELD_MESSAGES.get(name, error["msg"])
        messages = errors.setdefault(name, [])
        if message not in messages:
            messages.append(message)
    return errors
