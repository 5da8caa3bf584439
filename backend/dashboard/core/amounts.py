"""Amount Conversion — dollars at the form boundary, integer cents in the store.

Invariants:
    - amount_to_cents rounds half-up to the nearest cent (1.005 -> 101)
    - cents_to_amount(amount_to_cents(a)) == a for any a with at most 2 decimals
    - MAX_AMOUNT_CENTS is the largest value the INTEGER amount column holds;
      MAX_AMOUNT is the same bound in dollars (21474836.47)
    - Pure functions: Decimal in, int out, no float arithmetic
"""

from decimal import Decimal, ROUND_HALF_UP

from dashboard.core.domain_types import AmountCents

_CENTS_PER_DOLLAR = Decimal(100)

MAX_AMOUNT_CENTS = AmountCents(2**31 - 1)


def amount_to_cents(amount: Decimal) -> AmountCents:
    """Convert a dollar amount to whole cents.

    Raises decimal.InvalidOperation when the result exceeds the decimal context
    precision; callers validating user input bound the amount first.
    """
    cents = (amount * _CENTS_PER_DOLLAR).quantize(
        Decimal("1"), rounding=ROUND_HALF_UP,
    )
    return AmountCents(int(cents))


def cents_to_amount(cents: int) -> Decimal:
    """Convert stored cents back to a two-decimal dollar amount."""
    return (Decimal(cents) / _CENTS_PER_DOLLAR).quantize(Decimal("0.01"))


MAX_AMOUNT = cents_to_amount(MAX_AMOUNT_CENTS)
