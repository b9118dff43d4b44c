"""Single-month amortization step for a revolving or installment balance.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class StepResult:
    interest: Decimal
    principal: Decimal
    new_balance: Decimal
    payment_used: Decimal


def round2(amount: Decimal) -> Decimal:
    return amount.quantize(TWO_PLACES, ROUND_HALF_UP)


def monthly_interest(balance: Decimal, annual_rate_pct: Decimal) -> Decimal:
    """Interest accrued in one month at an APR given in percent."""
    return round2(balance * annual_rate_pct / 100 / 12)


def advance(
    balance: Decimal, annual_rate_pct: Decimal, payment_available: Decimal
) -> StepResult:
    """Apply one month of interest and one payment to a balance.

    A payment that covers balance plus interest retires the debt and only the
    amount owed is used. A payment below the accrued interest leaves principal
    at zero and the balance grows (negative amortization).
    """
    interest = monthly_interest(balance, annual_rate_pct)
    owed = round2(balance + interest)

    if payment_available >= owed:
        return StepResult(
            interest=interest,
            principal=round2(balance),
            new_balance=ZERO,
            payment_used=owed,
        )

    return StepResult(
        interest=interest,
        principal=max(ZERO, round2(payment_available - interest)),
        new_balance=round2(owed - payment_available),
        payment_used=round2(payment_available),
    )


def add_months(start: date, months: int) -> date:
    """First day of the month `months` after `start`."""
    index = start.month - 1 + months
    return date(start.year + index // 12, index % 12 + 1, 1)


def month_label(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}"
