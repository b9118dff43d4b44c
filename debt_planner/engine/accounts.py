"""Projection of account-store records into payoff engine inputs."""

from collections.abc import Iterable
from decimal import Decimal

from debt_planner.models.account import AccountRecord
from debt_planner.models.debt import DebtAccount


def to_debt_account(record: AccountRecord) -> DebtAccount:
    return DebtAccount(
        id=record.id,
        name=record.name,
        current_balance=abs(record.current_balance),
        interest_rate=record.interest_rate or Decimal("0"),
        minimum_payment=record.minimum_payment or Decimal("0"),
        is_mortgage=record.is_mortgage,
    )


def list_debt_accounts(
    records: Iterable[AccountRecord], include_mortgages: bool = False
) -> list[DebtAccount]:
    """Active debt accounts in store order; mortgages only when asked for."""
    return [
        to_debt_account(r)
        for r in records
        if r.is_active and r.is_debt and (include_mortgages or not r.is_mortgage)
    ]
