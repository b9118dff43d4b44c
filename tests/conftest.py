"""Canonical test fixtures used across engine and API tests.

Fixture: two credit cards.
    Card A: $1,000 at 24% APR, $50 minimum (higher rate, larger balance).
    Card B: $500 at 10% APR, $25 minimum.
Plans are made in January 2026, so the first payment month is 2026-02.
"""

from datetime import date
from decimal import Decimal

import pytest

from debt_planner.models.account import AccountRecord, AccountType
from debt_planner.models.debt import DebtAccount


@pytest.fixture
def as_of() -> date:
    return date(2026, 1, 15)


@pytest.fixture
def card_a() -> DebtAccount:
    return DebtAccount(
        id="card_a",
        name="Card A",
        current_balance=Decimal("1000"),
        interest_rate=Decimal("24"),
        minimum_payment=Decimal("50"),
    )


@pytest.fixture
def card_b() -> DebtAccount:
    return DebtAccount(
        id="card_b",
        name="Card B",
        current_balance=Decimal("500"),
        interest_rate=Decimal("10"),
        minimum_payment=Decimal("25"),
    )


@pytest.fixture
def two_cards(card_a, card_b) -> list[DebtAccount]:
    return [card_a, card_b]


@pytest.fixture
def mortgage() -> DebtAccount:
    return DebtAccount(
        id="home",
        name="Home Loan",
        current_balance=Decimal("250000"),
        interest_rate=Decimal("6.5"),
        minimum_payment=Decimal("1800"),
        is_mortgage=True,
    )


@pytest.fixture
def store_records() -> list[AccountRecord]:
    """Account store contents: a mix of assets, debts and a closed card."""
    return [
        AccountRecord(
            id="chk",
            name="Checking",
            account_type=AccountType.CHECKING,
            current_balance=Decimal("2400"),
        ),
        AccountRecord(
            id="visa",
            name="Visa",
            account_type=AccountType.CREDIT,
            current_balance=Decimal("-1250.40"),
            interest_rate=Decimal("22.99"),
            minimum_payment=Decimal("40"),
        ),
        AccountRecord(
            id="auto",
            name="Auto Loan",
            account_type=AccountType.LOAN,
            current_balance=Decimal("8200"),
            interest_rate=None,
            minimum_payment=None,
        ),
        AccountRecord(
            id="home",
            name="Home Loan",
            account_type=AccountType.LOAN,
            current_balance=Decimal("250000"),
            interest_rate=Decimal("6.5"),
            minimum_payment=Decimal("1800"),
            is_mortgage=True,
        ),
        AccountRecord(
            id="old_card",
            name="Closed Card",
            account_type=AccountType.CREDIT,
            current_balance=Decimal("0"),
            is_active=False,
        ),
    ]
