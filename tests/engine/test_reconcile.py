from datetime import date
from decimal import Decimal

import pytest

from debt_planner.engine.reconcile import actual_series, reconcile
from debt_planner.models.debt import BalanceSnapshot, DebtAccount


@pytest.fixture
def visa() -> DebtAccount:
    return DebtAccount(
        id="visa",
        name="Visa",
        current_balance=Decimal("900"),
        interest_rate=Decimal("12"),
        minimum_payment=Decimal("100"),
    )


@pytest.fixture
def visa_history() -> list[BalanceSnapshot]:
    """Two years of statements, out of order, two in the latest month."""
    return [
        BalanceSnapshot("visa", date(2024, 12, 20), Decimal("950")),
        BalanceSnapshot("visa", date(2023, 1, 15), Decimal("-1500")),
        BalanceSnapshot("visa", date(2024, 12, 1), Decimal("1000")),
        BalanceSnapshot("visa", date(2023, 6, 10), Decimal("1200")),
    ]


class TestActualSeries:
    def test_chronological_latest_per_month(self, visa_history):
        series = actual_series(visa_history)
        assert [p.month for p in series] == ["2023-01", "2023-06", "2024-12"]
        assert [p.balance for p in series] == [Decimal("1500"), Decimal("1200"), Decimal("950")]

    def test_empty(self):
        assert actual_series([]) == []


class TestReconcile:
    def test_series_share_first_month(self, visa, visa_history):
        [row] = reconcile([visa], visa_history, ["visa"], Decimal("50"), 360)
        assert row.actual[0].month == "2023-01"
        assert row.planned[0].month == "2023-01"
        assert row.minimum_only[0].month == "2023-01"

    def test_projection_anchored_at_current_balance(self, visa, visa_history):
        [row] = reconcile([visa], visa_history, ["visa"], Decimal("50"), 360)
        anchor = next(p for p in row.planned if p.month == "2024-12")
        # Current balance, not the 950 statement
        assert anchor.balance == Decimal("900")
        assert [p.month for p in row.planned[:2]] == ["2023-01", "2023-06"]

    def test_planned_uses_extra_payment(self, visa, visa_history):
        [row] = reconcile([visa], visa_history, ["visa"], Decimal("50"), 360)
        planned = {p.month: p.balance for p in row.planned}
        minimum = {p.month: p.balance for p in row.minimum_only}
        # 900 + 9.00 interest - 150 / - 100
        assert planned["2025-01"] == Decimal("759.00")
        assert minimum["2025-01"] == Decimal("809.00")

    def test_both_projections_reach_zero(self, visa, visa_history):
        [row] = reconcile([visa], visa_history, ["visa"], Decimal("50"), 360)
        assert row.planned[-1].balance == Decimal("0")
        assert row.minimum_only[-1].balance == Decimal("0")
        assert len(row.planned) < len(row.minimum_only)

    def test_accounts_without_history_omitted(self, visa, visa_history, card_a):
        rows = reconcile([card_a, visa], visa_history, ["card_a", "visa"], Decimal("0"), 360)
        assert [r.account_id for r in rows] == ["visa"]

    def test_history_for_unknown_accounts_ignored(self, visa):
        history = [BalanceSnapshot("elsewhere", date(2025, 3, 1), Decimal("10"))]
        assert reconcile([visa], history, ["visa"], Decimal("0"), 360) == []

    def test_follows_given_order(self, card_a, card_b):
        history = [
            BalanceSnapshot("card_a", date(2025, 12, 1), Decimal("1000")),
            BalanceSnapshot("card_b", date(2025, 12, 1), Decimal("500")),
        ]
        rows = reconcile([card_b, card_a], history, ["card_a", "card_b"], Decimal("0"), 360)
        assert [r.account_id for r in rows] == ["card_a", "card_b"]

    def test_single_snapshot(self, card_b):
        history = [BalanceSnapshot("card_b", date(2025, 12, 5), Decimal("510"))]
        [row] = reconcile([card_b], history, ["card_b"], Decimal("0"), 360)
        assert row.actual[0].month == "2025-12"
        assert row.planned[0].month == "2025-12"
        assert row.planned[0].balance == Decimal("500")
        assert row.planned[1].month == "2026-01"
