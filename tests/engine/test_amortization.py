from datetime import date
from decimal import Decimal

from debt_planner.engine.amortization import (
    add_months,
    advance,
    month_label,
    monthly_interest,
    round2,
)


class TestMonthlyInterest:
    def test_card_at_24_percent(self):
        # 1000 * 24% / 12 = 20.00
        assert monthly_interest(Decimal("1000"), Decimal("24")) == Decimal("20.00")

    def test_rounds_half_up_to_cents(self):
        # 500 * 10% / 12 = 4.1666...
        assert monthly_interest(Decimal("500"), Decimal("10")) == Decimal("4.17")

    def test_zero_rate(self):
        assert monthly_interest(Decimal("500"), Decimal("0")) == Decimal("0.00")

    def test_round2_half_up(self):
        assert round2(Decimal("0.005")) == Decimal("0.01")
        assert round2(Decimal("2.344")) == Decimal("2.34")


class TestAdvance:
    def test_regular_payment(self):
        step = advance(Decimal("1000"), Decimal("24"), Decimal("150"))
        assert step.interest == Decimal("20.00")
        assert step.principal == Decimal("130.00")
        assert step.new_balance == Decimal("870.00")
        assert step.payment_used == Decimal("150.00")

    def test_payment_retires_debt(self):
        step = advance(Decimal("100"), Decimal("12"), Decimal("500"))
        # Only balance + interest is used; the rest stays with the caller
        assert step.interest == Decimal("1.00")
        assert step.principal == Decimal("100.00")
        assert step.new_balance == Decimal("0")
        assert step.payment_used == Decimal("101.00")

    def test_exact_payoff_amount(self):
        step = advance(Decimal("100"), Decimal("12"), Decimal("101.00"))
        assert step.new_balance == Decimal("0")
        assert step.payment_used == Decimal("101.00")

    def test_negative_amortization(self):
        step = advance(Decimal("1000"), Decimal("24"), Decimal("10"))
        assert step.principal == Decimal("0")
        assert step.new_balance == Decimal("1010.00")
        assert step.payment_used == Decimal("10.00")

    def test_payment_conserved(self):
        step = advance(Decimal("2345.67"), Decimal("19.99"), Decimal("75"))
        assert step.principal + step.interest == step.payment_used

    def test_deterministic(self):
        first = advance(Decimal("2345.67"), Decimal("19.99"), Decimal("75"))
        second = advance(Decimal("2345.67"), Decimal("19.99"), Decimal("75"))
        assert repr(first) == repr(second)


class TestMonthHelpers:
    def test_add_months_rolls_year(self):
        assert add_months(date(2026, 11, 15), 3) == date(2027, 2, 1)

    def test_add_months_zero(self):
        assert add_months(date(2026, 1, 31), 0) == date(2026, 1, 1)

    def test_month_label(self):
        assert month_label(date(2026, 2, 1)) == "2026-02"
        assert month_label(date(2031, 12, 9)) == "2031-12"
