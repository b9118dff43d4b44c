"""Multi-account payoff simulation with a rolling extra-payment pool.

Every month each open account receives its minimum payment. A single pool of
extra money (the caller's extra payment plus the minimums of accounts retired
in earlier months) is then spent down the priority order, cascading to the
next account whenever the current target is closed out. Strategies differ only
in the order they hand to `simulate`.

Pure functions: Decimal in, dataclass out. No I/O.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from debt_planner.engine.amortization import (
    ZERO,
    add_months,
    advance,
    month_label,
    monthly_interest,
    round2,
)
from debt_planner.engine.errors import DebtNeverPaidOff
from debt_planner.models.debt import (
    AccountTimeline,
    AggregatePoint,
    DebtAccount,
    MonthPoint,
)

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    timelines: list[AccountTimeline] = field(default_factory=list)
    aggregate_schedule: list[AggregatePoint] = field(default_factory=list)
    debt_free_date: str | None = None
    months_to_debt_free: int | None = None
    total_interest_paid: Decimal = ZERO
    total_paid: Decimal = ZERO


def _check_minimums_cover_interest(accounts: Sequence[DebtAccount]) -> None:
    for account in accounts:
        interest = monthly_interest(account.current_balance, account.interest_rate)
        if round2(account.minimum_payment) < interest:
            raise DebtNeverPaidOff(account.id, account.name)


def _pay_account(
    account: DebtAccount, balance: Decimal, pool: Decimal, label: str
) -> tuple[MonthPoint, Decimal]:
    """Pay one account its minimum plus whatever the pool can give it.

    Returns the month's point and the pool left for accounts further down.
    """
    owed = round2(balance + monthly_interest(balance, account.interest_rate))
    minimum = min(round2(account.minimum_payment), owed)
    extra = min(pool, owed - minimum)

    step = advance(balance, account.interest_rate, minimum + extra)
    point = MonthPoint(
        month=label,
        balance=step.new_balance,
        principal=step.principal,
        interest=step.interest,
        payment=minimum,
        extra_payment=extra,
    )
    return point, pool - extra


def _first_stalled(
    order: Sequence[str], opening: dict[str, Decimal], closing: dict[str, Decimal]
) -> str:
    # A month without net progress means at least one open balance did not fall
    return next(
        account_id
        for account_id in order
        if account_id in opening and closing[account_id] >= opening[account_id]
    )


def simulate(
    accounts: Sequence[DebtAccount],
    order: Sequence[str],
    extra_payment: Decimal,
    max_months: int,
    start_month: date,
) -> SimulationResult:
    """Run the waterfall for one priority order.

    Args:
        accounts: Working set. Zero-balance accounts get an empty timeline.
        order: Every account id in the working set, highest priority first.
        extra_payment: Monthly money on top of all minimums.
        max_months: Horizon cap. Accounts open at the cap have no payoff date.
        start_month: Month the plan is made in; the first payment month
            is the one after it.

    Raises:
        DebtNeverPaidOff: an account's minimum payment does not cover its
            interest, or a month passes without the total balance going down.
    """
    if max_months < 1:
        raise ValueError("max_months must be >= 1")
    if extra_payment < 0:
        raise ValueError("extra_payment must be >= 0")

    by_id = {a.id: a for a in accounts}
    order = list(dict.fromkeys(order))
    if set(order) != set(by_id):
        raise ValueError("order must list every account in the working set exactly once")

    timelines = {
        account_id: AccountTimeline(account_id=account_id, name=by_id[account_id].name)
        for account_id in order
    }
    balances = {
        account_id: by_id[account_id].current_balance
        for account_id in order
        if by_id[account_id].current_balance > 0
    }
    _check_minimums_cover_interest([by_id[account_id] for account_id in balances])

    extra_payment = round2(extra_payment)
    rolled_minimums = ZERO
    aggregate: list[AggregatePoint] = []

    while balances and len(aggregate) < max_months:
        label = month_label(add_months(start_month, len(aggregate) + 1))
        pool = extra_payment + rolled_minimums
        closing: dict[str, Decimal] = {}
        totals = AggregatePoint(month=label)

        for account_id in order:
            if account_id not in balances:
                continue
            point, pool = _pay_account(by_id[account_id], balances[account_id], pool, label)
            timelines[account_id].schedule.append(point)
            closing[account_id] = point.balance

            totals.total_balance += point.balance
            totals.total_payment += point.payment + point.extra_payment
            totals.total_interest += point.interest
            totals.total_principal += point.principal

        if sum(closing.values()) >= sum(balances.values()):
            stalled = _first_stalled(order, balances, closing)
            raise DebtNeverPaidOff(stalled, by_id[stalled].name)

        aggregate.append(totals)
        for account_id, balance in closing.items():
            if balance == 0:
                # Freed minimum joins the pool from next month on
                rolled_minimums += round2(by_id[account_id].minimum_payment)
                del balances[account_id]
                logger.debug("Account %s paid off in %s", account_id, label)
            else:
                balances[account_id] = balance

    result = SimulationResult(aggregate_schedule=aggregate)
    for account_id in order:
        timeline = timelines[account_id]
        schedule = timeline.schedule
        timeline.total_interest_paid = sum((p.interest for p in schedule), ZERO)
        timeline.total_paid = sum((p.payment + p.extra_payment for p in schedule), ZERO)
        if account_id in balances:
            timeline.months_to_payoff = max_months
            timeline.payoff_date = None
        elif schedule:
            timeline.months_to_payoff = len(schedule)
            timeline.payoff_date = schedule[-1].month

        result.timelines.append(timeline)
        result.total_interest_paid += timeline.total_interest_paid
        result.total_paid += timeline.total_paid

    if not balances and aggregate:
        result.debt_free_date = aggregate[-1].month
        result.months_to_debt_free = len(aggregate)

    logger.debug(
        "Simulated %d accounts over %d months (debt free: %s)",
        len(order),
        len(aggregate),
        result.debt_free_date,
    )
    return result
