"""Debt payoff plan: every strategy over the same debts, side by side.

Orchestrates: working set → ordering per strategy → waterfall simulation →
comparison summary → actual-vs-planned reconciliation.
"""

import logging
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from debt_planner.engine.amortization import ZERO
from debt_planner.engine.errors import DebtNeverPaidOff
from debt_planner.engine.ordering import order_accounts, parse_strategy
from debt_planner.engine.reconcile import reconcile
from debt_planner.engine.waterfall import simulate
from debt_planner.models.debt import (
    BalanceSnapshot,
    DebtAccount,
    DebtPayoffResult,
    PlanComparison,
    PlanRequest,
    Strategy,
    StrategyResult,
)

logger = logging.getLogger(__name__)


def select_accounts(accounts: Iterable[DebtAccount], request: PlanRequest) -> list[DebtAccount]:
    """Working set for a request, in the order the accounts were supplied."""
    selected = [a for a in accounts if request.include_mortgages or not a.is_mortgage]
    if request.account_ids is not None:
        wanted = set(request.account_ids)
        selected = [a for a in selected if a.id in wanted]
    return selected


def run_strategy(
    accounts: Sequence[DebtAccount],
    strategy: Strategy | str,
    extra_payment: Decimal,
    max_months: int,
    start_month: date,
    custom_order: Iterable[str] | None = None,
) -> StrategyResult:
    """Order the accounts for one strategy and simulate it."""
    order = order_accounts(accounts, strategy, custom_order)
    sim = simulate(accounts, order, extra_payment, max_months, start_month)
    result = StrategyResult(
        strategy=parse_strategy(strategy),
        debt_free_date=sim.debt_free_date,
        months_to_debt_free=sim.months_to_debt_free,
        total_interest_paid=sim.total_interest_paid,
        total_paid=sim.total_paid,
        timelines=sim.timelines,
        aggregate_schedule=sim.aggregate_schedule,
    )
    logger.debug(
        "%s: debt free %s, interest %s",
        result.strategy.value,
        result.debt_free_date,
        result.total_interest_paid,
    )
    return result


def compare_strategies(
    avalanche: StrategyResult,
    snowball: StrategyResult,
    minimum_only: StrategyResult | None,
) -> PlanComparison:
    """Pick the cheaper strategy and measure it against paying minimums only.

    `minimum_only` is None when minimums alone never clear the debts; the
    baseline figures are then reported as None.
    """
    if snowball.total_interest_paid < avalanche.total_interest_paid:
        best = snowball
    else:
        best = avalanche

    comparison = PlanComparison(
        best_strategy=best.strategy,
        interest_difference=snowball.total_interest_paid - avalanche.total_interest_paid,
        minimum_only_interest=None,
        interest_saved=None,
    )
    if minimum_only is None:
        return comparison

    comparison.minimum_only_interest = minimum_only.total_interest_paid
    comparison.interest_saved = max(
        ZERO, minimum_only.total_interest_paid - best.total_interest_paid
    )
    if best.months_to_debt_free is not None and minimum_only.months_to_debt_free is not None:
        comparison.months_saved = minimum_only.months_to_debt_free - best.months_to_debt_free
    return comparison


def compute_debt_payoff_plan(
    accounts: Iterable[DebtAccount],
    request: PlanRequest,
    balance_history: Iterable[BalanceSnapshot] | None = None,
) -> DebtPayoffResult:
    """Primary entry point: debts + parameters → full payoff projection.

    Avalanche and snowball always run; custom runs only when the request
    carries a custom order. All runs share the same accounts, extra payment,
    horizon and start month so their totals are directly comparable.
    """
    debts = select_accounts(accounts, request)
    start = request.as_of or date.today()
    start_month = date(start.year, start.month, 1)

    if not debts:
        logger.info("Debt payoff plan requested with no eligible accounts")
        return DebtPayoffResult()

    def run(strategy: Strategy, extra: Decimal = request.extra_payment) -> StrategyResult:
        return run_strategy(
            debts, strategy, extra, request.max_months, start_month, request.custom_order
        )

    avalanche = run(Strategy.AVALANCHE)
    snowball = run(Strategy.SNOWBALL)
    custom = run(Strategy.CUSTOM) if request.custom_order is not None else None
    try:
        minimum_only = run(Strategy.AVALANCHE, ZERO)
    except DebtNeverPaidOff as e:
        logger.info("Minimum-only baseline never pays off: %s", e)
        minimum_only = None

    actual_vs_planned = reconcile(
        debts,
        balance_history or [],
        order_accounts(debts, Strategy.AVALANCHE),
        request.extra_payment,
        request.max_months,
    )

    comparison = compare_strategies(avalanche, snowball, minimum_only)
    logger.info(
        "Debt payoff plan: %d accounts, extra %s/mo, best %s saves %s interest",
        len(debts),
        request.extra_payment,
        comparison.best_strategy.value,
        comparison.interest_saved,
    )

    return DebtPayoffResult(
        debt_accounts=debts,
        avalanche=avalanche,
        snowball=snowball,
        custom=custom,
        actual_vs_planned=actual_vs_planned,
        comparison=comparison,
    )
