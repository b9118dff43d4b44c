"""Actual balance history vs simulated payoff trajectories, per account."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from debt_planner.engine.amortization import ZERO, month_label
from debt_planner.engine.errors import DebtNeverPaidOff
from debt_planner.engine.waterfall import simulate
from debt_planner.models.debt import (
    ActualVsPlanned,
    BalancePoint,
    BalanceSnapshot,
    DebtAccount,
)

logger = logging.getLogger(__name__)


def actual_series(snapshots: Iterable[BalanceSnapshot]) -> list[BalancePoint]:
    """Chronological month points; the latest snapshot in a month wins."""
    by_month: dict[str, BalanceSnapshot] = {}
    for snap in sorted(snapshots, key=lambda s: s.date):
        by_month[month_label(snap.date)] = snap
    return [
        BalancePoint(month=month, balance=abs(snap.balance))
        for month, snap in sorted(by_month.items())
    ]


def _projected_series(
    account: DebtAccount,
    history: list[BalancePoint],
    anchor: date,
    extra_payment: Decimal,
    max_months: int,
) -> list[BalancePoint]:
    anchor_label = month_label(anchor)
    series = [p for p in history if p.month < anchor_label]
    series.append(BalancePoint(month=anchor_label, balance=account.current_balance))

    try:
        sim = simulate([account], [account.id], extra_payment, max_months, anchor)
    except DebtNeverPaidOff:
        # On its own this account stalls at this payment; show no projection
        logger.debug("No projection for %s at extra %s", account.id, extra_payment)
        return series

    for timeline in sim.timelines:
        series.extend(BalancePoint(month=p.month, balance=p.balance) for p in timeline.schedule)
    return series


def reconcile(
    accounts: Sequence[DebtAccount],
    balance_history: Iterable[BalanceSnapshot],
    order: Sequence[str],
    extra_payment: Decimal,
    max_months: int,
) -> list[ActualVsPlanned]:
    """Build actual / planned / minimum-only series for accounts with history.

    Projections start from the account's current balance in the month of its
    most recent snapshot. Months of history before that are carried into the
    projected series so all three start on the same month.
    """
    by_account: dict[str, list[BalanceSnapshot]] = defaultdict(list)
    for snap in balance_history:
        by_account[snap.account_id].append(snap)

    by_id = {a.id: a for a in accounts}
    results: list[ActualVsPlanned] = []

    for account_id in order:
        account = by_id.get(account_id)
        snapshots = by_account.get(account_id)
        if account is None or not snapshots:
            continue

        actual = actual_series(snapshots)
        latest = max(s.date for s in snapshots)
        anchor = date(latest.year, latest.month, 1)

        results.append(
            ActualVsPlanned(
                account_id=account.id,
                name=account.name,
                actual=actual,
                planned=_projected_series(account, actual, anchor, extra_payment, max_months),
                minimum_only=_projected_series(account, actual, anchor, ZERO, max_months),
            )
        )

    logger.debug("Reconciled %d of %d accounts against history", len(results), len(by_id))
    return results
