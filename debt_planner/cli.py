"""CLI for comparing debt payoff strategies from a saved account snapshot.

Usage:
    python -m debt_planner.cli snapshot.json --extra 200
    python -m debt_planner.cli snapshot.json --extra 200 --order acct_b,acct_a
    python -m debt_planner.cli snapshot.json --include-mortgages --max-months 240

The snapshot file holds {"accounts": [...], "balanceHistory": [...]} in the
same shape the HTTP API accepts.
"""

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

from pydantic import Field

from debt_planner.api.schemas import AccountRecordIn, BalanceSnapshotIn, CamelModel
from debt_planner.config import settings
from debt_planner.engine.accounts import list_debt_accounts
from debt_planner.engine.errors import PayoffPlanError
from debt_planner.engine.planner import compute_debt_payoff_plan
from debt_planner.models.debt import DebtPayoffResult, PlanRequest, StrategyResult


class Snapshot(CamelModel):
    accounts: list[AccountRecordIn]
    balance_history: list[BalanceSnapshotIn] = Field(default_factory=list)


def print_strategy(result: StrategyResult) -> None:
    debt_free = result.debt_free_date or "not within horizon"
    print(f"  [{result.strategy.value.upper():>9}]  debt free: {debt_free:<18}"
          f" interest: ${result.total_interest_paid:>12,.2f}  paid: ${result.total_paid:>12,.2f}")
    for t in result.timelines:
        payoff = t.payoff_date or "N/A"
        print(f"             {t.name:<24} {payoff:>8}  ({t.months_to_payoff} mo)")


def print_plan(plan: DebtPayoffResult, extra: Decimal) -> None:
    print(f"\n{'=' * 60}")
    print(f"  Debt Payoff Plan  (extra ${extra:,.2f}/mo)")
    print(f"{'=' * 60}")
    for a in plan.debt_accounts:
        print(f"  {a.name:<24} ${a.current_balance:>11,.2f}  {a.interest_rate:>6}%"
              f"  min ${a.minimum_payment:,.2f}")
    print()

    for result in (plan.avalanche, plan.snowball, plan.custom):
        if result is not None:
            print_strategy(result)
    print()

    c = plan.comparison
    print(f"  Recommended:       {c.best_strategy.value}")
    if c.interest_saved is None:
        print("  Minimum payments alone never pay these debts off")
    else:
        print(f"  Interest saved:    ${c.interest_saved:,.2f} vs minimum payments only")
    if c.months_saved is not None:
        print(f"  Months saved:      {c.months_saved}")
    print()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Debt payoff strategy comparison")
    parser.add_argument("snapshot", type=Path, help="JSON file with accounts and balance history")
    parser.add_argument("--extra", type=Decimal, default=Decimal("0"), help="Extra monthly payment (default: 0)")
    parser.add_argument("--include-mortgages", action="store_true", help="Include mortgage accounts")
    parser.add_argument("--max-months", type=int, default=settings.default_max_months, help="Projection horizon in months")
    parser.add_argument("--as-of", type=date.fromisoformat, default=None, help="Plan month as YYYY-MM-DD (default: today)")
    parser.add_argument("--order", default=None, help="Comma-separated account ids for a custom priority order")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    if args.extra < 0:
        parser.error("--extra must be >= 0")
    if args.max_months < 1:
        parser.error("--max-months must be >= 1")
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level)

    try:
        snapshot = Snapshot.model_validate_json(args.snapshot.read_text())
        accounts = list_debt_accounts(
            [a.to_record() for a in snapshot.accounts], include_mortgages=True
        )
        request = PlanRequest(
            extra_payment=args.extra,
            include_mortgages=args.include_mortgages,
            custom_order=tuple(filter(None, args.order.split(","))) if args.order else None,
            max_months=args.max_months,
            as_of=args.as_of,
        )
        plan = compute_debt_payoff_plan(
            accounts, request, [s.to_snapshot() for s in snapshot.balance_history]
        )
    except PayoffPlanError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        # pydantic validation and bad account data
        print(f"error: could not load snapshot: {e}", file=sys.stderr)
        return 1

    print_plan(plan, request.extra_payment)
    return 0


if __name__ == "__main__":
    sys.exit(main())
