"""Repayment priority ordering for each payoff strategy."""

from collections.abc import Iterable, Sequence

from debt_planner.engine.errors import InvalidCustomOrder, InvalidStrategy
from debt_planner.models.debt import DebtAccount, Strategy


def parse_strategy(strategy: Strategy | str) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(strategy)
    except ValueError:
        raise InvalidStrategy(strategy) from None


def _avalanche_key(account: DebtAccount):
    return (-account.interest_rate, -account.current_balance, account.id)


def _snowball_key(account: DebtAccount):
    return (account.current_balance, -account.interest_rate, account.id)


def _custom_order(
    accounts: Sequence[DebtAccount], custom_order: Iterable[str] | None
) -> list[str]:
    if custom_order is None:
        raise InvalidCustomOrder("Custom strategy requires a custom_order")

    known = {a.id for a in accounts}
    requested = list(dict.fromkeys(custom_order))  # Drop repeats, keep first
    unknown = [account_id for account_id in requested if account_id not in known]
    if unknown:
        raise InvalidCustomOrder(
            f"custom_order references unknown accounts: {', '.join(unknown)}",
            unknown_ids=unknown,
        )

    # Accounts the caller left out still get simulated, after the listed ones
    missing = sorted(known.difference(requested))
    return requested + missing


def order_accounts(
    accounts: Sequence[DebtAccount],
    strategy: Strategy | str,
    custom_order: Iterable[str] | None = None,
) -> list[str]:
    """Return account ids in repayment priority order.

    Avalanche: highest APR first (ties: larger balance, then id).
    Snowball: smallest balance first (ties: higher APR, then id).
    Custom: caller's order, with any unlisted accounts appended by id.
    """
    strategy = parse_strategy(strategy)

    if strategy is Strategy.AVALANCHE:
        return [a.id for a in sorted(accounts, key=_avalanche_key)]
    if strategy is Strategy.SNOWBALL:
        return [a.id for a in sorted(accounts, key=_snowball_key)]
    return _custom_order(accounts, custom_order)
