from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class Strategy(Enum):
    AVALANCHE = "avalanche"
    SNOWBALL = "snowball"
    CUSTOM = "custom"


@dataclass(frozen=True)
class DebtAccount:
    """One liability under consideration.

    Balances are non-negative magnitudes even though the account store may
    record liabilities as negative numbers.
    """

    id: str
    name: str
    current_balance: Decimal
    interest_rate: Decimal  # APR percent, e.g. Decimal("19.99")
    minimum_payment: Decimal  # Monthly
    is_mortgage: bool = False

    def __post_init__(self):
        if self.current_balance < 0:
            raise ValueError(f"Account {self.id}: current_balance must be >= 0")
        if self.interest_rate < 0:
            raise ValueError(f"Account {self.id}: interest_rate must be >= 0")
        if self.minimum_payment < 0:
            raise ValueError(f"Account {self.id}: minimum_payment must be >= 0")

    @property
    def is_paid_off(self) -> bool:
        return self.current_balance == 0


@dataclass(frozen=True)
class PlanRequest:
    extra_payment: Decimal = Decimal("0")
    account_ids: tuple[str, ...] | None = None
    include_mortgages: bool = False
    custom_order: tuple[str, ...] | None = None
    max_months: int = 360
    as_of: date | None = None  # Plan starts the month after this date

    def __post_init__(self):
        if self.extra_payment < 0:
            raise ValueError("extra_payment must be >= 0")
        if self.max_months < 1:
            raise ValueError("max_months must be >= 1")


@dataclass(frozen=True)
class BalanceSnapshot:
    """A stored historical balance for one account."""

    account_id: str
    date: date
    balance: Decimal


# ---- Results ----


@dataclass
class MonthPoint:
    month: str  # YYYY-MM
    balance: Decimal = Decimal("0")  # After payment
    principal: Decimal = Decimal("0")
    interest: Decimal = Decimal("0")
    payment: Decimal = Decimal("0")  # Minimum portion
    extra_payment: Decimal = Decimal("0")  # Pooled extra received this month


@dataclass
class AccountTimeline:
    account_id: str
    name: str
    schedule: list[MonthPoint] = field(default_factory=list)
    months_to_payoff: int = 0
    payoff_date: str | None = None
    total_interest_paid: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")


@dataclass
class AggregatePoint:
    month: str
    total_balance: Decimal = Decimal("0")
    total_payment: Decimal = Decimal("0")
    total_interest: Decimal = Decimal("0")
    total_principal: Decimal = Decimal("0")


@dataclass
class StrategyResult:
    strategy: Strategy
    debt_free_date: str | None = None
    months_to_debt_free: int | None = None
    total_interest_paid: Decimal = Decimal("0")
    total_paid: Decimal = Decimal("0")
    timelines: list[AccountTimeline] = field(default_factory=list)
    aggregate_schedule: list[AggregatePoint] = field(default_factory=list)


@dataclass
class BalancePoint:
    month: str
    balance: Decimal


@dataclass
class ActualVsPlanned:
    account_id: str
    name: str
    actual: list[BalancePoint] = field(default_factory=list)
    planned: list[BalancePoint] = field(default_factory=list)
    minimum_only: list[BalancePoint] = field(default_factory=list)


@dataclass
class PlanComparison:
    """Avalanche vs snowball, and both vs paying minimums only."""

    best_strategy: Strategy = Strategy.AVALANCHE
    interest_difference: Decimal = Decimal("0")  # Snowball minus avalanche
    minimum_only_interest: Decimal | None = Decimal("0")  # None: minimums alone never finish
    interest_saved: Decimal | None = Decimal("0")
    months_saved: int | None = None


@dataclass
class DebtPayoffResult:
    debt_accounts: list[DebtAccount] = field(default_factory=list)
    avalanche: StrategyResult = field(
        default_factory=lambda: StrategyResult(strategy=Strategy.AVALANCHE)
    )
    snowball: StrategyResult = field(
        default_factory=lambda: StrategyResult(strategy=Strategy.SNOWBALL)
    )
    custom: StrategyResult | None = None
    actual_vs_planned: list[ActualVsPlanned] = field(default_factory=list)
    comparison: PlanComparison = field(default_factory=PlanComparison)
