"""Pydantic schemas for API request/response models.

JSON keys are camelCase to match the web client; Python attributes stay snake_case.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from debt_planner.models.account import AccountRecord, AccountType
from debt_planner.models.debt import BalanceSnapshot


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class AccountRecordIn(CamelModel):
    id: str
    name: str
    type: str = Field(..., description="checking | savings | credit | investment | loan | other")
    current_balance: Decimal
    interest_rate: Decimal | None = Field(None, description="APR percent, e.g. 19.99")
    minimum_payment: Decimal | None = None
    is_mortgage: bool = False
    is_active: bool = True

    def to_record(self) -> AccountRecord:
        try:
            account_type = AccountType(self.type.lower())
        except ValueError:
            raise ValueError(f"Unknown account type: {self.type}") from None
        return AccountRecord(
            id=self.id,
            name=self.name,
            account_type=account_type,
            current_balance=self.current_balance,
            interest_rate=self.interest_rate,
            minimum_payment=self.minimum_payment,
            is_mortgage=self.is_mortgage,
            is_active=self.is_active,
        )


class BalanceSnapshotIn(CamelModel):
    account_id: str
    date: date
    balance: Decimal

    def to_snapshot(self) -> BalanceSnapshot:
        return BalanceSnapshot(account_id=self.account_id, date=self.date, balance=self.balance)


class DebtAccountsRequest(CamelModel):
    accounts: list[AccountRecordIn]
    include_mortgages: bool = False


class DebtPayoffRequest(CamelModel):
    accounts: list[AccountRecordIn]
    balance_history: list[BalanceSnapshotIn] = Field(default_factory=list)
    extra_payment: Decimal = Decimal("0")
    include_mortgages: bool = False
    account_ids: list[str] | None = None
    custom_order: list[str] | None = None
    max_months: int | None = None
    as_of: date | None = Field(None, description="Plan month; defaults to today")


# ---- Response schemas ----

class DebtAccountResponse(CamelModel):
    account_id: str
    name: str
    current_balance: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    is_mortgage: bool


class DebtAccountsResponse(CamelModel):
    accounts: list[DebtAccountResponse]


class MonthPointResponse(CamelModel):
    month: str
    balance: Decimal
    principal: Decimal
    interest: Decimal
    payment: Decimal
    extra_payment: Decimal


class AccountTimelineResponse(CamelModel):
    account_id: str
    name: str
    schedule: list[MonthPointResponse]
    months_to_payoff: int
    payoff_date: str | None
    total_interest_paid: Decimal
    total_paid: Decimal


class AggregatePointResponse(CamelModel):
    month: str
    total_balance: Decimal
    total_payment: Decimal
    total_interest: Decimal
    total_principal: Decimal


class StrategyResultResponse(CamelModel):
    strategy: str
    debt_free_date: str | None
    months_to_debt_free: int | None
    total_interest_paid: Decimal
    total_paid: Decimal
    timelines: list[AccountTimelineResponse]
    aggregate_schedule: list[AggregatePointResponse]


class BalancePointResponse(CamelModel):
    month: str
    balance: Decimal


class ActualVsPlannedResponse(CamelModel):
    account_id: str
    name: str
    actual: list[BalancePointResponse]
    planned: list[BalancePointResponse]
    minimum_only: list[BalancePointResponse]


class PlanComparisonResponse(CamelModel):
    best_strategy: str
    interest_difference: Decimal
    minimum_only_interest: Decimal | None
    interest_saved: Decimal | None
    months_saved: int | None


class DebtPayoffResponse(CamelModel):
    debt_accounts: list[DebtAccountResponse]
    avalanche: StrategyResultResponse
    snowball: StrategyResultResponse
    custom: StrategyResultResponse | None
    actual_vs_planned: list[ActualVsPlannedResponse]
    comparison: PlanComparisonResponse
