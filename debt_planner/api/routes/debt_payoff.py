"""Debt payoff routes: account listing and strategy projections."""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException

from debt_planner.api.deps import get_settings
from debt_planner.api.schemas import (
    AccountTimelineResponse,
    ActualVsPlannedResponse,
    AggregatePointResponse,
    BalancePointResponse,
    DebtAccountResponse,
    DebtAccountsRequest,
    DebtAccountsResponse,
    DebtPayoffRequest,
    DebtPayoffResponse,
    MonthPointResponse,
    PlanComparisonResponse,
    StrategyResultResponse,
)
from debt_planner.config import Settings
from debt_planner.engine.accounts import list_debt_accounts
from debt_planner.engine.errors import DebtNeverPaidOff, PayoffPlanError
from debt_planner.engine.planner import compute_debt_payoff_plan
from debt_planner.models.debt import (
    DebtAccount,
    DebtPayoffResult,
    PlanRequest,
    StrategyResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/debt-payoff", tags=["debt-payoff"])


def _build_request(req: DebtPayoffRequest, settings: Settings) -> PlanRequest:
    """Clamp caller parameters into the ranges the planner accepts."""
    extra = min(max(req.extra_payment, Decimal("0")), settings.max_extra_payment)
    max_months = req.max_months
    if max_months not in settings.allowed_max_months:
        max_months = settings.default_max_months

    return PlanRequest(
        extra_payment=extra,
        account_ids=tuple(req.account_ids) if req.account_ids else None,
        include_mortgages=req.include_mortgages,
        custom_order=tuple(req.custom_order) if req.custom_order else None,
        max_months=max_months,
        as_of=req.as_of,
    )


def _account_response(a: DebtAccount) -> DebtAccountResponse:
    return DebtAccountResponse(
        account_id=a.id,
        name=a.name,
        current_balance=a.current_balance,
        interest_rate=a.interest_rate,
        minimum_payment=a.minimum_payment,
        is_mortgage=a.is_mortgage,
    )


def _strategy_response(s: StrategyResult) -> StrategyResultResponse:
    timelines = [
        AccountTimelineResponse(
            account_id=t.account_id,
            name=t.name,
            schedule=[
                MonthPointResponse(
                    month=p.month,
                    balance=p.balance,
                    principal=p.principal,
                    interest=p.interest,
                    payment=p.payment,
                    extra_payment=p.extra_payment,
                )
                for p in t.schedule
            ],
            months_to_payoff=t.months_to_payoff,
            payoff_date=t.payoff_date,
            total_interest_paid=t.total_interest_paid,
            total_paid=t.total_paid,
        )
        for t in s.timelines
    ]
    aggregate = [
        AggregatePointResponse(
            month=p.month,
            total_balance=p.total_balance,
            total_payment=p.total_payment,
            total_interest=p.total_interest,
            total_principal=p.total_principal,
        )
        for p in s.aggregate_schedule
    ]
    return StrategyResultResponse(
        strategy=s.strategy.value,
        debt_free_date=s.debt_free_date,
        months_to_debt_free=s.months_to_debt_free,
        total_interest_paid=s.total_interest_paid,
        total_paid=s.total_paid,
        timelines=timelines,
        aggregate_schedule=aggregate,
    )


def _series(points) -> list[BalancePointResponse]:
    return [BalancePointResponse(month=p.month, balance=p.balance) for p in points]


def _result_to_response(result: DebtPayoffResult) -> DebtPayoffResponse:
    """Convert engine DebtPayoffResult to API response."""
    c = result.comparison
    return DebtPayoffResponse(
        debt_accounts=[_account_response(a) for a in result.debt_accounts],
        avalanche=_strategy_response(result.avalanche),
        snowball=_strategy_response(result.snowball),
        custom=_strategy_response(result.custom) if result.custom else None,
        actual_vs_planned=[
            ActualVsPlannedResponse(
                account_id=r.account_id,
                name=r.name,
                actual=_series(r.actual),
                planned=_series(r.planned),
                minimum_only=_series(r.minimum_only),
            )
            for r in result.actual_vs_planned
        ],
        comparison=PlanComparisonResponse(
            best_strategy=c.best_strategy.value,
            interest_difference=c.interest_difference,
            minimum_only_interest=c.minimum_only_interest,
            interest_saved=c.interest_saved,
            months_saved=c.months_saved,
        ),
    )


@router.post("/accounts", response_model=DebtAccountsResponse)
async def debt_accounts(req: DebtAccountsRequest):
    """Project account-store records into the planner's debt account shape."""
    try:
        records = [a.to_record() for a in req.accounts]
        accounts = list_debt_accounts(records, include_mortgages=req.include_mortgages)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DebtAccountsResponse(accounts=[_account_response(a) for a in accounts])


@router.post("", response_model=DebtPayoffResponse)
async def debt_payoff(
    req: DebtPayoffRequest,
    settings: Settings = Depends(get_settings),
):
    """Primary endpoint: debts + extra payment → avalanche / snowball / custom plans."""
    history = [s.to_snapshot() for s in req.balance_history]

    try:
        records = [a.to_record() for a in req.accounts]
        # Mortgage filtering is the planner's job, so project every debt account
        accounts = list_debt_accounts(records, include_mortgages=True)
        plan_request = _build_request(req, settings)
        result = compute_debt_payoff_plan(accounts, plan_request, history)
    except DebtNeverPaidOff as e:
        logger.warning("Debt payoff plan rejected: %s", e)
        raise HTTPException(
            status_code=422,
            detail={"message": str(e), "accountId": e.account_id},
        )
    except PayoffPlanError as e:
        logger.warning("Debt payoff plan rejected: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return _result_to_response(result)
