from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class AccountType(Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    CREDIT = "credit"
    INVESTMENT = "investment"
    LOAN = "loan"
    OTHER = "other"

    @property
    def is_debt(self) -> bool:
        return self in (AccountType.CREDIT, AccountType.LOAN)


@dataclass(frozen=True)
class AccountRecord:
    """An account as supplied by the account store."""

    id: str
    name: str
    account_type: AccountType
    current_balance: Decimal  # Liabilities may be stored negative
    interest_rate: Decimal | None = None  # APR percent
    minimum_payment: Decimal | None = None
    is_mortgage: bool = False
    is_active: bool = True

    @property
    def is_debt(self) -> bool:
        return self.account_type.is_debt
