"""Errors raised by the payoff engine. The HTTP layer maps these to 4xx."""


class PayoffPlanError(ValueError):
    pass


class InvalidStrategy(PayoffPlanError):
    def __init__(self, strategy):
        self.strategy = strategy
        super().__init__(f"Unknown payoff strategy: {strategy!r}")


class InvalidCustomOrder(PayoffPlanError):
    def __init__(self, message: str, unknown_ids: list[str] | None = None):
        self.unknown_ids = unknown_ids or []
        super().__init__(message)


class DebtNeverPaidOff(PayoffPlanError):
    """Minimum payment cannot outpace the interest accruing on an account."""

    def __init__(self, account_id: str, name: str | None = None):
        self.account_id = account_id
        self.name = name
        label = f"{name} ({account_id})" if name else account_id
        super().__init__(
            f"Account {label}: minimum payment is too low to ever pay off this balance"
        )
