from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DEBT_PLANNER_",
    }

    # Payoff horizon (months). Requests outside the allowed set fall back to the default.
    default_max_months: int = 360
    allowed_max_months: list[int] = [120, 240, 360]

    # Extra monthly payment accepted from callers is clamped to [0, max]
    max_extra_payment: Decimal = Decimal("50000")

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
