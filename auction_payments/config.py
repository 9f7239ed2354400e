"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="AUCTION_PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "auction-payments"
    log_level: str = "INFO"

    # Late interest
    days_per_month: int = 30  # Fixed-length month used to count late periods

    # Schedule
    clamp_due_day: bool = False  # True: day 31 in a 30-day month lands on the 30th instead of rolling over

    # Record mapping
    default_down_payment_ratio: Decimal = Decimal("0.3")  # Used when a record has no down payment amount

    # Formatting
    currency_symbol: str = "R$"


settings = Settings()
