"""Runtime settings read from the environment.

Environment variables:
    CHECKOUT_LOG_LEVEL: "debug", "info" (default), "warning", "error"
    CHECKOUT_LOG_FORMAT: "json" (default) or "console"
    CHECKOUT_CURRENCY_SYMBOL: Symbol printed on receipts and reports (default "€")
    CHECKOUT_WEEKLY_OFFER_PERCENT: Weekly offer reduction, 0-100 (default 10)
"""

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ValidationError

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
LOG_FORMATS = ("json", "console")


@dataclass(frozen=True)
class Settings:
    log_level: str = "info"
    log_format: str = "json"
    currency_symbol: str = "€"
    weekly_offer_percent: int = 10


def load_settings(environ: Mapping[str, str] = os.environ) -> Settings:
    """Build Settings from environment variables, falling back to defaults."""
    log_level = environ.get("CHECKOUT_LOG_LEVEL", "info").lower()
    if log_level not in LOG_LEVELS:
        raise ValidationError(f"Invalid CHECKOUT_LOG_LEVEL: {log_level}")

    log_format = environ.get("CHECKOUT_LOG_FORMAT", "json").lower()
    if log_format not in LOG_FORMATS:
        raise ValidationError(f"Invalid CHECKOUT_LOG_FORMAT: {log_format}")

    raw_percent = environ.get("CHECKOUT_WEEKLY_OFFER_PERCENT", "10")
    try:
        offer_percent = int(raw_percent)
    except ValueError as e:
        raise ValidationError(f"Invalid CHECKOUT_WEEKLY_OFFER_PERCENT: {raw_percent}") from e
    if offer_percent < 0 or offer_percent > 100:
        raise ValidationError("Weekly offer percent must be 0-100")

    return Settings(
        log_level=log_level,
        log_format=log_format,
        currency_symbol=environ.get("CHECKOUT_CURRENCY_SYMBOL", "€"),
        weekly_offer_percent=offer_percent,
    )
