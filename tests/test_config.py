"""Tests for environment-driven settings."""

import pytest

from checkout_engine.config import Settings, load_settings
from checkout_engine.errors import ValidationError


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        """Empty environment yields default settings."""
        assert load_settings({}) == Settings()

    def test_reads_environment(self) -> None:
        """Every CHECKOUT_ variable is honoured."""
        settings = load_settings({
            "CHECKOUT_LOG_LEVEL": "DEBUG",
            "CHECKOUT_LOG_FORMAT": "console",
            "CHECKOUT_CURRENCY_SYMBOL": "$",
            "CHECKOUT_WEEKLY_OFFER_PERCENT": "25",
        })
        assert settings.log_level == "debug"
        assert settings.log_format == "console"
        assert settings.currency_symbol == "$"
        assert settings.weekly_offer_percent == 25

    @pytest.mark.parametrize("env", [
        {"CHECKOUT_LOG_LEVEL": "loud"},
        {"CHECKOUT_LOG_FORMAT": "xml"},
        {"CHECKOUT_WEEKLY_OFFER_PERCENT": "ten"},
        {"CHECKOUT_WEEKLY_OFFER_PERCENT": "101"},
    ])
    def test_rejects_invalid_values(self, env) -> None:
        """Unknown or out-of-range values fail validation."""
        with pytest.raises(ValidationError):
            load_settings(env)
