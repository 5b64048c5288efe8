"""Tests for loyalty point redemption and accrual."""

import pytest

from checkout_engine.errors import ValidationError
from checkout_engine.loyalty import LoyaltyAccount


class TestRedeem:
    """Tests for redeem."""

    def test_redeem_whole_units(self) -> None:
        """Only whole units of 100 points are redeemable."""
        account = LoyaltyAccount("12345", balance=250)
        assert account.max_discount_cents() == 200

        discount = account.redeem(5000)

        assert discount == 200
        assert account.balance == 50

    def test_redeem_capped_by_cart_amount(self) -> None:
        """Discount stops at the cart amount."""
        account = LoyaltyAccount("12345", balance=1000)
        discount = account.redeem(350)

        assert discount == 350
        assert account.balance == 650

    def test_redeem_below_one_unit_is_zero(self) -> None:
        """Under 100 points buys nothing."""
        account = LoyaltyAccount("12345", balance=99)
        assert account.redeem(5000) == 0
        assert account.balance == 99

    def test_rejects_negative_amount(self) -> None:
        """Negative cart amount fails without deducting."""
        account = LoyaltyAccount("12345", balance=500)
        with pytest.raises(ValidationError):
            account.redeem(-1)
        assert account.balance == 500


class TestAccrue:
    """Tests for accrue."""

    def test_one_point_per_whole_unit(self) -> None:
        """Accrual truncates to whole currency units."""
        account = LoyaltyAccount("12345", balance=50)
        assert account.accrue(4899) == 48
        assert account.balance == 98

    def test_rejects_negative_amount(self) -> None:
        """Negative amounts cannot accrue."""
        account = LoyaltyAccount("12345")
        with pytest.raises(ValidationError):
            account.accrue(-100)

    def test_negative_opening_balance(self) -> None:
        """An account cannot open below zero."""
        with pytest.raises(ValidationError):
            LoyaltyAccount("12345", balance=-1)
