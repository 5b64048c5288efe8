"""Tests for error types."""

from checkout_engine.errors import (
    CheckoutError,
    InsufficientStockError,
    NotFoundError,
    StateError,
    ValidationError,
    errmsg,
)


class TestCheckoutError:
    """Tests for the CheckoutError base class."""

    def test_message(self) -> None:
        """Message is kept and used as the string form."""
        err = CheckoutError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_subclasses_share_base(self) -> None:
        """Every engine error is a CheckoutError."""
        for cls in (ValidationError, StateError, NotFoundError):
            assert issubclass(cls, CheckoutError)
        assert isinstance(InsufficientStockError("P001", 1, 2), CheckoutError)


class TestNotFoundError:
    """Tests for NotFoundError."""

    def test_key_appended_to_message(self) -> None:
        """Missing key is carried and shown."""
        err = NotFoundError(errmsg.PRODUCT_NOT_FOUND, "ZZZ")
        assert err.key == "ZZZ"
        assert str(err) == "Product not found: ZZZ"

    def test_without_key(self) -> None:
        """Key is optional."""
        err = NotFoundError(errmsg.CUSTOMER_NOT_FOUND)
        assert err.key is None
        assert str(err) == "Customer not found"


class TestInsufficientStockError:
    """Tests for InsufficientStockError."""

    def test_carries_quantities(self) -> None:
        """Available and requested quantities are exposed."""
        err = InsufficientStockError("P002", available=2, requested=5)
        assert err.code == "P002"
        assert err.available == 2
        assert err.requested == 5
        assert "available 2" in str(err)
        assert "requested 5" in str(err)
