"""Error types for the checkout engine.

Every error is recoverable: the operation that raised it left the session,
ledger and loyalty balances exactly as they were.
"""

from typing import Optional


class errmsg:
    """Error message constants."""

    SESSION_ALREADY_OPEN = "A transaction is already in progress"
    SESSION_NOT_OPEN = "No transaction in progress"
    SESSION_FINISHED = "Transaction is already finished"
    SESSION_NOT_CLOSED = "Receipt requires a completed transaction"
    LOYALTY_ALREADY_REDEEMED = "Loyalty points already redeemed"
    CASHIER_ID_REQUIRED = "Cashier ID is required"
    PRODUCT_CODE_REQUIRED = "Product code cannot be empty"
    PRODUCT_NAME_REQUIRED = "Product name cannot be empty"
    PRODUCT_NAME_TOO_LONG = "Product name cannot be longer than 100 characters"
    PRODUCT_CATEGORY_REQUIRED = "Product category cannot be empty"
    PRODUCT_EXISTS = "Product code already exists"
    PRICE_POSITIVE = "Price per unit must be a positive value"
    QUANTITY_POSITIVE = "Quantity must be positive"
    QUANTITY_NON_NEGATIVE = "Quantity cannot be negative"
    QUANTITY_WHOLE = "Quantity must be a whole number"
    AMOUNT_NON_NEGATIVE = "Amount cannot be negative"
    CUSTOMER_NAME_REQUIRED = "Customer name is required"
    PHONE_REQUIRED = "Phone number cannot be empty"
    PHONE_LENGTH = "Phone must be 4-20 digits"
    PHONE_DIGITS = "Phone must contain only digits"
    CUSTOMER_EXISTS = "Customer already exists"
    INVALID_EMAIL = "Invalid email format"
    PRODUCT_NOT_FOUND = "Product not found"
    CUSTOMER_NOT_FOUND = "Customer not found"


class CheckoutError(Exception):
    """Base class for checkout engine errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(CheckoutError):
    """Malformed input such as an empty code or a non-positive quantity."""


class StateError(CheckoutError):
    """Operation is not valid for the current session state."""


class NotFoundError(CheckoutError):
    """Unknown product or customer."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(f"{message}: {key}" if key is not None else message)
        self.key = key


class InsufficientStockError(CheckoutError):
    """Requested quantity exceeds the stock on hand."""

    def __init__(self, code: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for {code}: available {available}, requested {requested}"
        )
        self.code = code
        self.available = available
        self.requested = requested
