"""Data models for products, customers and cart contents.

All money is integer cents.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from .errors import ValidationError, errmsg
from .loyalty import LoyaltyAccount
from .validation import require_not_empty, require_positive

MAX_PRODUCT_NAME_LENGTH = 100


class SessionStatus(Enum):
    IDLE = "idle"
    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionStatus.CLOSED, SessionStatus.CANCELLED)


@dataclass
class Product:
    """A catalog product. Price state changes only through the mutators."""

    code: str
    name: str
    category: str
    base_price_cents: int
    on_weekly_offer: bool = False

    def __post_init__(self) -> None:
        self.code = require_not_empty(self.code, errmsg.PRODUCT_CODE_REQUIRED)
        self.name = require_not_empty(self.name, errmsg.PRODUCT_NAME_REQUIRED)
        if len(self.name) > MAX_PRODUCT_NAME_LENGTH:
            raise ValidationError(errmsg.PRODUCT_NAME_TOO_LONG)
        self.category = require_not_empty(self.category, errmsg.PRODUCT_CATEGORY_REQUIRED)
        require_positive(self.base_price_cents, errmsg.PRICE_POSITIVE)

    def set_base_price(self, price_cents: int) -> None:
        require_positive(price_cents, errmsg.PRICE_POSITIVE)
        self.base_price_cents = price_cents

    def set_weekly_offer(self, on_offer: bool) -> None:
        self.on_weekly_offer = bool(on_offer)


@dataclass(frozen=True)
class CartLine:
    """A product scanned into a cart, with its price locked at scan time."""

    code: str
    name: str
    quantity: int
    base_price_cents: int
    unit_price_cents: int

    @property
    def base_total_cents(self) -> int:
        return self.base_price_cents * self.quantity

    @property
    def line_total_cents(self) -> int:
        return self.unit_price_cents * self.quantity


@dataclass(frozen=True)
class TransactionRecord:
    """Audit record of a completed purchase in a customer's history."""

    date: date
    amount_cents: int

    def __str__(self) -> str:
        return f"Transaction [Date: {self.date.isoformat()}, Amount: {self.amount_cents / 100:.2f}]"


def _validate_phone(phone: str) -> str:
    phone = require_not_empty(phone, errmsg.PHONE_REQUIRED)
    if len(phone) < 4 or len(phone) > 20:
        raise ValidationError(errmsg.PHONE_LENGTH)
    if not phone.isdigit():
        raise ValidationError(errmsg.PHONE_DIGITS)
    return phone


@dataclass
class Customer:
    """A loyalty-card customer keyed by phone number."""

    phone: str
    name: str
    surname: str = ""
    email: str = ""
    loyalty: Optional[LoyaltyAccount] = None
    _history: List[TransactionRecord] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        self.phone = _validate_phone(self.phone)
        self.name = require_not_empty(self.name, errmsg.CUSTOMER_NAME_REQUIRED)
        if self.email:
            if "@" not in self.email or "." not in self.email:
                raise ValidationError(errmsg.INVALID_EMAIL)
            self.email = self.email.strip()
        if self.loyalty is None:
            self.loyalty = LoyaltyAccount(self.phone)

    @property
    def display_name(self) -> str:
        return f"{self.name} {self.surname}".strip()

    @property
    def history(self) -> Tuple[TransactionRecord, ...]:
        return tuple(self._history)

    def add_transaction(self, record: TransactionRecord) -> None:
        self._history.append(record)
