"""Loyalty point bookkeeping.

Business Rules:
1. 100 points redeem for 1 currency unit (100 cents) of discount
2. Redemption is capped by the whole units the balance covers and by the cart amount
3. Points are deducted at redemption time, not at completion
4. Each whole currency unit of final spend accrues 1 point (truncated)
"""

import threading

import structlog

from .errors import errmsg
from .validation import require_non_negative

logger = structlog.get_logger()

POINTS_PER_UNIT = 100
CENTS_PER_UNIT = 100


class LoyaltyAccount:
    """Integer point balance for one customer."""

    def __init__(self, customer_key: str, balance: int = 0):
        require_non_negative(balance, "Point balance cannot be negative")
        self.customer_key = customer_key
        self._balance = balance
        self._lock = threading.Lock()
        self.log = logger.bind(phone=customer_key)

    @property
    def balance(self) -> int:
        return self._balance

    def max_discount_cents(self) -> int:
        """Largest discount the balance can pay for, in whole currency units."""
        return (self._balance // POINTS_PER_UNIT) * CENTS_PER_UNIT

    def redeem(self, cart_amount_cents: int) -> int:
        """Spend points against a cart amount and return the discount in cents.

        One point buys one cent, so the points consumed equal the discount
        in cents. That is a multiple of 100 unless the cart amount is the cap.
        """
        require_non_negative(cart_amount_cents, errmsg.AMOUNT_NON_NEGATIVE)
        with self._lock:
            discount_cents = min(cart_amount_cents, self.max_discount_cents())
            points = discount_cents * POINTS_PER_UNIT // CENTS_PER_UNIT
            self._balance -= points
            new_balance = self._balance

        self.log.info(
            "redeeming_loyalty_points",
            points=points,
            discount_cents=discount_cents,
            new_balance=new_balance,
        )
        return discount_cents

    def accrue(self, amount_cents: int) -> int:
        """Add one point per whole currency unit of amount; return points added."""
        require_non_negative(amount_cents, errmsg.AMOUNT_NON_NEGATIVE)
        points = amount_cents // CENTS_PER_UNIT
        with self._lock:
            self._balance += points
            new_balance = self._balance

        self.log.info("adding_loyalty_points", points=points, new_balance=new_balance)
        return points

    def __repr__(self) -> str:
        return f"LoyaltyAccount(customer_key={self.customer_key!r}, balance={self._balance})"
