"""Price and discount calculation.

Stateless: prices depend only on the product's base price, its weekly-offer
flag and the configured offer percentage.
"""

from dataclasses import dataclass

from .errors import ValidationError, errmsg
from .models import Product
from .validation import require_positive

DEFAULT_WEEKLY_OFFER_PERCENT = 10


@dataclass(frozen=True)
class LinePrice:
    """Pricing of one product at a given quantity."""

    quantity: int
    base_price_cents: int
    unit_price_cents: int

    @property
    def base_total_cents(self) -> int:
        return self.base_price_cents * self.quantity

    @property
    def total_cents(self) -> int:
        return self.unit_price_cents * self.quantity

    @property
    def offer_discount_cents(self) -> int:
        return (self.base_price_cents - self.unit_price_cents) * self.quantity


class PricingEngine:
    """Computes unit and line prices for products."""

    def __init__(self, weekly_offer_percent: int = DEFAULT_WEEKLY_OFFER_PERCENT):
        if weekly_offer_percent < 0 or weekly_offer_percent > 100:
            raise ValidationError("Weekly offer percent must be 0-100")
        self.weekly_offer_percent = weekly_offer_percent

    def unit_price(self, product: Product) -> int:
        """Current unit price in cents, rounded half-up."""
        if not product.on_weekly_offer:
            return product.base_price_cents
        return (product.base_price_cents * (100 - self.weekly_offer_percent) + 50) // 100

    def line_price(self, product: Product, quantity: int) -> LinePrice:
        require_positive(quantity, errmsg.QUANTITY_POSITIVE)
        return LinePrice(
            quantity=quantity,
            base_price_cents=product.base_price_cents,
            unit_price_cents=self.unit_price(product),
        )
