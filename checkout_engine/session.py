"""Cart session: the lifecycle of one checkout transaction.

States:
    IDLE -> OPEN        start(cashier_id)
    OPEN -> OPEN        add_item, set_customer, apply_loyalty_redemption
    OPEN -> CLOSED      complete()
    OPEN -> CANCELLED   cancel(), restoring every stock decrement

CLOSED and CANCELLED are terminal. A rejected operation leaves the session,
the ledger and the loyalty balance untouched.
"""

import functools
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

import structlog

from .aggregator import SalesAggregator
from .catalog import ProductCatalog
from .errors import CheckoutError, InsufficientStockError, StateError, errmsg
from .inventory import InventoryLedger
from .models import CartLine, Customer, SessionStatus, TransactionRecord
from .pricing import PricingEngine
from .receipt import Receipt, ReceiptBuilder
from .validation import require_not_empty, require_positive, require_status_not

logger = structlog.get_logger()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def logs_rejection(method):
    """Log a warning for any CheckoutError the wrapped operation raises, then re-raise."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except CheckoutError as e:
            self.log.warning("operation_rejected", operation=method.__name__, reason=e.message)
            raise

    return wrapper


@dataclass(frozen=True)
class Totals:
    subtotal_cents: int
    discount_cents: int
    amount_cents: int


class CartSession:
    """Owns one transaction's lines and running totals."""

    def __init__(
        self,
        catalog: ProductCatalog,
        ledger: InventoryLedger,
        aggregator: SalesAggregator,
        pricing: Optional[PricingEngine] = None,
        receipt_builder: Optional[ReceiptBuilder] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.catalog = catalog
        self.ledger = ledger
        self.aggregator = aggregator
        self.pricing = pricing or PricingEngine()
        self.receipt_builder = receipt_builder or ReceiptBuilder()
        self._clock = clock

        self.status = SessionStatus.IDLE
        self.cashier_id: Optional[str] = None
        self.customer: Optional[Customer] = None
        self._lines: List[CartLine] = []
        self.subtotal_cents = 0
        self.offer_discount_cents = 0
        self.loyalty_discount_cents = 0
        self.amount_cents = 0
        self.final_amount_cents: Optional[int] = None
        self.points_earned = 0
        self.points_redeemed = 0
        self.completed_at: Optional[datetime] = None
        self.log = logger

    @property
    def lines(self) -> Tuple[CartLine, ...]:
        return tuple(self._lines)

    @logs_rejection
    def start(self, cashier_id: str) -> None:
        require_status_not(self.status, SessionStatus.OPEN, errmsg.SESSION_ALREADY_OPEN)
        if self.status.is_terminal:
            raise StateError(errmsg.SESSION_FINISHED)
        self.cashier_id = require_not_empty(cashier_id, errmsg.CASHIER_ID_REQUIRED)

        self.status = SessionStatus.OPEN
        self.log = logger.bind(cashier_id=self.cashier_id)
        self.log.info("session_started")

    @logs_rejection
    def add_item(self, code: str, qty: int) -> CartLine:
        """Scan qty units of a product, decrementing stock and locking the price."""
        self._require_open()
        code = require_not_empty(code, errmsg.PRODUCT_CODE_REQUIRED)
        require_positive(qty, errmsg.QUANTITY_POSITIVE)

        product = self.catalog.lookup(code)
        available = self.ledger.quantity_of(code)
        if available < qty:
            raise InsufficientStockError(code, available=available, requested=qty)

        price = self.pricing.line_price(product, qty)
        self.ledger.reserve(code, qty)

        line = CartLine(
            code=product.code,
            name=product.name,
            quantity=qty,
            base_price_cents=price.base_price_cents,
            unit_price_cents=price.unit_price_cents,
        )
        self._lines.append(line)

        self.subtotal_cents += price.base_total_cents
        self.offer_discount_cents += price.offer_discount_cents
        self.amount_cents += price.total_cents
        if self.final_amount_cents is not None:
            self.final_amount_cents += price.total_cents

        self.log.info(
            "item_added",
            code=code,
            quantity=qty,
            unit_price_cents=price.unit_price_cents,
            amount_cents=self.amount_cents,
        )
        return line

    @logs_rejection
    def set_customer(self, customer: Optional[Customer]) -> None:
        self._require_open()
        if self.loyalty_discount_cents > 0:
            raise StateError(errmsg.LOYALTY_ALREADY_REDEEMED)
        self.customer = customer
        self.log.info("customer_bound", phone=customer.phone if customer else None)

    @logs_rejection
    def apply_loyalty_redemption(self, use_points: bool) -> int:
        """Settle the loyalty decision and return the discount granted in cents.

        Does nothing without a bound customer. Points leave the account here,
        not at completion. Once points have been redeemed the decision is
        final: a further call, or rebinding the customer, raises StateError
        so the discount stays capped by a single balance.
        """
        self._require_open()
        if self.loyalty_discount_cents > 0:
            raise StateError(errmsg.LOYALTY_ALREADY_REDEEMED)
        if self.customer is None:
            return 0

        discount_cents = 0
        if use_points:
            discount_cents = self.customer.loyalty.redeem(self.amount_cents)
            self.loyalty_discount_cents += discount_cents
        self.final_amount_cents = self.amount_cents - discount_cents

        self.log.info(
            "loyalty_redeemed",
            phone=self.customer.phone,
            use_points=use_points,
            discount_cents=discount_cents,
            final_amount_cents=self.final_amount_cents,
        )
        return discount_cents

    @logs_rejection
    def complete(self) -> Receipt:
        """Close the sale: record history, accrue points, aggregate, emit receipt."""
        self._require_open()
        if self.final_amount_cents is None:
            self.final_amount_cents = self.amount_cents

        # One point per cent of discount, so the cent difference is the point count.
        self.points_redeemed = self.amount_cents - self.final_amount_cents
        self.completed_at = self._clock()

        customer_key = None
        if self.customer is not None:
            customer_key = self.customer.phone
            self.customer.add_transaction(
                TransactionRecord(date=self.completed_at.date(), amount_cents=self.final_amount_cents)
            )
            self.points_earned = self.customer.loyalty.accrue(self.final_amount_cents)

        self.aggregator.record_sale(
            self.cashier_id,
            self.final_amount_cents,
            customer_key=customer_key,
            points_redeemed=self.points_redeemed,
        )

        self.status = SessionStatus.CLOSED
        self.log.info(
            "session_completed",
            phone=customer_key,
            final_amount_cents=self.final_amount_cents,
            points_earned=self.points_earned,
            points_redeemed=self.points_redeemed,
        )
        return self.receipt_builder.build(self)

    @logs_rejection
    def cancel(self) -> Dict[str, int]:
        """Abandon the sale and put back every unit this session took.

        Restoration goes by quantity only; price changes since the scan
        do not matter. Returns the code -> quantity map that was restored.
        """
        self._require_open()

        restored: Dict[str, int] = {}
        for line in self._lines:
            restored[line.code] = restored.get(line.code, 0) + line.quantity
        for code, qty in restored.items():
            self.ledger.restore(code, qty)

        self.status = SessionStatus.CANCELLED
        self.log.info("session_cancelled", restored=restored)
        return restored

    def current_totals(self) -> Totals:
        amount = self.amount_cents if self.final_amount_cents is None else self.final_amount_cents
        return Totals(
            subtotal_cents=self.subtotal_cents,
            discount_cents=self.offer_discount_cents + self.loyalty_discount_cents,
            amount_cents=amount,
        )

    def _require_open(self) -> None:
        if self.status is SessionStatus.OPEN:
            return
        if self.status.is_terminal:
            raise StateError(errmsg.SESSION_FINISHED)
        raise StateError(errmsg.SESSION_NOT_OPEN)
