"""Register: the in-process API a till front end drives.

One Register serves one terminal and holds at most one current session.
Terminals that share a ledger, directory and aggregator stay consistent
because those components serialize their own mutations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, Optional

import structlog

from .aggregator import SalesAggregator
from .catalog import CustomerDirectory, ProductCatalog
from .config import Settings
from .errors import NotFoundError, StateError, errmsg
from .inventory import InventoryLedger
from .models import CartLine, Product, SessionStatus
from .pricing import PricingEngine
from .receipt import Receipt, ReceiptBuilder, format_receipt
from .session import CartSession, Totals, utcnow

logger = structlog.get_logger()


@dataclass(frozen=True)
class StockInfo:
    product: Product
    quantity: int


class Register:
    """Drives CartSessions against shared catalog, stock and loyalty state."""

    def __init__(
        self,
        catalog: ProductCatalog,
        ledger: InventoryLedger,
        directory: CustomerDirectory,
        aggregator: Optional[SalesAggregator] = None,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.settings = settings or Settings()
        self.catalog = catalog
        self.ledger = ledger
        self.directory = directory
        self.aggregator = aggregator or SalesAggregator()
        self.pricing = PricingEngine(self.settings.weekly_offer_percent)
        self.receipt_builder = ReceiptBuilder()
        self._clock = clock
        self.session: Optional[CartSession] = None
        self.log = logger.bind(component="register")

    def start_transaction(self, cashier_id: str) -> None:
        if self.session is not None and self.session.status is SessionStatus.OPEN:
            self._reject("start_transaction", errmsg.SESSION_ALREADY_OPEN)

        session = CartSession(
            self.catalog,
            self.ledger,
            self.aggregator,
            pricing=self.pricing,
            receipt_builder=self.receipt_builder,
            clock=self._clock,
        )
        session.start(cashier_id)
        self.session = session

    def add_item(self, code: str, qty: int) -> CartLine:
        return self._current("add_item").add_item(code, qty)

    def set_customer(self, phone: str) -> None:
        session = self._current("set_customer")
        try:
            customer = self.directory.lookup(phone)
        except NotFoundError as e:
            self.log.warning("operation_rejected", operation="set_customer", reason=e.message)
            raise
        session.set_customer(customer)

    def apply_loyalty_redemption(self, use_points: bool) -> int:
        return self._current("apply_loyalty_redemption").apply_loyalty_redemption(use_points)

    def complete_transaction(self) -> Receipt:
        return self._current("complete_transaction").complete()

    def cancel_transaction(self) -> Dict[str, int]:
        return self._current("cancel_transaction").cancel()

    def current_totals(self) -> Totals:
        return self._current("current_totals").current_totals()

    def check_stock(self, code: str) -> StockInfo:
        """Product details and stock on hand, independent of any session."""
        product = self.catalog.lookup(code)
        return StockInfo(product=product, quantity=self.ledger.quantity_of(code))

    def print_receipt(self, receipt: Receipt) -> str:
        return format_receipt(receipt, currency=self.settings.currency_symbol)

    def _current(self, operation: str) -> CartSession:
        if self.session is None or self.session.status is not SessionStatus.OPEN:
            self._reject(operation, errmsg.SESSION_NOT_OPEN)
        return self.session

    def _reject(self, operation: str, message: str) -> None:
        self.log.warning("operation_rejected", operation=operation, reason=message)
        raise StateError(message)
