"""Inventory ledger: live stock quantity per product code.

Quantities never go negative. Every mutation runs under one lock so that
several registers may share a ledger.
"""

import threading
from typing import Dict, Mapping, Optional

import structlog

from .errors import InsufficientStockError, errmsg
from .validation import require_int, require_non_negative, require_not_empty, require_positive

logger = structlog.get_logger()


class InventoryLedger:
    """Stock levels keyed by product code."""

    def __init__(self, quantities: Optional[Mapping[str, int]] = None):
        self._stock: Dict[str, int] = {}
        self._lock = threading.Lock()
        self.log = logger.bind(component="inventory")
        for code, qty in (quantities or {}).items():
            self.set_quantity(code, qty)

    def quantity_of(self, code: str) -> int:
        """Current quantity; 0 for unknown codes."""
        return self._stock.get(code, 0)

    def contains(self, code: str) -> bool:
        """True when the code is known and has stock on hand."""
        return self._stock.get(code, 0) > 0

    def reserve(self, code: str, qty: int) -> int:
        """Take qty units out of stock and return the new quantity.

        A negative qty puts stock back. Raises InsufficientStockError,
        leaving stock unchanged, if the result would be negative.
        """
        require_int(qty, errmsg.QUANTITY_WHOLE)
        return self._adjust(code, -qty)

    def restore(self, code: str, qty: int) -> int:
        """Put qty units back into stock and return the new quantity."""
        require_non_negative(qty, errmsg.QUANTITY_NON_NEGATIVE)
        return self._adjust(code, qty)

    def receive(self, code: str, qty: int) -> int:
        """Restock a product, creating the entry if needed."""
        require_positive(qty, errmsg.QUANTITY_POSITIVE)
        return self._adjust(code, qty)

    def set_quantity(self, code: str, qty: int) -> None:
        code = require_not_empty(code, errmsg.PRODUCT_CODE_REQUIRED)
        require_non_negative(qty, errmsg.QUANTITY_NON_NEGATIVE)
        with self._lock:
            self._stock[code] = qty

    def remove(self, code: str) -> int:
        """Delete the entry and return its prior quantity (0 if absent)."""
        with self._lock:
            removed = self._stock.pop(code, 0)
        self.log.info("product_removed", code=code, quantity=removed)
        return removed

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._stock)

    def _adjust(self, code: str, delta: int) -> int:
        with self._lock:
            current = self._stock.get(code, 0)
            new_quantity = current + delta
            if new_quantity < 0:
                raise InsufficientStockError(code, available=current, requested=-delta)
            self._stock[code] = new_quantity

        self.log.debug("stock_adjusted", code=code, delta=delta, new_quantity=new_quantity)
        return new_quantity

    def __repr__(self) -> str:
        items = ", ".join(f"{code}:{qty}" for code, qty in self._stock.items())
        return f"InventoryLedger([{items}])"
