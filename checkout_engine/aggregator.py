"""Running sales aggregation for the lifetime of the process."""

import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class CustomerTotals:
    spend_cents: int = 0
    points_earned: int = 0
    points_redeemed: int = 0


class SalesAggregator:
    """Accumulates per-cashier and per-customer totals from completed sessions.

    Pure accumulation: no discount logic lives here. Snapshots are read-only
    copies so reporting code cannot alter the running figures.
    """

    def __init__(self):
        self._cashier_sales: Dict[str, int] = {}
        self._customers: Dict[str, CustomerTotals] = {}
        self._transaction_count = 0
        self._lock = threading.Lock()

    def record_sale(
        self,
        cashier_id: str,
        amount_cents: int,
        customer_key: Optional[str] = None,
        points_redeemed: int = 0,
    ) -> None:
        with self._lock:
            self._transaction_count += 1
            self._cashier_sales[cashier_id] = self._cashier_sales.get(cashier_id, 0) + amount_cents

            if customer_key is not None:
                current = self._customers.get(customer_key, CustomerTotals())
                self._customers[customer_key] = CustomerTotals(
                    spend_cents=current.spend_cents + amount_cents,
                    points_earned=current.points_earned + amount_cents // 100,
                    points_redeemed=current.points_redeemed + points_redeemed,
                )
            count = self._transaction_count

        logger.info(
            "sale_recorded",
            cashier_id=cashier_id,
            phone=customer_key,
            amount_cents=amount_cents,
            transaction_count=count,
        )

    def cashier_totals(self) -> Mapping[str, int]:
        with self._lock:
            return MappingProxyType(dict(self._cashier_sales))

    def customer_totals(self) -> Mapping[str, CustomerTotals]:
        with self._lock:
            return MappingProxyType(dict(self._customers))

    @property
    def transaction_count(self) -> int:
        return self._transaction_count

    @property
    def total_sales_cents(self) -> int:
        with self._lock:
            return sum(self._cashier_sales.values())
