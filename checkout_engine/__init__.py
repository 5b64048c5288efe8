"""Point-of-sale checkout engine: cart sessions, stock, pricing and loyalty."""

from .aggregator import CustomerTotals, SalesAggregator
from .catalog import CustomerDirectory, ProductCatalog
from .config import Settings, load_settings
from .errors import (
    CheckoutError,
    ValidationError,
    StateError,
    NotFoundError,
    InsufficientStockError,
    errmsg,
)
from .inventory import InventoryLedger
from .log import configure_logging
from .loyalty import LoyaltyAccount
from .models import (
    CartLine,
    Customer,
    Product,
    SessionStatus,
    TransactionRecord,
)
from .pricing import LinePrice, PricingEngine
from .receipt import Receipt, ReceiptBuilder, ReceiptLine, format_money, format_receipt
from .register import Register, StockInfo
from .report import render_report
from .session import CartSession, Totals

__all__ = [
    # Session
    "CartSession",
    "Totals",
    "Register",
    "StockInfo",
    # Components
    "InventoryLedger",
    "PricingEngine",
    "LinePrice",
    "LoyaltyAccount",
    "SalesAggregator",
    "CustomerTotals",
    "ReceiptBuilder",
    "Receipt",
    "ReceiptLine",
    "format_money",
    "format_receipt",
    "render_report",
    # Repositories
    "ProductCatalog",
    "CustomerDirectory",
    # Models
    "CartLine",
    "Customer",
    "Product",
    "SessionStatus",
    "TransactionRecord",
    # Errors
    "CheckoutError",
    "ValidationError",
    "StateError",
    "NotFoundError",
    "InsufficientStockError",
    "errmsg",
    # Config
    "Settings",
    "load_settings",
    "configure_logging",
]
