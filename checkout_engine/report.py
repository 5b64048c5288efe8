"""End-of-day activity report."""

from .aggregator import SalesAggregator
from .catalog import CustomerDirectory, ProductCatalog
from .inventory import InventoryLedger
from .receipt import format_money


def render_report(
    ledger: InventoryLedger,
    catalog: ProductCatalog,
    aggregator: SalesAggregator,
    directory: CustomerDirectory,
    currency: str = "€",
) -> str:
    """Render inventory, cashier sales, customer activity and summary totals."""
    lines = ["=== SUPERMARKET FINAL REPORT ===", ""]

    lines.append("CURRENT INVENTORY:")
    stock = ledger.snapshot()
    if not stock:
        lines.append("  No inventory available")
    for code, qty in stock.items():
        product = catalog.find(code)
        if product is not None:
            lines.append(f"{code}: {qty} units ({product.name} - {product.category})")
        else:
            lines.append(f"{code}: {qty} units")

    lines.append("")
    lines.append("SALES BY CASHIER:")
    cashier_sales = aggregator.cashier_totals()
    if not cashier_sales:
        lines.append("  No sales recorded")
    for cashier_id, cents in cashier_sales.items():
        lines.append(f"{cashier_id}: {format_money(cents, currency)}")

    lines.append("")
    lines.append("CUSTOMER SPENDING AND POINTS:")
    customer_totals = aggregator.customer_totals()
    if not customer_totals:
        lines.append("  No customer activity")
    for phone, totals in customer_totals.items():
        customer = directory.find(phone)
        name = customer.display_name if customer is not None else "Unknown customer"
        lines.append(f"{name} (Phone: {phone})")
        lines.append(f"  Total spent: {format_money(totals.spend_cents, currency)}")
        lines.append(f"  Points earned: {totals.points_earned}")
        lines.append(f"  Points redeemed: {totals.points_redeemed}")

    lines.append("")
    lines.append("SUMMARY STATISTICS:")
    lines.append(f"Total Sales: {format_money(aggregator.total_sales_cents, currency)}")
    lines.append(f"Total Transactions: {aggregator.transaction_count}")
    lines.append("")
    lines.append("=== END OF REPORT ===")

    return "\n".join(lines)
