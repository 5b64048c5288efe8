"""Receipt building and formatting for completed sessions."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from .errors import errmsg
from .models import SessionStatus
from .validation import require_status

if TYPE_CHECKING:
    from .session import CartSession


@dataclass(frozen=True)
class ReceiptLine:
    code: str
    name: str
    quantity: int
    unit_price_cents: int
    line_total_cents: int


@dataclass(frozen=True)
class Receipt:
    """Summary of a completed session."""

    cashier_id: str
    customer_phone: Optional[str]
    customer_name: Optional[str]
    lines: Tuple[ReceiptLine, ...]
    subtotal_cents: int
    discount_cents: int
    total_cents: int
    points_earned: int
    points_redeemed: int
    issued_at: datetime


class ReceiptBuilder:
    """Renders a closed CartSession into a Receipt. Has no side effects."""

    def build(self, session: "CartSession") -> Receipt:
        require_status(session.status, SessionStatus.CLOSED, errmsg.SESSION_NOT_CLOSED)

        # Lines of one code locked at different prices stay separate.
        grouped: Dict[Tuple[str, int], List] = {}
        for line in session.lines:
            key = (line.code, line.unit_price_cents)
            if key not in grouped:
                grouped[key] = [line.name, 0]
            grouped[key][1] += line.quantity

        lines = tuple(
            ReceiptLine(
                code=code,
                name=name,
                quantity=qty,
                unit_price_cents=unit_price,
                line_total_cents=unit_price * qty,
            )
            for (code, unit_price), (name, qty) in grouped.items()
        )

        customer = session.customer
        return Receipt(
            cashier_id=session.cashier_id,
            customer_phone=customer.phone if customer else None,
            customer_name=customer.display_name if customer else None,
            lines=lines,
            subtotal_cents=session.subtotal_cents,
            discount_cents=session.offer_discount_cents + session.loyalty_discount_cents,
            total_cents=session.final_amount_cents,
            points_earned=session.points_earned,
            points_redeemed=session.points_redeemed,
            issued_at=session.completed_at,
        )


def format_money(cents: int, currency: str = "€") -> str:
    return f"{cents / 100:.2f}{currency}"


def format_receipt(receipt: Receipt, currency: str = "€") -> str:
    """Format a human-readable receipt."""
    lines = []

    def money(cents: int) -> str:
        return format_money(cents, currency)

    lines.append("=" * 40)
    lines.append("           RECEIPT")
    lines.append("=" * 40)
    lines.append(f"Date: {receipt.issued_at:%Y-%m-%d %H:%M}")
    lines.append(f"Cashier: {receipt.cashier_id}")
    if receipt.customer_phone:
        lines.append(f"Customer: {receipt.customer_name} ({receipt.customer_phone})")
    lines.append("-" * 40)

    for item in receipt.lines:
        lines.append(
            f"{item.name} {item.quantity} x {money(item.unit_price_cents)} = {money(item.line_total_cents)}"
        )

    lines.append("-" * 40)
    lines.append(f"Subtotal:              {money(receipt.subtotal_cents)}")
    if receipt.discount_cents > 0:
        lines.append(f"Discounts:             -{money(receipt.discount_cents)}")
    lines.append(f"TOTAL:                 {money(receipt.total_cents)}")

    if receipt.customer_phone:
        lines.append("-" * 40)
        lines.append(f"Points Redeemed: {receipt.points_redeemed}")
        lines.append(f"Points Earned:   {receipt.points_earned}")

    lines.append("=" * 40)
    lines.append("     Thank you for your purchase!")
    lines.append("=" * 40)

    return "\n".join(lines)
