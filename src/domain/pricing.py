"""Pricing Engine

Computes discounted line amounts and order invoices. All arithmetic stays in
Decimal so monetary values carry no floating-point error.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List

from src.domain.order import OrderItem
from src.domain.product import Product

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class LineAmount:
    discount_percent: Decimal
    amount: Decimal


@dataclass(frozen=True)
class InvoiceLine:
    product_name: str
    quantity: int
    discount_percent: Decimal
    amount: Decimal


@dataclass(frozen=True)
class OrderInvoice:
    lines: List[InvoiceLine] = field(default_factory=list)
    total_amount: Decimal = ZERO


def discounted_amount(price: Decimal, quantity: int, discount_percent: Decimal) -> Decimal:
    return price * quantity * (1 - discount_percent / HUNDRED)


def compute_line_amount(product: Product, quantity: int) -> LineAmount:
    """
    Price one line of an order

    The product's discount applies only when its percentage is positive and
    quantity reaches the threshold. An unset threshold is never reached.

    Args:
        product: Product being purchased
        quantity: Purchased quantity (>= 1)

    Returns:
        LineAmount with the applied discount percent and the line amount
    """
    percentage = product.discount_percentage or ZERO
    threshold = product.discount_quantity_threshold

    applied = ZERO
    if percentage > 0 and threshold is not None and quantity >= threshold:
        applied = percentage

    return LineAmount(
        discount_percent=applied,
        amount=discounted_amount(product.price, quantity, applied),
    )


def compute_invoice(items: Iterable[OrderItem], products_by_id: Dict[int, Product]) -> OrderInvoice:
    """
    Build the invoice breakdown of an order

    Every item's product must be present in products_by_id; order creation
    guarantees it. Lines keep the order of items.

    Args:
        items: Order items of one order
        products_by_id: Products referenced by the items, keyed by id

    Returns:
        OrderInvoice with one line per item and the exact total
    """
    lines = []
    total = ZERO
    for item in items:
        product = products_by_id[item.product_id]
        line = compute_line_amount(product, item.quantity)
        lines.append(
            InvoiceLine(
                product_name=product.name,
                quantity=item.quantity,
                discount_percent=line.discount_percent,
                amount=line.amount,
            )
        )
        total += line.amount

    return OrderInvoice(lines=lines, total_amount=total)
