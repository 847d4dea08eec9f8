"""Discount Report Aggregator

Summarizes, per discounted product, how often the bulk discount was
triggered across all orders and how much discounted revenue it produced.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from src.domain.order import OrderItem
from src.domain.pricing import ZERO, discounted_amount
from src.domain.product import Product


@dataclass(frozen=True)
class DiscountReportRow:
    product_name: str
    discount_percent: Decimal
    number_of_orders: int
    total_amount: Decimal


def build_discount_report(
    products: Iterable[Product],
    order_items_by_product: Dict[int, Sequence[OrderItem]],
) -> List[DiscountReportRow]:
    """
    Aggregate qualifying order items per discounted product

    Products without an active discount are skipped, as are discounted
    products whose items never reached the threshold. Totals use the
    product's current discount percentage.

    Args:
        products: Candidate products
        order_items_by_product: Historical order items keyed by product id

    Returns:
        One row per product with at least one qualifying item, in the order
        the products were given
    """
    rows = []
    for product in products:
        if not product.has_discount:
            continue

        threshold = product.discount_quantity_threshold
        qualifying = [
            item for item in order_items_by_product.get(product.id, ())
            if item.quantity >= threshold
        ]
        if not qualifying:
            continue

        order_ids = {item.order_id for item in qualifying}
        total = sum(
            (
                discounted_amount(product.price, item.quantity, product.discount_percentage)
                for item in qualifying
            ),
            ZERO,
        )
        rows.append(
            DiscountReportRow(
                product_name=product.name,
                discount_percent=product.discount_percentage,
                number_of_orders=len(order_ids),
                total_amount=total,
            )
        )

    return rows
