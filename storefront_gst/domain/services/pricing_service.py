# storefront_gst/domain/services/pricing_service.py
"""
Cart / order pricing on top of the GST breakdown primitive.

Product prices are tax-inclusive. A present discounted_price always wins
over price; the catalog is expected to have checked
discounted_price < price before it gets here, and nothing is re-validated
(zero or negative quantities flow through as zero / negative totals).
"""

from __future__ import annotations

import logging
from typing import Iterable

from storefront_gst.config.settings import settings
from storefront_gst.domain.models.pricing import (
    LineItem,
    OrderTotals,
    PriceCalculationResult,
    Product,
)
from storefront_gst.domain.services.tax_calculator import (
    calculate_tax_breakdown,
    resolve_gst_percentage,
)

logger = logging.getLogger("pricing_service")


def calculate_product_price(
    product: Product,
    quantity: int = 1,
    shipping_address: str | None = "",
) -> PriceCalculationResult:
    """
    Price one cart line.

    base_price, discount_amount and discounted_price are per unit;
    taxable_amount, tax_amount and final_price cover the whole line.
    """
    gst_percentage = resolve_gst_percentage(product.gst_percentage)
    base_price = float(product.price)
    has_discounted = product.discounted_price is not None

    effective_price = float(product.discounted_price) if has_discounted else base_price
    discount_amount = base_price - effective_price if has_discounted else 0.0

    line_total = effective_price * quantity
    breakdown = calculate_tax_breakdown(line_total, gst_percentage, shipping_address)

    return PriceCalculationResult(
        base_price=base_price,
        discount_amount=discount_amount,
        discounted_price=effective_price,
        taxable_amount=breakdown.taxable_amount,
        tax_amount=breakdown.total_tax,
        final_price=breakdown.taxable_amount + breakdown.total_tax,
        gst_percentage=gst_percentage,
    )


def calculate_order_totals(
    items: Iterable[LineItem],
    shipping_address: str | None = "",
    delivery_price: float = 0.0,
) -> OrderTotals:
    """
    Sum line pricing across an order, in list order.

    One shipping address applies to every line. delivery_price comes from
    the shipping-rate lookup and carries no GST here.
    """
    total_base_amount = 0.0
    total_discount_amount = 0.0
    total_taxable_amount = 0.0
    total_tax_amount = 0.0
    total_final_price = 0.0
    count = 0

    for item in items:
        pricing = calculate_product_price(item.product, item.quantity, shipping_address)
        total_base_amount += pricing.base_price * item.quantity
        total_discount_amount += pricing.discount_amount * item.quantity
        total_taxable_amount += pricing.taxable_amount
        total_tax_amount += pricing.tax_amount
        total_final_price += pricing.final_price
        count += 1

    delivery_price = float(delivery_price or 0.0)
    grand_total = total_final_price + delivery_price

    logger.debug("Order totals for %d lines: grand_total=%s", count, grand_total)

    return OrderTotals(
        total_base_amount=total_base_amount,
        total_discount_amount=total_discount_amount,
        total_taxable_amount=total_taxable_amount,
        total_tax_amount=total_tax_amount,
        total_final_price=total_final_price,
        delivery_price=delivery_price,
        grand_total=grand_total,
    )


# ---------- display helpers ----------


def round_money(value: float) -> float:
    """Round to paisa for display / export only."""
    return round(float(value), 2)


def format_price(amount: float, precision: int = 2) -> str:
    return f"{settings.CURRENCY_SYMBOL}{float(amount):.{precision}f}"


def get_display_price(product: Product) -> float:
    """Unit price shown in the catalog (tax-inclusive, after discount)."""
    return calculate_product_price(product, 1).final_price


def has_discount(product: Product) -> bool:
    return product.discounted_price is not None and product.discounted_price < product.price
