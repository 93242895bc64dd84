# storefront_gst/domain/services/sales_report.py
"""
Order-level sales register for the admin export.

One row per order (any status). Taxable / tax split uses the same
inclusive breakdown as GSTR-1; the row total is the stored order total.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from storefront_gst.domain.models.order import OrderRecord
from storefront_gst.domain.services.tax_calculator import (
    calculate_tax_breakdown,
    resolve_gst_percentage,
)

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class SalesRow:
    order_id: str
    order_date: str
    customer_name: str
    customer_email: str
    items: str
    hsn_codes: str
    quantity: int
    amount: float  # taxable
    tax: float
    total: float
    status: str
    shipping_address: str
    gst_breakdown: str


def build_sales_row(order: OrderRecord) -> SalesRow:
    profile = order.profile
    if profile is not None:
        customer_name = f"{profile.first_name or ''} {profile.last_name or ''}".strip() or NOT_AVAILABLE
        customer_email = profile.email or NOT_AVAILABLE
    else:
        customer_name = NOT_AVAILABLE
        customer_email = NOT_AVAILABLE

    names: list[str] = []
    hsn_codes: list[str] = []
    breakdown_parts: list[str] = []
    total_quantity = 0
    total_tax = 0.0
    total_taxable = 0.0

    for item in order.items:
        product = item.product
        name = product.name if product else NOT_AVAILABLE
        names.append(name)
        hsn_codes.append((product.hsn_code if product else None) or NOT_AVAILABLE)
        total_quantity += item.quantity

        rate = resolve_gst_percentage(product.gst_percentage if product else None)
        breakdown = calculate_tax_breakdown(float(item.price) * item.quantity, rate, order.shipping_address)
        total_tax += breakdown.total_tax
        total_taxable += breakdown.taxable_amount

        if rate > 0:
            breakdown_parts.append(f"{name}: {rate:g}% GST")

    return SalesRow(
        order_id=order.id[:8],
        order_date=order.created_at.strftime("%d/%m/%Y"),
        customer_name=customer_name,
        customer_email=customer_email,
        items=", ".join(names) or NOT_AVAILABLE,
        hsn_codes=", ".join(hsn_codes) or NOT_AVAILABLE,
        quantity=total_quantity,
        amount=total_taxable,
        tax=total_tax,
        total=float(order.total),
        status=order.status,
        shipping_address=order.shipping_address.replace("\n", " "),
        gst_breakdown="; ".join(breakdown_parts) or "No GST",
    )


def build_sales_report(orders: Iterable[OrderRecord]) -> list[SalesRow]:
    """Rows in the order given (the store returns newest first)."""
    return [build_sales_row(order) for order in orders]
