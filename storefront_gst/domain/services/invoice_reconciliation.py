# storefront_gst/domain/services/invoice_reconciliation.py
"""
Reconcile a stored order total against its line items for invoicing.

The stored total is the source of truth. Invoices recompute
sum(price * quantity) + delivery; any positive gap is shown as an extra
charge line (COD fee for cash-on-delivery orders).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from storefront_gst.domain.models.order import OrderRecord

logger = logging.getLogger("invoice_reconciliation")

# Differences below half a paisa are float noise, not a charge.
CHARGE_TOLERANCE = 0.005


@dataclass(frozen=True)
class InvoiceReconciliation:
    items_subtotal: float
    delivery_price: float
    computed_total: float
    stored_total: float
    additional_charge: float = 0.0
    additional_charge_label: Optional[str] = None


def additional_charge_label(payment_type: str | None) -> str:
    if not payment_type or payment_type.lower() == "cod":
        return "COD Charges"
    return "Additional Charges"


def reconcile_order_total(order: OrderRecord) -> InvoiceReconciliation:
    items_subtotal = 0.0
    for item in order.items:
        items_subtotal += float(item.price) * item.quantity

    delivery_price = float(order.delivery_price or 0.0)
    computed_total = items_subtotal + delivery_price
    stored_total = float(order.total)
    gap = stored_total - computed_total

    if gap > CHARGE_TOLERANCE:
        label = additional_charge_label(order.payment_type)
        logger.info("Order %s: %.2f attributed to %s", order.id[:8], gap, label)
        return InvoiceReconciliation(
            items_subtotal=items_subtotal,
            delivery_price=delivery_price,
            computed_total=computed_total,
            stored_total=stored_total,
            additional_charge=gap,
            additional_charge_label=label,
        )

    if gap < -CHARGE_TOLERANCE:
        logger.warning(
            "Order %s: stored total %.2f is below line items + delivery %.2f",
            order.id[:8],
            stored_total,
            computed_total,
        )

    return InvoiceReconciliation(
        items_subtotal=items_subtotal,
        delivery_price=delivery_price,
        computed_total=computed_total,
        stored_total=stored_total,
    )
