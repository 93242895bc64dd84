# storefront_gst/domain/services/gstr1_service.py
"""
GSTR-1 (outward supplies) export from completed storefront orders.

Flow:
1. build_gstr1_invoice: one invoice per order; each order item priced
   through the shared inclusive tax breakdown (price * quantity at the
   item's own GST rate, shipping address decides CGST+SGST vs IGST).
2. aggregate: period totals across all invoices.
3. flatten_gstr1_rows: per-item sheet rows, rounded to paisa.
4. export_gstr1: repository-driven run that also stores an audit snapshot.

Totals keep full float precision; only flattened rows are rounded.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from storefront_gst.config.settings import settings
from storefront_gst.domain.models.gstr1 import (
    Gstr1Export,
    Gstr1ExportSnapshot,
    Gstr1Invoice,
    Gstr1Item,
    Gstr1Row,
    Gstr1Summary,
)
from storefront_gst.domain.models.order import OrderItemRecord, OrderRecord
from storefront_gst.domain.services.customer_display import customer_display_name
from storefront_gst.domain.services.jurisdiction import (
    classify_jurisdiction,
    place_of_supply_label,
)
from storefront_gst.domain.services.pricing_service import round_money
from storefront_gst.domain.services.tax_calculator import (
    calculate_tax_breakdown,
    resolve_gst_percentage,
)
from storefront_gst.infrastructure.db.repositories.order_repository import OrderRepository

logger = logging.getLogger("gstr1_service")


# ---------- Per-order invoice construction ----------


def invoice_number_for(order_id: str) -> str:
    return f"INV-{order_id[:8]}"


def _build_item(item: OrderItemRecord, shipping_address: str) -> Gstr1Item:
    product = item.product
    rate = resolve_gst_percentage(product.gst_percentage)
    item_total = item.quantity * float(item.price)
    breakdown = calculate_tax_breakdown(item_total, rate, shipping_address)

    return Gstr1Item(
        hsn_code=product.hsn_code or settings.DEFAULT_HSN_CODE,
        description=product.name,
        quantity=item.quantity,
        unit=settings.DEFAULT_UNIT,
        unit_price=float(item.price),
        rate=rate,
        taxable_value=breakdown.taxable_amount,
        cgst=breakdown.cgst,
        sgst=breakdown.sgst,
        igst=breakdown.igst,
        total_amount=item_total,
    )


def build_gstr1_invoice(order: OrderRecord) -> Gstr1Invoice:
    """
    Build the GSTR-1 invoice for one order.

    Items without a product record cannot be classified (no HSN / rate)
    and are left out with a warning.
    """
    jurisdiction = classify_jurisdiction(order.shipping_address)

    items: list[Gstr1Item] = []
    for idx, item in enumerate(order.items):
        if item.product is None:
            logger.warning(
                "Order %s item #%d has no product record; skipped in GSTR-1",
                order.id[:8],
                idx,
            )
            continue
        items.append(_build_item(item, order.shipping_address))

    return Gstr1Invoice(
        invoice_number=invoice_number_for(order.id),
        invoice_date=order.created_at.strftime("%d/%m/%Y"),
        customer_name=customer_display_name(order),
        customer_gstin=None,  # B2C storefront: buyers have no GSTIN on file
        place_of_supply=place_of_supply_label(jurisdiction),
        items=items,
    )


# ---------- Aggregation ----------


def aggregate(
    invoices: Iterable[Gstr1Invoice],
    period_from: date | None = None,
    period_to: date | None = None,
) -> Gstr1Summary:
    """Period totals; walks invoices and their items in list order."""
    invoice_count = 0
    total_taxable_value = 0.0
    total_cgst = 0.0
    total_sgst = 0.0
    total_igst = 0.0
    total_cess = 0.0

    for invoice in invoices:
        invoice_count += 1
        for item in invoice.items:
            total_taxable_value += item.taxable_value
            if item.cgst is not None:
                total_cgst += item.cgst
            if item.sgst is not None:
                total_sgst += item.sgst
            if item.igst is not None:
                total_igst += item.igst

    total_tax_amount = total_cgst + total_sgst + total_igst + total_cess

    return Gstr1Summary(
        invoice_count=invoice_count,
        total_taxable_value=total_taxable_value,
        total_cgst=total_cgst,
        total_sgst=total_sgst,
        total_igst=total_igst,
        total_cess=total_cess,
        total_tax_amount=total_tax_amount,
        total_invoice_value=total_taxable_value + total_tax_amount,
        period_from=period_from,
        period_to=period_to,
    )


# ---------- Flattened sheet rows ----------


def _head_rates(rate: float, intra_state: bool) -> tuple[float, float, float]:
    """(cgst_rate, sgst_rate, igst_rate)"""
    if intra_state:
        return rate / 2, rate / 2, 0.0
    return 0.0, 0.0, rate


def flatten_gstr1_rows(invoices: Iterable[Gstr1Invoice]) -> list[Gstr1Row]:
    rows: list[Gstr1Row] = []
    for invoice in invoices:
        for item in invoice.items:
            intra_state = item.cgst is not None
            cgst_rate, sgst_rate, igst_rate = _head_rates(item.rate, intra_state)
            rows.append(
                Gstr1Row(
                    invoice_number=invoice.invoice_number,
                    invoice_date=invoice.invoice_date,
                    customer_name=invoice.customer_name,
                    customer_gstin=invoice.customer_gstin,
                    place_of_supply=invoice.place_of_supply,
                    reverse_charge=invoice.reverse_charge,
                    invoice_type=invoice.invoice_type,
                    ecommerce_gstin=invoice.ecommerce_gstin,
                    hsn_code=item.hsn_code,
                    description=item.description,
                    quantity=item.quantity,
                    unit=item.unit,
                    unit_price=item.unit_price,
                    taxable_value=round_money(item.taxable_value),
                    cgst_rate=cgst_rate,
                    sgst_rate=sgst_rate,
                    igst_rate=igst_rate,
                    cgst_amount=round_money(item.cgst or 0.0),
                    sgst_amount=round_money(item.sgst or 0.0),
                    igst_amount=round_money(item.igst or 0.0),
                    total_amount=round_money(item.total_amount),
                )
            )
    return rows


# ---------- Export run ----------


def build_gstr1_export(
    orders: Iterable[OrderRecord],
    period_from: date | None = None,
    period_to: date | None = None,
) -> Gstr1Export:
    invoices = [build_gstr1_invoice(order) for order in orders]
    return Gstr1Export(
        invoices=invoices,
        summary=aggregate(invoices, period_from, period_to),
    )


def build_export_snapshot(export: Gstr1Export, export_date: date) -> Gstr1ExportSnapshot:
    summary = export.summary
    return Gstr1ExportSnapshot(
        export_date=export_date,
        period_from=summary.period_from or export_date,
        period_to=summary.period_to or export_date,
        total_taxable_value=round_money(summary.total_taxable_value),
        total_tax_amount=round_money(summary.total_tax_amount),
        total_invoice_value=round_money(summary.total_invoice_value),
        export_data=export.model_dump(mode="json"),
    )


async def export_gstr1(
    period_from: date,
    period_to: date,
    repo: OrderRepository,
    *,
    export_date: date | None = None,
) -> Gstr1Export:
    """
    Export GSTR-1 data for completed orders in [period_from, period_to]
    and persist an audit snapshot of the run.
    """
    if period_from > period_to:
        raise ValueError(f"GSTR-1 period start {period_from} is after end {period_to}")

    logger.info("Exporting GSTR-1 data from %s to %s", period_from, period_to)

    try:
        orders = await repo.list_completed_orders(period_from, period_to)
    except Exception:
        logger.exception("Failed to fetch orders for GSTR-1 export")
        raise

    if not orders:
        # Nothing to audit; empty runs are not stored.
        logger.info("No completed orders found between %s and %s", period_from, period_to)
        return Gstr1Export(summary=Gstr1Summary(period_from=period_from, period_to=period_to))

    export = build_gstr1_export(orders, period_from, period_to)
    snapshot = build_export_snapshot(export, export_date or date.today())

    try:
        await repo.save_gstr1_export(snapshot)
    except Exception:
        logger.exception("Failed to store GSTR-1 export snapshot")
        raise

    logger.info(
        "GSTR-1 export completed: %d invoices, taxable=%.2f, tax=%.2f",
        export.summary.invoice_count,
        export.summary.total_taxable_value,
        export.summary.total_tax_amount,
    )
    return export
