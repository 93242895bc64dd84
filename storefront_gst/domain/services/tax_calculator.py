# storefront_gst/domain/services/tax_calculator.py
"""
GST breakdown primitive shared by cart pricing and GSTR-1 reporting.

Two directions, deliberately separate functions:

- calculate_tax_breakdown: amount already INCLUDES GST; extract it.
    taxable = amount / (1 + rate/100), tax = amount - taxable
- calculate_tax_on_exclusive_amount: amount EXCLUDES GST; add it on top.
    taxable = amount, tax = amount * rate/100

Intra-state supplies split the tax exactly in half (CGST/SGST);
inter-state supplies carry it all as IGST.

Arithmetic is plain float. Nothing here rounds; use
pricing_service.round_money / format_price for display.
"""

from __future__ import annotations

from storefront_gst.config.settings import settings
from storefront_gst.domain.models.tax import Jurisdiction, TaxBreakdown
from storefront_gst.domain.services.jurisdiction import classify_jurisdiction


def resolve_gst_percentage(gst_percentage: float | None) -> float:
    """None -> configured default (18). An explicit 0 stays 0."""
    if gst_percentage is None:
        return float(settings.DEFAULT_GST_PERCENTAGE)
    return float(gst_percentage)


def _split(taxable_amount: float, total_tax: float, jurisdiction: Jurisdiction) -> TaxBreakdown:
    if jurisdiction is Jurisdiction.INTRA_STATE:
        half = total_tax / 2
        return TaxBreakdown(
            jurisdiction=jurisdiction,
            taxable_amount=taxable_amount,
            total_tax=total_tax,
            cgst=half,
            sgst=half,
        )
    return TaxBreakdown(
        jurisdiction=jurisdiction,
        taxable_amount=taxable_amount,
        total_tax=total_tax,
        igst=total_tax,
    )


def calculate_tax_breakdown(
    amount: float,
    gst_percentage: float | None = None,
    shipping_address: str | None = "",
) -> TaxBreakdown:
    """
    Split a tax-inclusive amount into taxable value and GST.

    Inputs are not validated: negative amounts propagate arithmetically.
    """
    tax_rate = resolve_gst_percentage(gst_percentage) / 100
    amount = float(amount)
    taxable_amount = amount / (1 + tax_rate)
    total_tax = amount - taxable_amount
    return _split(taxable_amount, total_tax, classify_jurisdiction(shipping_address))


def calculate_tax_on_exclusive_amount(
    exclusive_amount: float,
    gst_percentage: float | None = None,
    shipping_address: str | None = "",
) -> TaxBreakdown:
    """GST to add on top of a tax-exclusive amount."""
    tax_rate = resolve_gst_percentage(gst_percentage) / 100
    taxable_amount = float(exclusive_amount)
    total_tax = taxable_amount * tax_rate
    return _split(taxable_amount, total_tax, classify_jurisdiction(shipping_address))
