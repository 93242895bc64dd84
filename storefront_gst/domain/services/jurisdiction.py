# storefront_gst/domain/services/jurisdiction.py
"""
Home-state detection for choosing CGST+SGST vs IGST.

The shipping address is free text, so this is a substring heuristic:
any case-insensitive occurrence of a home-state keyword makes the supply
intra-state. It will also match addresses that merely mention the state
(e.g. in a landmark note); callers that hold a structured state code
should classify with that instead and pass the result through.
"""

from __future__ import annotations

from storefront_gst.config.settings import settings
from storefront_gst.domain.models.tax import Jurisdiction


def classify_jurisdiction(address: str | None) -> Jurisdiction:
    """Classify a shipping address; empty or unknown -> INTER_STATE."""
    if not address:
        return Jurisdiction.INTER_STATE

    lowered = address.lower()
    if any(keyword.lower() in lowered for keyword in settings.HOME_STATE_KEYWORDS):
        return Jurisdiction.INTRA_STATE
    return Jurisdiction.INTER_STATE


def place_of_supply_label(jurisdiction: Jurisdiction) -> str:
    """'Karnataka' / 'Outside Karnataka' as printed on GSTR-1 rows."""
    if jurisdiction is Jurisdiction.INTRA_STATE:
        return settings.HOME_STATE_NAME
    return f"Outside {settings.HOME_STATE_NAME}"
