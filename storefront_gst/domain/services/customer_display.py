# storefront_gst/domain/services/customer_display.py

from __future__ import annotations

from dataclasses import dataclass

from storefront_gst.domain.models.order import OrderRecord


@dataclass(frozen=True)
class CustomerDisplayInfo:
    name: str
    email: str
    has_profile: bool


def placeholder_name(user_id: str) -> str:
    return f"Customer {user_id[:8]}"


def _full_name(order: OrderRecord) -> str:
    profile = order.profile
    if profile is None:
        return ""
    return f"{profile.first_name or ''} {profile.last_name or ''}".strip()


def customer_display_name(order: OrderRecord) -> str:
    """
    Name printed on GSTR-1 rows.

    Profile name if any, "Customer" for a nameless profile, otherwise a
    placeholder built from the user id.
    """
    if order.profile is None:
        return placeholder_name(order.user_id)
    return _full_name(order) or "Customer"


def customer_display_info(order: OrderRecord) -> CustomerDisplayInfo:
    """Name / email pair for order tables; falls back to email, then the placeholder."""
    profile = order.profile
    if profile is None:
        return CustomerDisplayInfo(
            name=placeholder_name(order.user_id),
            email="No email",
            has_profile=False,
        )

    email = profile.email if profile.email and "@" in profile.email else None
    name = _full_name(order) or email or placeholder_name(order.user_id)

    return CustomerDisplayInfo(
        name=name,
        email=email or "No email",
        has_profile=bool(profile.first_name or profile.last_name or email),
    )
