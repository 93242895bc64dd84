"""Shared test fixtures for the storefront GST engine test suite."""

import asyncio
from datetime import datetime

import pytest

from storefront_gst.domain.models.order import (
    CustomerProfile,
    OrderItemRecord,
    OrderRecord,
    ProductRecord,
)

KARNATAKA_ADDRESS = "123 MG Road, Bengaluru, Karnataka 560001"
WEST_BENGAL_ADDRESS = "123 Park St, Kolkata, West Bengal 700016"
MAHARASHTRA_ADDRESS = "Flat 4, Andheri East, Mumbai, Maharashtra"


@pytest.fixture(scope="session")
def event_loop():
    """Use a single event loop for the entire test session."""
    loop = asyncio.new_event_loop()
    yield loop
    loop.close()


@pytest.fixture
def karnataka_order() -> OrderRecord:
    """Completed intra-state order: two lines, one without HSN code."""
    return OrderRecord(
        id="a1b2c3d4-0000-4000-8000-000000000001",
        user_id="u1u2u3u4-9999-4000-8000-000000000001",
        created_at=datetime(2025, 1, 15, 10, 30),
        status="completed",
        total=354.0,
        shipping_address=KARNATAKA_ADDRESS,
        delivery_price=0,
        payment_type="upi",
        profile=CustomerProfile(first_name="Asha", last_name="Rao", email="asha@example.com"),
        items=[
            OrderItemRecord(
                quantity=2,
                price=118,
                product=ProductRecord(name="Filter Coffee 250g", hsn_code="0901", gst_percentage=18),
            ),
            OrderItemRecord(
                quantity=1,
                price=118,
                product=ProductRecord(name="Steel Tumbler", gst_percentage=None),
            ),
        ],
    )


@pytest.fixture
def interstate_order() -> OrderRecord:
    """Completed inter-state order for a customer without a profile."""
    return OrderRecord(
        id="e5f6a7b8-0000-4000-8000-000000000002",
        user_id="deadbeef-1111-4000-8000-000000000002",
        created_at=datetime(2025, 1, 20, 18, 0),
        status="completed",
        total=577.0,
        shipping_address=MAHARASHTRA_ADDRESS,
        delivery_price=50,
        payment_type="cod",
        profile=None,
        items=[
            OrderItemRecord(
                quantity=1,
                price=472,
                product=ProductRecord(name="Silk Scarf", hsn_code="6214", gst_percentage=18),
            ),
            OrderItemRecord(
                quantity=1,
                price=105,
                product=ProductRecord(name="Incense Pack", hsn_code="3307", gst_percentage=5),
            ),
        ],
    )
