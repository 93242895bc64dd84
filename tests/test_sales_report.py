"""Tests for the order-level sales register."""

from datetime import datetime

import pytest

from storefront_gst.domain.models.order import OrderItemRecord, OrderRecord, ProductRecord
from storefront_gst.domain.services.sales_report import build_sales_report, build_sales_row


class TestSalesRow:

    def test_profile_order(self, karnataka_order):
        row = build_sales_row(karnataka_order)
        assert row.order_id == "a1b2c3d4"
        assert row.order_date == "15/01/2025"
        assert row.customer_name == "Asha Rao"
        assert row.customer_email == "asha@example.com"
        assert row.items == "Filter Coffee 250g, Steel Tumbler"
        assert row.hsn_codes == "0901, N/A"
        assert row.quantity == 3
        assert row.amount == pytest.approx(300.0)
        assert row.tax == pytest.approx(54.0)
        assert row.total == 354.0
        assert row.status == "completed"
        assert row.gst_breakdown == "Filter Coffee 250g: 18% GST; Steel Tumbler: 18% GST"

    def test_order_without_profile(self, interstate_order):
        row = build_sales_row(interstate_order)
        assert row.customer_name == "N/A"
        assert row.customer_email == "N/A"
        assert row.gst_breakdown == "Silk Scarf: 18% GST; Incense Pack: 5% GST"

    def test_multiline_address_and_nil_rated(self):
        order = OrderRecord(
            id="0badf00d-1",
            user_id="u",
            created_at=datetime(2025, 4, 1),
            status="shipped",
            total=40,
            shipping_address="12 Lake View\nUdaipur\nRajasthan",
            items=[OrderItemRecord(quantity=2, price=20, product=ProductRecord(name="Salt", gst_percentage=0))],
        )
        row = build_sales_row(order)
        assert row.shipping_address == "12 Lake View Udaipur Rajasthan"
        assert row.tax == 0
        assert row.amount == 40
        assert row.gst_breakdown == "No GST"

    def test_report_keeps_input_order(self, karnataka_order, interstate_order):
        rows = build_sales_report([interstate_order, karnataka_order])
        assert [r.order_id for r in rows] == ["e5f6a7b8", "a1b2c3d4"]
