"""Tests for customer name / email display fallbacks."""

from storefront_gst.domain.models.order import CustomerProfile
from storefront_gst.domain.services.customer_display import (
    customer_display_info,
    customer_display_name,
)


class TestCustomerDisplay:

    def test_full_name(self, karnataka_order):
        assert customer_display_name(karnataka_order) == "Asha Rao"
        info = customer_display_info(karnataka_order)
        assert info.name == "Asha Rao"
        assert info.email == "asha@example.com"
        assert info.has_profile

    def test_no_profile_uses_user_id_prefix(self, interstate_order):
        assert customer_display_name(interstate_order) == "Customer deadbeef"
        info = customer_display_info(interstate_order)
        assert info.name == "Customer deadbeef"
        assert info.email == "No email"
        assert not info.has_profile

    def test_only_last_name(self, karnataka_order):
        order = karnataka_order.model_copy(update={"profile": CustomerProfile(last_name="Iyer")})
        assert customer_display_name(order) == "Iyer"

    def test_email_fallback_for_tables(self, karnataka_order):
        order = karnataka_order.model_copy(update={"profile": CustomerProfile(email="buyer@shop.in")})
        assert customer_display_name(order) == "Customer"
        info = customer_display_info(order)
        assert info.name == "buyer@shop.in"
        assert info.has_profile

    def test_invalid_email_ignored(self, karnataka_order):
        order = karnataka_order.model_copy(update={"profile": CustomerProfile(email="not-an-email")})
        info = customer_display_info(order)
        assert info.name == "Customer u1u2u3u4"
        assert info.email == "No email"
        assert not info.has_profile
