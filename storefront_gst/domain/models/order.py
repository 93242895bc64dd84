# storefront_gst/domain/models/order.py
"""
Order snapshots as handed over by the order-persistence layer.

Only the fields the reporting services read are modelled; anything else
on the stored record is ignored.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CustomerProfile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class ProductRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    description: Optional[str] = None
    hsn_code: Optional[str] = None
    gst_percentage: Optional[float] = None


class OrderItemRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    quantity: int
    price: float  # unit price charged, tax-inclusive
    product: Optional[ProductRecord] = None


class OrderRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    user_id: str
    created_at: datetime
    status: str = "pending"
    total: float = 0.0  # stored grand total, source of truth for reconciliation
    shipping_address: str = ""
    delivery_price: Optional[float] = None
    payment_type: Optional[str] = None
    profile: Optional[CustomerProfile] = None
    items: list[OrderItemRecord] = Field(default_factory=list)
