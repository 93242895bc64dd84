# storefront_gst/domain/models/pricing.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Catalog snapshot used for price calculation. Prices are tax-inclusive."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    price: float
    discounted_price: Optional[float] = None
    gst_percentage: Optional[float] = None
    name: Optional[str] = None
    hsn_code: Optional[str] = None


class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int = 1


class PriceCalculationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_price: float = Field(..., description="Unit list price")
    discount_amount: float = Field(..., description="Unit discount (price - discounted_price)")
    discounted_price: float = Field(..., description="Unit effective price")
    taxable_amount: float = Field(..., description="Line taxable value")
    tax_amount: float = Field(..., description="Line GST")
    final_price: float = Field(..., description="Line total, tax-inclusive")
    gst_percentage: float


class OrderTotals(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_base_amount: float = 0.0
    total_discount_amount: float = 0.0
    total_taxable_amount: float = 0.0
    total_tax_amount: float = 0.0
    total_final_price: float = 0.0
    delivery_price: float = 0.0
    grand_total: float = 0.0
