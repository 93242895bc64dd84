# storefront_gst/domain/models/gstr1.py

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Gstr1Item(BaseModel):
    model_config = ConfigDict(frozen=True)

    hsn_code: str
    description: str
    quantity: int
    unit: str = "PCS"
    unit_price: float
    rate: float = Field(..., description="GST rate (e.g. 18.0)")
    taxable_value: float
    cgst: Optional[float] = None
    sgst: Optional[float] = None
    igst: Optional[float] = None
    total_amount: float = Field(..., description="Tax-inclusive line value")

    @property
    def tax_amount(self) -> float:
        return (self.cgst or 0.0) + (self.sgst or 0.0) + (self.igst or 0.0)


class Gstr1Invoice(BaseModel):
    model_config = ConfigDict(frozen=True)

    invoice_number: str
    invoice_date: str  # DD/MM/YYYY
    customer_name: str
    customer_gstin: Optional[str] = None
    place_of_supply: str
    reverse_charge: Literal["N", "Y"] = "N"
    invoice_type: str = "Regular"
    ecommerce_gstin: Optional[str] = None
    items: list[Gstr1Item] = Field(default_factory=list)

    @property
    def taxable_value(self) -> float:
        return sum(item.taxable_value for item in self.items)

    @property
    def tax_amount(self) -> float:
        return sum(item.tax_amount for item in self.items)

    @property
    def invoice_value(self) -> float:
        return self.taxable_value + self.tax_amount


class Gstr1Summary(BaseModel):
    model_config = ConfigDict(frozen=True)

    invoice_count: int = 0
    total_taxable_value: float = 0.0
    total_cgst: float = 0.0
    total_sgst: float = 0.0
    total_igst: float = 0.0
    total_cess: float = 0.0
    total_tax_amount: float = 0.0
    total_invoice_value: float = 0.0
    period_from: Optional[date] = None
    period_to: Optional[date] = None


class Gstr1Row(BaseModel):
    """One flattened line of the GSTR-1 export sheet (amounts rounded to paisa)."""

    model_config = ConfigDict(frozen=True)

    invoice_number: str
    invoice_date: str
    customer_name: str
    customer_gstin: Optional[str] = None
    place_of_supply: str
    reverse_charge: str
    invoice_type: str
    ecommerce_gstin: Optional[str] = None
    hsn_code: str
    description: str
    quantity: int
    unit: str
    unit_price: float
    discount: float = 0.0
    taxable_value: float
    cgst_rate: float
    sgst_rate: float
    igst_rate: float
    cgst_amount: float
    sgst_amount: float
    igst_amount: float
    cess_amount: float = 0.0
    total_amount: float


class Gstr1Export(BaseModel):
    model_config = ConfigDict(frozen=True)

    invoices: list[Gstr1Invoice] = Field(default_factory=list)
    summary: Gstr1Summary = Field(default_factory=Gstr1Summary)


class Gstr1ExportSnapshot(BaseModel):
    """Audit record persisted for every export run."""

    model_config = ConfigDict(frozen=True)

    export_date: date
    period_from: date
    period_to: date
    total_taxable_value: float
    total_tax_amount: float
    total_invoice_value: float
    export_data: dict[str, Any] = Field(default_factory=dict)
