# storefront_gst/domain/models/tax.py

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Jurisdiction(str, Enum):
    INTRA_STATE = "intra_state"  # CGST + SGST
    INTER_STATE = "inter_state"  # IGST


class TaxBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    jurisdiction: Jurisdiction
    taxable_amount: float = Field(..., description="Value before GST")
    total_tax: float = Field(..., description="Total GST on the taxable amount")
    cgst: Optional[float] = None
    sgst: Optional[float] = None
    igst: Optional[float] = None

    @model_validator(mode="after")
    def _one_split_only(self) -> "TaxBreakdown":
        has_pair = self.cgst is not None and self.sgst is not None
        has_igst = self.igst is not None
        if has_pair == has_igst or (self.cgst is None) != (self.sgst is None):
            raise ValueError("TaxBreakdown needs either cgst+sgst or igst, not both")
        return self

    @property
    def is_intra_state(self) -> bool:
        return self.jurisdiction is Jurisdiction.INTRA_STATE
