from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from rentledger.core.config import settings
from rentledger.schemas.fields import blank_to_none

BillStatus = Literal["unpaid", "paid"]


def _default_elec_rate() -> Decimal:
    return Decimal(str(settings.DEFAULT_ELEC_RATE))


class BillChargeInput(BaseModel):
    """The five numbers a bill's charges are computed from."""
    rent_amount: Decimal = Field(ge=0)
    elec_prev_reading: Decimal = Field(ge=0)
    elec_curr_reading: Decimal = Field(ge=0)  # may be below prev; see BillChargesOut.warnings
    elec_rate: Decimal = Field(ge=0)
    water_amount: Decimal = Field(ge=0)


class BillChargesOut(BaseModel):
    consumption: Decimal
    elec_amount: Decimal
    total_amount: Decimal
    warnings: List[str] = []


class BillPeriod(BaseModel):
    billing_month: int = Field(ge=1, le=12)
    billing_year: int = Field(ge=2000, le=2100)
    notes: Optional[str] = None

    @field_validator("notes", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class BillCreate(BillPeriod):
    tenant_id: str = Field(min_length=1)
    # None -> the tenant's unit rent
    rent_amount: Optional[Decimal] = Field(default=None, ge=0)
    elec_prev_reading: Decimal = Field(default=Decimal("0"), ge=0)
    elec_curr_reading: Decimal = Field(default=Decimal("0"), ge=0)
    elec_rate: Decimal = Field(default_factory=_default_elec_rate, ge=0)
    water_amount: Decimal = Field(default=Decimal("0"), ge=0)


class BillUpdate(BillChargeInput, BillPeriod):
    """
    Full replace of period, charge inputs and notes.
    tenant_id and unit_id are fixed at creation and cannot be edited.
    """
    pass


class BillStatusUpdate(BaseModel):
    paid: bool


class BillOut(BaseModel):
    id: str
    tenant_id: str
    unit_id: str
    billing_month: int
    billing_year: int
    rent_amount: Decimal
    elec_prev_reading: Decimal
    elec_curr_reading: Decimal
    elec_rate: Decimal
    elec_amount: Decimal
    water_amount: Decimal
    total_amount: Decimal
    status: BillStatus
    paid_at: Optional[datetime] = None
    notes: Optional[str] = None
    created_at: datetime

    # Denormalized context for list views
    tenant_name: Optional[str] = None
    unit_number: Optional[str] = None
    building_name: Optional[str] = None

    class Config:
        from_attributes = True
