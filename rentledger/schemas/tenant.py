from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from rentledger.schemas.fields import blank_to_none

TenantStatus = Literal["active", "inactive"]


class TenantBase(BaseModel):
    unit_id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    move_in_date: date
    move_out_date: Optional[date] = None
    status: TenantStatus = "active"

    @field_validator("phone", "email", "move_out_date", mode="before")
    @classmethod
    def optional_blank(cls, v):
        return blank_to_none(v)


class TenantCreate(TenantBase):
    pass


class TenantUpdate(TenantBase):
    """Full replace of the editable fields."""
    pass


class TenantOut(TenantBase):
    id: str
    # email is stored as text; don't re-validate what is already persisted
    email: Optional[str] = None
    unit_number: Optional[str] = None
    unit_rent_amount: Optional[Decimal] = None
    building_id: Optional[str] = None
    building_name: Optional[str] = None
    building_address: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
