from pydantic import BaseModel, Field, field_validator
from decimal import Decimal
from typing import Literal, Optional

UnitStatus = Literal["occupied", "vacant"]


class UnitBase(BaseModel):
    unit_number: str = Field(min_length=1)
    floor: Optional[int] = None
    rent_amount: Decimal = Field(default=Decimal("0"), ge=0)
    status: UnitStatus = "vacant"

    @field_validator("floor", mode="before")
    @classmethod
    def blank_floor_is_none(cls, v):
        # Number inputs left empty arrive as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class UnitCreate(UnitBase):
    building_id: str


class UnitUpdate(UnitBase):
    """Full replace; the building a unit belongs to does not change."""
    pass


class UnitOut(UnitBase):
    id: str
    building_id: str
    building_name: Optional[str] = None

    class Config:
        from_attributes = True
