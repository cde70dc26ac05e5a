from pydantic import BaseModel, Field
from typing import List
from datetime import datetime

from rentledger.schemas.unit import UnitOut  # so BuildingDetailOut can include units


class BuildingBase(BaseModel):
    name: str = Field(min_length=1)
    address: str = Field(min_length=1)


class BuildingCreate(BuildingBase):
    pass


class BuildingUpdate(BuildingBase):
    """Full replace of the editable fields."""
    pass


class BuildingOut(BuildingBase):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class BuildingDetailOut(BuildingOut):
    units: List[UnitOut] = []
