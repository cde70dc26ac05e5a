import uuid

from sqlalchemy import Column, String, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from rentledger.core.database import Base


class Tenant(Base):
    __tablename__ = "tenants"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, nullable=False, index=True)

    unit_id = Column(String, ForeignKey("units.id", ondelete="CASCADE"), nullable=False, index=True)
    unit = relationship("Unit", back_populates="tenants")
    bills = relationship("Bill", back_populates="tenant", cascade="all, delete-orphan")

    name = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    move_in_date = Column(Date, nullable=False)
    move_out_date = Column(Date, nullable=True)
    status = Column(String, nullable=False, default="active", index=True)  # active / inactive

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Unit/building context for list and detail views
    @property
    def unit_number(self):
        return self.unit.unit_number if self.unit is not None else None

    @property
    def unit_rent_amount(self):
        return self.unit.rent_amount if self.unit is not None else None

    @property
    def building_id(self):
        return self.unit.building_id if self.unit is not None else None

    @property
    def building_name(self):
        return self.unit.building_name if self.unit is not None else None

    @property
    def building_address(self):
        if self.unit is None or self.unit.building is None:
            return None
        return self.unit.building.address
