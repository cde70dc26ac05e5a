import uuid

from sqlalchemy import Column, String, Integer, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from rentledger.core.database import Base


class Unit(Base):
    __tablename__ = "units"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, nullable=False, index=True)

    building_id = Column(String, ForeignKey("buildings.id", ondelete="CASCADE"), nullable=False, index=True)
    building = relationship("Building", back_populates="units")
    tenants = relationship("Tenant", back_populates="unit", cascade="all, delete-orphan")
    bills = relationship("Bill", back_populates="unit", cascade="all, delete-orphan")

    unit_number = Column(String, nullable=False, index=True)  # "101", "2B"; unique by convention only
    floor = Column(Integer, nullable=True)
    rent_amount = Column(Numeric, nullable=False, default=0)  # Monthly rent
    status = Column(String, nullable=False, default="vacant")  # occupied / vacant

    @property
    def building_name(self):
        return self.building.name if self.building is not None else None
