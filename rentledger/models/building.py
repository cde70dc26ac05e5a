import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from rentledger.core.database import Base


class Building(Base):
    __tablename__ = "buildings"

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, nullable=False, index=True)

    name = Column(String, nullable=False)
    address = Column(String, nullable=False)

    # ONE building has MANY units; deleting the building removes them
    units = relationship("Unit", back_populates="building", cascade="all, delete-orphan")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
