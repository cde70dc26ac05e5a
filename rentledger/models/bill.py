import uuid

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Numeric, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from rentledger.core.database import Base


class Bill(Base):
    __tablename__ = "bills"
    __table_args__ = (
        CheckConstraint("billing_month BETWEEN 1 AND 12", name="ck_bills_billing_month"),
        CheckConstraint("billing_year BETWEEN 2000 AND 2100", name="ck_bills_billing_year"),
    )

    id = Column(String, primary_key=True, index=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, nullable=False, index=True)

    tenant_id = Column(String, ForeignKey("tenants.id", ondelete="CASCADE"), nullable=False, index=True)
    tenant = relationship("Tenant", back_populates="bills")

    # Copied from the tenant at creation time; never re-derived on edit
    unit_id = Column(String, ForeignKey("units.id", ondelete="CASCADE"), nullable=False, index=True)
    unit = relationship("Unit", back_populates="bills")

    # Billing period
    billing_month = Column(Integer, nullable=False, index=True)  # 1..12
    billing_year = Column(Integer, nullable=False, index=True)  # 2000..2100

    # Charge inputs (unscaled Numeric keeps exact decimal results)
    rent_amount = Column(Numeric, nullable=False, default=0)
    elec_prev_reading = Column(Numeric, nullable=False, default=0)
    elec_curr_reading = Column(Numeric, nullable=False, default=0)
    elec_rate = Column(Numeric, nullable=False, default=0)
    water_amount = Column(Numeric, nullable=False, default=0)

    # Derived by services.billing.compute_charges, never user-entered
    elec_amount = Column(Numeric, nullable=False, default=0)
    total_amount = Column(Numeric, nullable=False, default=0)

    status = Column(String, nullable=False, default="unpaid", index=True)  # unpaid / paid
    paid_at = Column(DateTime(timezone=True), nullable=True)  # set together with status=paid
    notes = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Denormalized names so bill lists render without further lookups
    @property
    def tenant_name(self):
        return self.tenant.name if self.tenant is not None else None

    @property
    def unit_number(self):
        return self.unit.unit_number if self.unit is not None else None

    @property
    def building_name(self):
        return self.unit.building_name if self.unit is not None else None
