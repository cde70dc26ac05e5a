from pydantic import BaseModel
from decimal import Decimal
from typing import Any, Dict, List

from rentledger.schemas.bill import BillOut


class DashboardStats(BaseModel):
    """Folded bills and units; overdue_bills holds the input rows as given."""
    monthly_income: Dict[int, Decimal]
    total_paid: Decimal = Decimal("0")
    total_unpaid: Decimal = Decimal("0")
    occupied: int = 0
    vacant: int = 0
    overdue_bills: List[Any] = []


class DashboardOut(BaseModel):
    """Everything the dashboard page renders for one year."""
    year: int
    monthly_income: Dict[int, Decimal]  # keys 1..12, always present
    total_paid: Decimal = Decimal("0")
    total_unpaid: Decimal = Decimal("0")
    occupied: int = 0
    vacant: int = 0
    overdue_bills: List[BillOut] = []  # oldest period first, at most OVERDUE_BILLS_LIMIT
    building_count: int = 0
    active_tenant_count: int = 0
