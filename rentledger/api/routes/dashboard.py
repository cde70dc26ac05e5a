"""
Dashboard endpoint.
Fetches one year's bills, every unit and the oldest unpaid bills, then hands
them to services.dashboard for folding.
"""
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query

from rentledger.api.deps import get_store
from rentledger.core.config import settings
from rentledger.core.store import RecordStore
from rentledger.models.bill import Bill
from rentledger.schemas.bill import BillOut
from rentledger.schemas.dashboard import DashboardOut
from rentledger.services.dashboard import aggregate_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardOut)
def get_dashboard(
    store: RecordStore = Depends(get_store),
    year: Optional[int] = Query(None, ge=2000, le=2100, description="Defaults to the current year"),
):
    if year is None:
        year = datetime.now(timezone.utc).year

    year_bills = store.find("bills", Bill.billing_month, billing_year=year)
    units = store.find("units")
    # Store order (created_at) breaks ties within the same period
    unpaid_bills = store.find(
        "bills",
        Bill.billing_year,
        Bill.billing_month,
        Bill.created_at,
        status="unpaid",
    )

    stats = aggregate_dashboard(
        year_bills,
        units,
        unpaid_bills,
        limit=settings.OVERDUE_BILLS_LIMIT,
    )

    buildings = store.find("buildings")
    active_tenants = store.find("tenants", status="active")

    return DashboardOut(
        year=year,
        monthly_income=stats.monthly_income,
        total_paid=stats.total_paid,
        total_unpaid=stats.total_unpaid,
        occupied=stats.occupied,
        vacant=stats.vacant,
        overdue_bills=[BillOut.model_validate(b) for b in stats.overdue_bills],
        building_count=len(buildings),
        active_tenant_count=len(active_tenants),
    )
