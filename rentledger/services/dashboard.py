"""
Dashboard aggregation: folds a year's bills and the owner's units into the
numbers shown on the dashboard. Pure; callers do the fetching.
"""
from decimal import Decimal
from typing import Any, Iterable, List

from rentledger.schemas.dashboard import DashboardStats

OVERDUE_LIMIT = 10


def _period(bill) -> tuple:
    return (bill.billing_year, bill.billing_month)


def oldest_unpaid(unpaid_bills: Iterable[Any], limit: int = OVERDUE_LIMIT) -> List[Any]:
    """Unpaid bills oldest period first; sorted() is stable so ties keep store order."""
    ordered = sorted((b for b in unpaid_bills if b.status == "unpaid"), key=_period)
    return ordered[:limit]


def aggregate_dashboard(
    year_bills: Iterable[Any],
    units: Iterable[Any],
    unpaid_bills: Iterable[Any] = (),
    limit: int = OVERDUE_LIMIT,
) -> DashboardStats:
    """
    year_bills:   every bill of the target year, any status
    units:        every unit of the owner
    unpaid_bills: unpaid bills of any year, with tenant/unit/building context
    """
    monthly_income = {m: Decimal("0") for m in range(1, 13)}
    total_paid = Decimal("0")
    total_unpaid = Decimal("0")

    for b in year_bills:
        amount = b.total_amount if isinstance(b.total_amount, Decimal) else Decimal(str(b.total_amount))
        if b.status == "paid":
            total_paid += amount
            if b.billing_month in monthly_income:
                monthly_income[b.billing_month] += amount
        elif b.status == "unpaid":
            total_unpaid += amount

    occupied = 0
    vacant = 0
    for u in units:
        if u.status == "occupied":
            occupied += 1
        elif u.status == "vacant":
            vacant += 1

    return DashboardStats(
        monthly_income=monthly_income,
        total_paid=total_paid,
        total_unpaid=total_unpaid,
        occupied=occupied,
        vacant=vacant,
        overdue_bills=oldest_unpaid(unpaid_bills, limit),
    )
