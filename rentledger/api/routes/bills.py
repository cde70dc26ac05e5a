import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from rentledger.api.deps import get_store
from rentledger.core.auth import get_current_user
from rentledger.core.store import RecordStore
from rentledger.models.bill import Bill
from rentledger.schemas.bill import (
    BillChargeInput,
    BillChargesOut,
    BillCreate,
    BillOut,
    BillStatus,
    BillStatusUpdate,
    BillUpdate,
)
from rentledger.services.billing import compute_charges, NEGATIVE_CONSUMPTION

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bills", tags=["bills"])


def _charge_fields(charges_in: BillChargeInput) -> dict:
    """Inputs plus the derived elec_amount/total_amount, ready to persist."""
    charges = compute_charges(charges_in)
    if NEGATIVE_CONSUMPTION in charges.warnings:
        logger.warning(
            "electricity reading went backwards (%s -> %s); elec_amount=%s",
            charges_in.elec_prev_reading,
            charges_in.elec_curr_reading,
            charges.elec_amount,
        )
    return {
        **charges_in.model_dump(),
        "elec_amount": charges.elec_amount,
        "total_amount": charges.total_amount,
    }


@router.get("", response_model=List[BillOut])
def list_bills(
    store: RecordStore = Depends(get_store),
    tenant_id: Optional[str] = Query(None),
    status: Optional[BillStatus] = Query(None),
    year: Optional[int] = Query(None, ge=2000, le=2100),
    month: Optional[int] = Query(None, ge=1, le=12),
):
    """
    Bills, most recent billing period first.
    """
    return store.find(
        "bills",
        Bill.billing_year.desc(),
        Bill.billing_month.desc(),
        tenant_id=tenant_id,
        status=status,
        billing_year=year,
        billing_month=month,
    )


@router.post("/preview", response_model=BillChargesOut, dependencies=[Depends(get_current_user)])
def preview_bill(payload: BillChargeInput):
    """
    Live preview for the bill form; same computation as create/update.
    """
    return compute_charges(payload)


@router.get("/{bill_id}", response_model=BillOut)
def get_bill(bill_id: str, store: RecordStore = Depends(get_store)):
    bill = store.get("bills", bill_id)
    if not bill:
        raise HTTPException(status_code=404, detail="Bill not found")
    return bill


@router.post("", response_model=BillOut, status_code=201)
def create_bill(payload: BillCreate, store: RecordStore = Depends(get_store)):
    """
    Create an unpaid bill. unit_id comes from the tenant's current unit and
    rent_amount defaults to that unit's rent.
    """
    with store.transaction():
        tenant = store.get("tenants", payload.tenant_id)
        if not tenant:
            raise HTTPException(status_code=404, detail="Tenant not found")

        rent_amount = payload.rent_amount
        if rent_amount is None:
            rent_amount = tenant.unit.rent_amount

        charges_in = BillChargeInput(
            rent_amount=rent_amount,
            elec_prev_reading=payload.elec_prev_reading,
            elec_curr_reading=payload.elec_curr_reading,
            elec_rate=payload.elec_rate,
            water_amount=payload.water_amount,
        )
        bill = store.insert(
            "bills",
            {
                "tenant_id": tenant.id,
                "unit_id": tenant.unit_id,
                "billing_month": payload.billing_month,
                "billing_year": payload.billing_year,
                "notes": payload.notes,
                "status": "unpaid",
                "paid_at": None,
                **_charge_fields(charges_in),
            },
        )
    logger.info("bill %s created for tenant %s", bill.id, bill.tenant_id)
    return bill


@router.put("/{bill_id}", response_model=BillOut)
def update_bill(
    bill_id: str,
    payload: BillUpdate,
    store: RecordStore = Depends(get_store),
):
    """
    Replace period, charge inputs and notes; charges are recomputed.
    Tenant, unit and payment status are left as they are.
    """
    charges_in = BillChargeInput(**payload.model_dump(include=set(BillChargeInput.model_fields)))
    values = {
        "billing_month": payload.billing_month,
        "billing_year": payload.billing_year,
        "notes": payload.notes,
        **_charge_fields(charges_in),
    }
    with store.transaction():
        bill = store.update("bills", bill_id, values)
        if not bill:
            raise HTTPException(status_code=404, detail="Bill not found")
    logger.info("bill %s updated", bill_id)
    return bill


@router.patch("/{bill_id}/status", response_model=BillOut)
def set_bill_status(
    bill_id: str,
    payload: BillStatusUpdate,
    store: RecordStore = Depends(get_store),
):
    """
    Mark a bill paid (stamps paid_at) or unpaid (clears it).
    """
    if payload.paid:
        values = {"status": "paid", "paid_at": datetime.now(timezone.utc)}
    else:
        values = {"status": "unpaid", "paid_at": None}

    with store.transaction():
        bill = store.update("bills", bill_id, values)
        if not bill:
            raise HTTPException(status_code=404, detail="Bill not found")
    logger.info("bill %s marked %s", bill_id, values["status"])
    return bill


@router.delete("/{bill_id}", status_code=204)
def delete_bill(bill_id: str, store: RecordStore = Depends(get_store)):
    with store.transaction():
        if not store.delete("bills", bill_id):
            raise HTTPException(status_code=404, detail="Bill not found")
    logger.info("bill %s deleted", bill_id)
    return None
