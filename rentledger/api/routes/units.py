import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from rentledger.api.deps import get_store
from rentledger.core.store import RecordStore
from rentledger.models.unit import Unit
from rentledger.schemas.unit import UnitCreate, UnitUpdate, UnitOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/units", tags=["units"])


@router.get("", response_model=List[UnitOut])
def list_units(
    store: RecordStore = Depends(get_store),
    building_id: Optional[str] = Query(None, description="Filter by building ID"),
):
    """
    Get all units, optionally filtered by building_id.
    """
    return store.find("units", Unit.unit_number, building_id=building_id)


@router.get("/{unit_id}", response_model=UnitOut)
def get_unit(unit_id: str, store: RecordStore = Depends(get_store)):
    unit = store.get("units", unit_id)
    if not unit:
        raise HTTPException(status_code=404, detail="Unit not found")
    return unit


@router.post("", response_model=UnitOut, status_code=201)
def create_unit(payload: UnitCreate, store: RecordStore = Depends(get_store)):
    with store.transaction():
        if not store.get("buildings", payload.building_id):
            raise HTTPException(status_code=404, detail="Building not found")
        unit = store.insert("units", payload.model_dump())
    logger.info("unit %s created in building %s", unit.id, unit.building_id)
    return unit


@router.put("/{unit_id}", response_model=UnitOut)
def update_unit(
    unit_id: str,
    payload: UnitUpdate,
    store: RecordStore = Depends(get_store),
):
    """
    Replace a unit's number, floor, rent and status.
    """
    with store.transaction():
        unit = store.update("units", unit_id, payload.model_dump())
        if not unit:
            raise HTTPException(status_code=404, detail="Unit not found")
    logger.info("unit %s updated", unit_id)
    return unit


@router.delete("/{unit_id}", status_code=204)
def delete_unit(unit_id: str, store: RecordStore = Depends(get_store)):
    """
    Delete a unit together with its tenants and bills.
    """
    with store.transaction():
        if not store.delete("units", unit_id):
            raise HTTPException(status_code=404, detail="Unit not found")
    logger.info("unit %s deleted", unit_id)
    return None
