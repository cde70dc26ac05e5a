import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import selectinload

from rentledger.api.deps import get_store
from rentledger.core.store import RecordStore
from rentledger.models.building import Building
from rentledger.schemas.building import (
    BuildingCreate,
    BuildingUpdate,
    BuildingOut,
    BuildingDetailOut,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/buildings", tags=["buildings"])


@router.get("", response_model=List[BuildingOut])
def list_buildings(store: RecordStore = Depends(get_store)):
    """Newest first."""
    return store.find("buildings", Building.created_at.desc())


@router.get("/{building_id}", response_model=BuildingDetailOut)
def get_building(building_id: str, store: RecordStore = Depends(get_store)):
    """
    For the building detail page:
    - building fields
    - all units in the building
    """
    building = store.first(
        store.query("buildings")
        .options(selectinload(Building.units))
        .filter(Building.id == building_id),
        "buildings",
    )
    if not building:
        raise HTTPException(status_code=404, detail="Building not found")
    return building


@router.post("", response_model=BuildingOut, status_code=201)
def create_building(payload: BuildingCreate, store: RecordStore = Depends(get_store)):
    with store.transaction():
        building = store.insert("buildings", payload.model_dump())
    logger.info("building %s created", building.id)
    return building


@router.put("/{building_id}", response_model=BuildingOut)
def update_building(
    building_id: str,
    payload: BuildingUpdate,
    store: RecordStore = Depends(get_store),
):
    with store.transaction():
        building = store.update("buildings", building_id, payload.model_dump())
        if not building:
            raise HTTPException(status_code=404, detail="Building not found")
    logger.info("building %s updated", building_id)
    return building


@router.delete("/{building_id}", status_code=204)
def delete_building(building_id: str, store: RecordStore = Depends(get_store)):
    """
    Delete a building and everything under it (units, tenants, bills).
    """
    with store.transaction():
        if not store.delete("buildings", building_id):
            raise HTTPException(status_code=404, detail="Building not found")
    logger.info("building %s deleted", building_id)
    return None
