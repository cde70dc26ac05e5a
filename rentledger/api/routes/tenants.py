import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from rentledger.api.deps import get_store
from rentledger.core.store import RecordStore
from rentledger.models.tenant import Tenant
from rentledger.models.unit import Unit
from rentledger.schemas.tenant import TenantCreate, TenantUpdate, TenantOut, TenantStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("", response_model=List[TenantOut])
def list_tenants(
    store: RecordStore = Depends(get_store),
    status: Optional[TenantStatus] = Query(None),
    building_id: Optional[str] = Query(None, description="Filter by the building of the tenant's unit"),
):
    q = store.query("tenants")
    if status:
        q = q.filter(Tenant.status == status)
    if building_id:
        q = q.join(Unit, Tenant.unit_id == Unit.id).filter(Unit.building_id == building_id)
    return store.all(q.order_by(Tenant.name), "tenants")


@router.get("/{tenant_id}", response_model=TenantOut)
def get_tenant(tenant_id: str, store: RecordStore = Depends(get_store)):
    tenant = store.get("tenants", tenant_id)
    if not tenant:
        raise HTTPException(status_code=404, detail="Tenant not found")
    return tenant


@router.post("", response_model=TenantOut, status_code=201)
def create_tenant(payload: TenantCreate, store: RecordStore = Depends(get_store)):
    """
    Create a tenant and mark their unit occupied, in one transaction.
    """
    with store.transaction():
        if not store.get("units", payload.unit_id):
            raise HTTPException(status_code=404, detail="Unit not found")
        tenant = store.insert("tenants", payload.model_dump())
        store.update("units", payload.unit_id, {"status": "occupied"})
    logger.info("tenant %s moved into unit %s", tenant.id, tenant.unit_id)
    return tenant


@router.put("/{tenant_id}", response_model=TenantOut)
def update_tenant(
    tenant_id: str,
    payload: TenantUpdate,
    store: RecordStore = Depends(get_store),
):
    """
    Replace a tenant's details. Unit status is not touched here; it only
    changes when a tenant is created or deleted.
    """
    with store.transaction():
        if not store.get("units", payload.unit_id):
            raise HTTPException(status_code=404, detail="Unit not found")
        tenant = store.update("tenants", tenant_id, payload.model_dump())
        if not tenant:
            raise HTTPException(status_code=404, detail="Tenant not found")
    logger.info("tenant %s updated", tenant_id)
    return tenant


@router.delete("/{tenant_id}", status_code=204)
def delete_tenant(tenant_id: str, store: RecordStore = Depends(get_store)):
    """
    Delete a tenant (and their bills) and mark the unit vacant, in one
    transaction so the unit can't be left occupied by nobody.
    """
    with store.transaction():
        tenant = store.get("tenants", tenant_id)
        if not tenant:
            raise HTTPException(status_code=404, detail="Tenant not found")
        unit_id = tenant.unit_id
        store.delete("tenants", tenant_id)
        store.update("units", unit_id, {"status": "vacant"})
    logger.info("tenant %s deleted, unit %s vacant", tenant_id, unit_id)
    return None
