# app/router/tenants_router.py
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from shared.core.store import DataStore
from shared.core.store_provider import get_store
from shared.helpers.contact_picker import ContactPicker, get_contact_picker

from ..crud import tenants_crud as crud
from ..schemas.common_schemas import ContactDefaults
from ..schemas.tenants_schemas import (
    TenantCreate,
    TenantListResponse,
    TenantOut,
    TenantRequest,
    TenantUpdate,
)

router = APIRouter(prefix="/api/tenants", tags=["tenants"])

# ------------all


@router.get("/all", response_model=TenantListResponse)
def tenants_all(
    params: TenantRequest = Depends(),
    store: DataStore = Depends(get_store),
):
    return crud.get_tenants(store, params)


@router.get("/new", response_model=ContactDefaults)
def new_tenant_form(picker: Optional[ContactPicker] = Depends(get_contact_picker)):
    return crud.new_tenant_defaults(picker)


@router.get("/{tenant_id}", response_model=TenantOut)
def get_tenant(tenant_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_tenant_by_id(store, tenant_id)


# ----------------- Create Tenant -----------------
@router.post("/", response_model=TenantOut)
def create_tenant(payload: TenantCreate, store: DataStore = Depends(get_store)):
    return crud.create_tenant(store, payload)


# ----------------- Update Tenant -----------------
@router.put("/{tenant_id}", response_model=TenantOut)
def update_tenant(tenant_id: UUID, payload: TenantUpdate, store: DataStore = Depends(get_store)):
    return crud.update_tenant(store, tenant_id, payload)
