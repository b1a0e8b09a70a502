# app/router/owners_router.py
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends

from shared.core.store import DataStore
from shared.core.store_provider import get_store
from shared.helpers.contact_picker import ContactPicker, get_contact_picker

from ..crud import owners_crud as crud
from ..schemas.common_schemas import ContactDefaults
from ..schemas.owners_schemas import (
    OwnerCreate,
    OwnerListResponse,
    OwnerOut,
    OwnerRequest,
    OwnerUpdate,
)

router = APIRouter(prefix="/api/owners", tags=["owners"])


@router.get("/all", response_model=OwnerListResponse)
def owners_all(
    params: OwnerRequest = Depends(),
    store: DataStore = Depends(get_store),
):
    return crud.get_owners(store, params)


# defaults for the new-owner form
@router.get("/new", response_model=ContactDefaults)
def new_owner_form(picker: Optional[ContactPicker] = Depends(get_contact_picker)):
    return crud.new_owner_defaults(picker)


@router.get("/{owner_id}", response_model=OwnerOut)
def get_owner(owner_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_owner_by_id(store, owner_id)


@router.post("/", response_model=OwnerOut)
def create_owner(payload: OwnerCreate, store: DataStore = Depends(get_store)):
    return crud.create_owner(store, payload)


@router.put("/{owner_id}", response_model=OwnerOut)
def update_owner(owner_id: UUID, payload: OwnerUpdate, store: DataStore = Depends(get_store)):
    return crud.update_owner(store, owner_id, payload)
