# app/router/properties_router.py
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends

from shared.core.store import DataStore
from shared.core.store_provider import get_store

from ..crud import properties_crud as crud
from ..schemas.properties_schemas import (
    PropertyCreate,
    PropertyFormOptions,
    PropertyListResponse,
    PropertyOut,
    PropertyRequest,
    PropertyUpdate,
)

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("/all", response_model=PropertyListResponse)
def properties_all(
    params: PropertyRequest = Depends(),
    store: DataStore = Depends(get_store),
):
    return crud.get_properties(store, params)


@router.get("/form-options", response_model=PropertyFormOptions)
def property_form_options(store: DataStore = Depends(get_store)):
    return crud.get_property_form_options(store)


@router.get("/by-owner/{owner_id}", response_model=List[PropertyOut])
def properties_by_owner(owner_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_properties_by_owner(store, owner_id)


@router.get("/{property_id}", response_model=PropertyOut)
def get_property(property_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_property_by_id(store, property_id)


# ----------------- Create Property -----------------
@router.post("/", response_model=PropertyOut)
def create_property(payload: PropertyCreate, store: DataStore = Depends(get_store)):
    return crud.create_property(store, payload)


# ----------------- Update Property -----------------
@router.put("/{property_id}", response_model=PropertyOut)
def update_property(
    property_id: UUID,
    payload: PropertyUpdate,
    store: DataStore = Depends(get_store),
):
    return crud.update_property(store, property_id, payload)
