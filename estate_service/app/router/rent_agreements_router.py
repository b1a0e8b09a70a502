# app/router/rent_agreements_router.py
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from shared.core.store import DataStore
from shared.core.store_provider import get_store

from ..crud import rent_agreements_crud as crud
from ..schemas.rent_agreements_schemas import (
    ExpireLapsedResult,
    PropertyOwnerLookup,
    RentAgreementCreate,
    RentAgreementFormOptions,
    RentAgreementListResponse,
    RentAgreementOut,
    RentAgreementRequest,
    RentAgreementUpdate,
)

router = APIRouter(prefix="/api/rent-agreements", tags=["rent-agreements"])


@router.get("/all", response_model=RentAgreementListResponse)
def rent_agreements_all(
    params: RentAgreementRequest = Depends(),
    store: DataStore = Depends(get_store),
):
    return crud.get_rent_agreements(store, params)


@router.get("/form-options", response_model=RentAgreementFormOptions)
def rent_agreement_form_options(
    owner_id: Optional[UUID] = Query(None),
    store: DataStore = Depends(get_store),
):
    return crud.get_rent_agreement_form_options(store, owner_id)


# pre-selects the owner once a property is picked
@router.get("/owner-for-property/{property_id}", response_model=PropertyOwnerLookup)
def owner_for_property(property_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_owner_for_property(store, property_id)


@router.post("/expire-lapsed", response_model=ExpireLapsedResult)
def expire_lapsed(store: DataStore = Depends(get_store)):
    return crud.expire_lapsed_agreements(store)


@router.get("/{agreement_id}", response_model=RentAgreementOut)
def get_rent_agreement(agreement_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_rent_agreement_by_id(store, agreement_id)


@router.post("/", response_model=RentAgreementOut)
def create_rent_agreement(payload: RentAgreementCreate, store: DataStore = Depends(get_store)):
    return crud.create_rent_agreement(store, payload)


@router.put("/{agreement_id}", response_model=RentAgreementOut)
def update_rent_agreement(
    agreement_id: UUID,
    payload: RentAgreementUpdate,
    store: DataStore = Depends(get_store),
):
    return crud.update_rent_agreement(store, agreement_id, payload)
