# app/router/payments_router.py
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from shared.core.store import DataStore
from shared.core.store_provider import get_store

from ..crud import payments_crud as crud
from ..schemas.payments_schemas import (
    PaymentCreate,
    PaymentFormOptions,
    PaymentListResponse,
    PaymentOut,
    PaymentRequest,
)

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.get("/all", response_model=PaymentListResponse)
def payments_all(
    params: PaymentRequest = Depends(),
    store: DataStore = Depends(get_store),
):
    return crud.get_payments(store, params)


@router.get("/form-options", response_model=PaymentFormOptions)
def payment_form_options(
    rent_agreement_id: Optional[UUID] = Query(None),
    store: DataStore = Depends(get_store),
):
    return crud.get_payment_form_options(store, rent_agreement_id)


@router.get("/{payment_id}", response_model=PaymentOut)
def get_payment(payment_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_payment_by_id(store, payment_id)


@router.post("/", response_model=PaymentOut)
def create_payment(payload: PaymentCreate, store: DataStore = Depends(get_store)):
    return crud.create_payment(store, payload)
