# app/router/brokers_router.py
from uuid import UUID

from fastapi import APIRouter, Depends

from shared.core.store import DataStore
from shared.core.store_provider import get_store

from ..crud import brokers_crud as crud
from ..schemas.brokers_schemas import (
    BrokerCreate,
    BrokerListResponse,
    BrokerOut,
    BrokerRequest,
    BrokerUpdate,
)

router = APIRouter(prefix="/api/brokers", tags=["brokers"])


@router.get("/all", response_model=BrokerListResponse)
def brokers_all(
    params: BrokerRequest = Depends(),
    store: DataStore = Depends(get_store),
):
    return crud.get_brokers(store, params)


@router.get("/{broker_id}", response_model=BrokerOut)
def get_broker(broker_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_broker_by_id(store, broker_id)


@router.post("/", response_model=BrokerOut)
def create_broker(payload: BrokerCreate, store: DataStore = Depends(get_store)):
    return crud.create_broker(store, payload)


@router.put("/{broker_id}", response_model=BrokerOut)
def update_broker(broker_id: UUID, payload: BrokerUpdate, store: DataStore = Depends(get_store)):
    return crud.update_broker(store, broker_id, payload)
