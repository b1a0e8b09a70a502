# app/router/requirements_router.py
from uuid import UUID

from fastapi import APIRouter, Depends

from shared.core.store import DataStore
from shared.core.store_provider import get_store

from ..crud import requirements_crud as crud
from ..schemas.requirements_schemas import (
    RequirementCreate,
    RequirementListResponse,
    RequirementOut,
    RequirementRequest,
    RequirementUpdate,
)

router = APIRouter(prefix="/api/requirements", tags=["requirements"])


@router.get("/all", response_model=RequirementListResponse)
def requirements_all(
    params: RequirementRequest = Depends(),
    store: DataStore = Depends(get_store),
):
    return crud.get_requirements(store, params)


@router.get("/{requirement_id}", response_model=RequirementOut)
def get_requirement(requirement_id: UUID, store: DataStore = Depends(get_store)):
    return crud.get_requirement_by_id(store, requirement_id)


@router.post("/", response_model=RequirementOut)
def create_requirement(payload: RequirementCreate, store: DataStore = Depends(get_store)):
    return crud.create_requirement(store, payload)


@router.put("/{requirement_id}", response_model=RequirementOut)
def update_requirement(
    requirement_id: UUID,
    payload: RequirementUpdate,
    store: DataStore = Depends(get_store),
):
    return crud.update_requirement(store, requirement_id, payload)
