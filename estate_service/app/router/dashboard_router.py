# app/router/dashboard_router.py
from fastapi import APIRouter, Depends

from shared.core.store import DataStore
from shared.core.store_provider import get_store

from ..crud import dashboard_crud as crud
from ..schemas.dashboard_schemas import DashboardOverview, DashboardStats

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/overview", response_model=DashboardOverview)
def dashboard_overview(store: DataStore = Depends(get_store)):
    return crud.get_dashboard_overview(store)


@router.get("/stats", response_model=DashboardStats)
def dashboard_stats(store: DataStore = Depends(get_store)):
    return crud.get_dashboard_stats(store)
