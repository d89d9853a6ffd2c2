# api/dashboard.py
from fastapi import APIRouter, Depends

from utils.store import MemoryStore, get_store
from utils.dependencies import simulated_latency
from schemas.dashboard import DashboardMetricsOut
from services.dashboard_service import get_dashboard_metrics

router = APIRouter(prefix="/dashboard", tags=["Dashboard"], dependencies=[Depends(simulated_latency)])


@router.get("/metrics", response_model=DashboardMetricsOut, summary="Métricas del dashboard")
def dashboard_metrics_endpoint(store: MemoryStore = Depends(get_store)):
    return get_dashboard_metrics(store)
