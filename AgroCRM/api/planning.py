# api/planning.py
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query

from utils.store import MemoryStore, get_store
from utils.dependencies import simulated_latency
from utils.datetime_utils import today_local

from schemas.planning import CalendarDay, CropTypeOut, PlanningSummaryOut
from services.crop_calendar import CROP_TYPES, FIELD_LOCATIONS
from services.crop_cycle_service import get_calendar_month, get_planning_summary

router = APIRouter(prefix="/planning", tags=["Planning"], dependencies=[Depends(simulated_latency)])


@router.get("/crop-types", response_model=list[CropTypeOut], summary="Cultivos y periodo de crecimiento")
def crop_types_endpoint():
    return [
        CropTypeOut(crop_type=crop, growing_period_days=days)
        for crop, days in CROP_TYPES.items()
    ]


@router.get("/field-locations", response_model=list[str], summary="Campos disponibles")
def field_locations_endpoint():
    return FIELD_LOCATIONS


@router.get(
    "/calendar",
    response_model=list[CalendarDay],
    summary="Calendario mensual de siembras y cosechas",
    description=(
            "Grilla fija de 42 días (6 semanas) que inicia el domingo en o antes "
            "del día 1 del mes de `reference_date`.\n\n"
            "Cada celda incluye los ciclos cuya siembra o cosecha cae ese día."
    )
)
def calendar_endpoint(
        reference_date: date | None = Query(None, description="Cualquier día del mes (default: hoy)"),
        store: MemoryStore = Depends(get_store),
):
    return get_calendar_month(store, reference_date or today_local())


@router.get("/summary", response_model=PlanningSummaryOut, summary="Resumen de planificación")
def planning_summary_endpoint(store: MemoryStore = Depends(get_store)):
    return get_planning_summary(store)
