"""
Cálculos de fechas para la planificación de cultivos.

- Proyección de cosecha: planting_date + periodo de crecimiento del cultivo
- Grilla de calendario: 6 semanas x 7 días desde el domingo previo al día 1
- Filtro por solapamiento de rangos de fechas
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable

from models.crop_cycle import CropCycle
from schemas.planning import CalendarDay
from utils.datetime_utils import to_date, today_local

logger = logging.getLogger(__name__)

# Días desde siembra hasta cosecha
CROP_TYPES: dict[str, int] = {
    "Corn": 120,
    "Soybeans": 100,
    "Wheat": 90,
    "Cotton": 180,
    "Rice": 130,
    "Tomatoes": 85,
    "Potatoes": 70,
    "Lettuce": 45,
    "Carrots": 75,
    "Onions": 110,
}

DEFAULT_GROWING_PERIOD_DAYS = 90

FIELD_LOCATIONS: list[str] = [
    f"{side} Field {block}"
    for side in ("North", "South", "East", "West")
    for block in ("A", "B", "C")
]

CALENDAR_WEEKS = 6
CALENDAR_DAYS = CALENDAR_WEEKS * 7


# ==================== PROYECCIÓN DE COSECHA ====================

def get_growing_period(crop_type: str) -> int:
    """
    Periodo de crecimiento en días.

    Un cultivo desconocido usa DEFAULT_GROWING_PERIOD_DAYS sin fallar; solo
    queda un warning en el log.
    """
    period = CROP_TYPES.get(crop_type)
    if period is None:
        logger.warning(
            "Unknown crop type %r; using default growing period of %d days",
            crop_type, DEFAULT_GROWING_PERIOD_DAYS,
        )
        return DEFAULT_GROWING_PERIOD_DAYS
    return period


def calculate_harvest_date(planting_date: date | datetime, crop_type: str) -> date:
    """
    Fórmula:
    harvest_date = planting_date + growing_period[crop_type]  (precisión de día)
    """
    return to_date(planting_date) + timedelta(days=get_growing_period(crop_type))


# ==================== RANGOS ====================

def cycle_overlaps(cycle: CropCycle, start: date, end: date) -> bool:
    """
    [planting_date, harvest_date] se solapa con [start, end] (inclusivo) si:
    - la siembra cae dentro del rango, o
    - la cosecha cae dentro del rango, o
    - el ciclo contiene el rango completo
    """
    planting = cycle.planting_date
    harvest = cycle.harvest_date
    return (
        (start <= planting <= end)
        or (start <= harvest <= end)
        or (planting <= start and harvest >= end)
    )


# ==================== CALENDARIO ====================

def calendar_grid_origin(reference: date | datetime) -> date:
    """Domingo en o antes del día 1 del mes de referencia."""
    first = to_date(reference).replace(day=1)
    # weekday(): lunes=0 ... domingo=6
    return first - timedelta(days=(first.weekday() + 1) % 7)


def calendar_grid_bounds(reference: date | datetime) -> tuple[date, date]:
    """Primer y último día visibles en la grilla (42 días)."""
    origin = calendar_grid_origin(reference)
    return origin, origin + timedelta(days=CALENDAR_DAYS - 1)


def build_calendar_grid(
        reference: date | datetime,
        crop_cycles: Iterable[CropCycle],
        today: date | None = None,
) -> list[CalendarDay]:
    """
    Construye las 42 celdas del mes que contiene `reference`.

    Cada celda lleva los ciclos cuya siembra o cosecha cae exactamente ese día
    (no contención de rango). Un ciclo sembrado y cosechado el mismo día
    aparece una sola vez.
    """
    reference = to_date(reference)
    today = today or today_local()
    origin = calendar_grid_origin(reference)

    by_day: dict[date, list[CropCycle]] = {}
    for cycle in crop_cycles:
        by_day.setdefault(cycle.planting_date, []).append(cycle)
        if cycle.harvest_date != cycle.planting_date:
            by_day.setdefault(cycle.harvest_date, []).append(cycle)

    grid = []
    for offset in range(CALENDAR_DAYS):
        day = origin + timedelta(days=offset)
        grid.append(
            CalendarDay(
                date=day,
                is_current_month=(day.year, day.month) == (reference.year, reference.month),
                is_today=day == today,
                crop_cycles=by_day.get(day, []),
            )
        )
    return grid
