# services/crop_cycle_service.py
from __future__ import annotations

import logging
from datetime import date

from config.settings import settings
from enums.enums import CropCycleStatusEnum
from models.crop_cycle import CropCycle
from schemas.crop_cycle import CropCycleCreate, CropCycleUpdate
from schemas.planning import CalendarDay, PlanningSummaryOut
from services.crop_calendar import (
    build_calendar_grid, calculate_harvest_date, calendar_grid_bounds, cycle_overlaps
)
from utils.datetime_utils import add_days, now_local, today_local
from utils.errors import NotFoundError, RequiredFieldsError
from utils.store import MemoryStore, find_index, next_id, transactional

logger = logging.getLogger(__name__)

ENTITY = "Crop cycle"

_REQUIRED_FIELDS = ("crop_type", "planting_date", "field_location")

# Únicos campos que un update puede limpiar con None; en el resto se ignora
_NULLABLE_FIELDS = ("planned_harvest_date",)


# ============================================================================
# Helpers Privados
# ============================================================================

def _get_index(store: MemoryStore, crop_cycle_id: int) -> int:
    index = find_index(store.crop_cycles, "crop_cycle_id", crop_cycle_id)
    if index is None:
        raise NotFoundError(ENTITY, crop_cycle_id)
    return index


# ============================================================================
# CRUD Básico
# ============================================================================

def list_crop_cycles(store: MemoryStore) -> list[CropCycle]:
    """Todos los ciclos en orden de almacenamiento (más reciente primero)."""
    return [c.model_copy(deep=True) for c in store.crop_cycles]


def get_crop_cycle(store: MemoryStore, crop_cycle_id: int) -> CropCycle:
    """
    Obtiene un ciclo por ID.

    Raises:
        NotFoundError: Si el ciclo no existe
    """
    return store.crop_cycles[_get_index(store, crop_cycle_id)].model_copy(deep=True)


@transactional
def create_crop_cycle(store: MemoryStore, payload: CropCycleCreate) -> CropCycle:
    """
    Crea un nuevo ciclo de cultivo.

    Pasos:
    1. Validar crop_type, planting_date y field_location
    2. Proyectar harvest_date según el cultivo
    3. planned_harvest_date = harvest_date si no viene
    4. Insertar al inicio de la lista con status Planned
    """
    missing = [f for f in _REQUIRED_FIELDS if not getattr(payload, f)]
    if missing:
        raise RequiredFieldsError(
            missing, "Crop type, planting date, and field location are required"
        )

    harvest_date = calculate_harvest_date(payload.planting_date, payload.crop_type)
    now = now_local()

    cycle = CropCycle(
        crop_cycle_id=next_id(store.crop_cycles, "crop_cycle_id"),
        crop_type=payload.crop_type,
        variety=payload.variety,
        field_location=payload.field_location,
        planting_date=payload.planting_date,
        harvest_date=harvest_date,
        planned_harvest_date=payload.planned_harvest_date or harvest_date,
        acreage=payload.acreage,
        status=CropCycleStatusEnum.planned,
        notes=payload.notes,
        created_at=now,
        updated_at=now,
    )
    store.crop_cycles.insert(0, cycle)

    logger.info("%s crop cycle %d created (harvest %s)", cycle.crop_type, cycle.crop_cycle_id, harvest_date)
    return cycle.model_copy(deep=True)


@transactional
def update_crop_cycle(store: MemoryStore, crop_cycle_id: int, payload: CropCycleUpdate) -> CropCycle:
    """
    Actualiza un ciclo (merge parcial).

    Lógica de harvest_date:
    - Si planting_date o crop_type cambian, se recalcula
    - Si el payload trae harvest_date, esa gana siempre
    """
    index = _get_index(store, crop_cycle_id)
    current = store.crop_cycles[index]

    data = {
        k: v for k, v in payload.model_dump(exclude_unset=True).items()
        if v is not None or k in _NULLABLE_FIELDS
    }

    planting_date = data.get("planting_date")
    crop_type = data.get("crop_type")
    planting_changed = planting_date is not None and planting_date != current.planting_date
    crop_changed = crop_type is not None and crop_type != current.crop_type

    harvest_date = current.harvest_date
    if planting_changed or crop_changed:
        harvest_date = calculate_harvest_date(
            planting_date or current.planting_date,
            crop_type or current.crop_type,
        )

    data["harvest_date"] = data.get("harvest_date") or harvest_date
    data["updated_at"] = now_local()

    updated = CropCycle.model_validate({**current.model_dump(), **data})
    store.crop_cycles[index] = updated

    logger.info("%s crop cycle %d updated", updated.crop_type, crop_cycle_id)
    return updated.model_copy(deep=True)


@transactional
def update_crop_cycle_status(
        store: MemoryStore,
        crop_cycle_id: int,
        status: CropCycleStatusEnum,
) -> CropCycle:
    """Cambio rápido de status (Planned → Growing → Harvested)."""
    index = _get_index(store, crop_cycle_id)
    cycle = store.crop_cycles[index]
    cycle.status = status
    cycle.updated_at = now_local()

    logger.info("Crop cycle %d status updated to %s", crop_cycle_id, cycle.status.value)
    return cycle.model_copy(deep=True)


@transactional
def delete_crop_cycle(store: MemoryStore, crop_cycle_id: int) -> CropCycle:
    """
    Elimina el ciclo.
    CASCADE: elimina también los recordatorios con ese crop_cycle_id.
    """
    index = _get_index(store, crop_cycle_id)
    deleted = store.crop_cycles.pop(index)

    before = len(store.reminders)
    store.reminders[:] = [r for r in store.reminders if r.crop_cycle_id != crop_cycle_id]

    logger.info(
        "%s crop cycle %d deleted (%d reminders removed)",
        deleted.crop_type, crop_cycle_id, before - len(store.reminders),
    )
    return deleted


# ============================================================================
# Queries de Planificación
# ============================================================================

def get_crop_cycles_by_date_range(store: MemoryStore, start_date: date, end_date: date) -> list[CropCycle]:
    """Ciclos cuyo [siembra, cosecha] se solapa con [start_date, end_date]."""
    return [
        c.model_copy(deep=True)
        for c in store.crop_cycles
        if cycle_overlaps(c, start_date, end_date)
    ]


def get_calendar_month(
        store: MemoryStore,
        reference_date: date,
        today: date | None = None,
) -> list[CalendarDay]:
    """
    Calendario del mes de reference_date.

    Se cargan los ciclos que se solapan con toda la ventana visible (42 días),
    no solo con el mes, para que las celdas de meses vecinos también muestren
    sus siembras/cosechas.
    """
    start, end = calendar_grid_bounds(reference_date)
    cycles = get_crop_cycles_by_date_range(store, start, end)
    return build_calendar_grid(reference_date, cycles, today=today)


def get_planning_summary(store: MemoryStore, today: date | None = None) -> PlanningSummaryOut:
    """
    Métricas de la vista de planificación.

    - active_cycles: Planned o Growing
    - upcoming_harvests: harvest_date <= hoy + UPCOMING_HARVEST_DAYS y no cosechado
      (incluye cosechas atrasadas)
    """
    today = today or today_local()
    horizon = add_days(today, settings.UPCOMING_HARVEST_DAYS)
    cycles = store.crop_cycles

    active = [
        c for c in cycles
        if c.status in (CropCycleStatusEnum.planned, CropCycleStatusEnum.growing)
    ]
    upcoming = [
        c for c in cycles
        if c.harvest_date <= horizon and c.status != CropCycleStatusEnum.harvested
    ]
    return PlanningSummaryOut(
        total_crops=len(cycles),
        active_cycles=len(active),
        total_acreage=sum(c.acreage for c in cycles),
        upcoming_harvests=len(upcoming),
    )
