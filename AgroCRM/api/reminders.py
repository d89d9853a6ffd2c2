# api/reminders.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status

from config.settings import settings
from utils.store import MemoryStore, get_store
from utils.dependencies import simulated_latency

from models.reminder import Reminder
from schemas.reminder import ReminderCreate, ReminderUpdate
from services.reminder_service import (
    list_reminders, get_reminder, get_reminders_by_crop_cycle, get_upcoming_reminders,
    create_reminder, update_reminder, mark_reminder_completed, delete_reminder, sort_reminders
)

router = APIRouter(prefix="/reminders", tags=["Reminders"], dependencies=[Depends(simulated_latency)])


# ============================================================================
# Queries
# ============================================================================

@router.get(
    "",
    response_model=list[Reminder],
    summary="Listar recordatorios",
    description=(
            "Lista recordatorios ordenados por fecha y luego prioridad (High primero).\n\n"
            "**Filtro opcional:** `crop_cycle_id`"
    )
)
def list_reminders_endpoint(
        crop_cycle_id: int | None = Query(None, gt=0, description="Solo los de este ciclo"),
        store: MemoryStore = Depends(get_store),
):
    if crop_cycle_id is not None:
        return sort_reminders(get_reminders_by_crop_cycle(store, crop_cycle_id))
    return sort_reminders(list_reminders(store))


@router.get(
    "/upcoming",
    response_model=list[Reminder],
    summary="Próximos recordatorios",
    description=(
            "Recordatorios NO completados con fecha en [hoy, hoy + `days`].\n"
            "Ordenados por fecha ascendente."
    )
)
def upcoming_reminders_endpoint(
        days: int | None = Query(None, ge=0, le=365, description="Horizonte en días"),
        store: MemoryStore = Depends(get_store),
):
    return get_upcoming_reminders(store, days if days is not None else settings.UPCOMING_REMINDER_DAYS)


# ============================================================================
# CRUD Básico
# ============================================================================

@router.post("", response_model=Reminder, status_code=status.HTTP_201_CREATED, summary="Crear recordatorio")
def create_reminder_endpoint(
        payload: ReminderCreate,
        store: MemoryStore = Depends(get_store),
):
    return create_reminder(store, payload)


@router.get("/{reminder_id}", response_model=Reminder, summary="Obtener recordatorio")
def get_reminder_endpoint(
        reminder_id: int = Path(..., gt=0, description="ID del recordatorio"),
        store: MemoryStore = Depends(get_store),
):
    return get_reminder(store, reminder_id)


@router.patch("/{reminder_id}", response_model=Reminder, summary="Actualizar recordatorio")
def update_reminder_endpoint(
        payload: ReminderUpdate,
        reminder_id: int = Path(..., gt=0, description="ID del recordatorio"),
        store: MemoryStore = Depends(get_store),
):
    return update_reminder(store, reminder_id, payload)


@router.post("/{reminder_id}/complete", response_model=Reminder, summary="Marcar como completado")
def complete_reminder_endpoint(
        reminder_id: int = Path(..., gt=0, description="ID del recordatorio"),
        store: MemoryStore = Depends(get_store),
):
    return mark_reminder_completed(store, reminder_id)


@router.delete("/{reminder_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar recordatorio")
def delete_reminder_endpoint(
        reminder_id: int = Path(..., gt=0, description="ID del recordatorio"),
        store: MemoryStore = Depends(get_store),
):
    delete_reminder(store, reminder_id)
    return None
