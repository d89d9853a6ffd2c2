# api/crop_cycles.py
"""
Endpoints para gestión de ciclos de cultivo.
"""
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from utils.store import MemoryStore, get_store
from utils.dependencies import simulated_latency

from models.crop_cycle import CropCycle
from models.reminder import Reminder
from schemas.crop_cycle import CropCycleCreate, CropCycleUpdate, CropCycleStatusUpdate
from services.crop_cycle_service import (
    list_crop_cycles, get_crop_cycle, get_crop_cycles_by_date_range,
    create_crop_cycle, update_crop_cycle, update_crop_cycle_status, delete_crop_cycle
)
from services.reminder_service import get_reminders_by_crop_cycle, sort_reminders

router = APIRouter(prefix="/crop-cycles", tags=["Crop cycles"], dependencies=[Depends(simulated_latency)])


# ==========================================
# GET - Listar ciclos (rango opcional)
# ==========================================

@router.get(
    "",
    response_model=list[CropCycle],
    summary="Listar ciclos de cultivo",
    description=(
            "Lista los ciclos (más reciente primero).\n\n"
            "**Rango opcional (`start_date` + `end_date`):**\n"
            "- Retorna ciclos cuyo [siembra, cosecha] se solapa con el rango\n"
            "- Ambos parámetros deben enviarse juntos"
    )
)
def list_crop_cycles_endpoint(
        start_date: date | None = Query(None, description="Inicio del rango (YYYY-MM-DD)"),
        end_date: date | None = Query(None, description="Fin del rango (YYYY-MM-DD)"),
        store: MemoryStore = Depends(get_store),
):
    if start_date is None and end_date is None:
        return list_crop_cycles(store)
    if start_date is None or end_date is None:
        raise HTTPException(status_code=400, detail="start_date and end_date must be sent together")
    if start_date > end_date:
        raise HTTPException(status_code=400, detail="start_date must be on or before end_date")
    return get_crop_cycles_by_date_range(store, start_date, end_date)


# ==========================================
# POST - Crear ciclo
# ==========================================

@router.post(
    "",
    response_model=CropCycle,
    status_code=status.HTTP_201_CREATED,
    summary="Crear ciclo de cultivo",
    description=(
            "Crea un ciclo con status Planned.\n\n"
            "**Obligatorios:** crop_type, planting_date, field_location\n\n"
            "**harvest_date:** planting_date + periodo de crecimiento del cultivo "
            "(90 días si el cultivo no está en la tabla)"
    )
)
def create_crop_cycle_endpoint(
        payload: CropCycleCreate,
        store: MemoryStore = Depends(get_store),
):
    return create_crop_cycle(store, payload)


@router.get("/{crop_cycle_id}", response_model=CropCycle, summary="Obtener ciclo")
def get_crop_cycle_endpoint(
        crop_cycle_id: int = Path(..., gt=0, description="ID del ciclo"),
        store: MemoryStore = Depends(get_store),
):
    return get_crop_cycle(store, crop_cycle_id)


@router.patch(
    "/{crop_cycle_id}",
    response_model=CropCycle,
    summary="Actualizar ciclo",
    description=(
            "Merge parcial.\n\n"
            "**Lógica automática:**\n"
            "- Si cambia `planting_date` o `crop_type` → se recalcula `harvest_date`\n"
            "- Si se envía `harvest_date` explícita, esa se respeta"
    )
)
def update_crop_cycle_endpoint(
        payload: CropCycleUpdate,
        crop_cycle_id: int = Path(..., gt=0, description="ID del ciclo"),
        store: MemoryStore = Depends(get_store),
):
    return update_crop_cycle(store, crop_cycle_id, payload)


@router.patch("/{crop_cycle_id}/status", response_model=CropCycle, summary="Actualizar status del ciclo")
def update_crop_cycle_status_endpoint(
        payload: CropCycleStatusUpdate,
        crop_cycle_id: int = Path(..., gt=0, description="ID del ciclo"),
        store: MemoryStore = Depends(get_store),
):
    return update_crop_cycle_status(store, crop_cycle_id, payload.status)


@router.delete(
    "/{crop_cycle_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar ciclo",
    description="**Efecto en cascada:** se eliminan los recordatorios vinculados al ciclo."
)
def delete_crop_cycle_endpoint(
        crop_cycle_id: int = Path(..., gt=0, description="ID del ciclo"),
        store: MemoryStore = Depends(get_store),
):
    delete_crop_cycle(store, crop_cycle_id)
    return None


@router.get("/{crop_cycle_id}/reminders", response_model=list[Reminder], summary="Recordatorios del ciclo")
def crop_cycle_reminders_endpoint(
        crop_cycle_id: int = Path(..., gt=0, description="ID del ciclo"),
        store: MemoryStore = Depends(get_store),
):
    get_crop_cycle(store, crop_cycle_id)
    return sort_reminders(get_reminders_by_crop_cycle(store, crop_cycle_id))
