# api/activities.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status

from config.settings import settings
from utils.store import MemoryStore, get_store
from utils.dependencies import simulated_latency

from enums.enums import ActivityTypeEnum
from models.activity import Activity
from schemas.activity import ActivityCreate, ActivityUpdate
from services.activity_service import (
    list_activities, get_activity, get_recent_activities,
    create_activity, update_activity, delete_activity
)

router = APIRouter(prefix="/activities", tags=["Activities"], dependencies=[Depends(simulated_latency)])


@router.get("", response_model=list[Activity], summary="Listar actividades (más recientes primero)")
def list_activities_endpoint(
        activity_type: ActivityTypeEnum | None = Query(None, alias="type", description="Filtrar por tipo"),
        store: MemoryStore = Depends(get_store),
):
    return list_activities(store, activity_type)


@router.get("/recent", response_model=list[Activity], summary="Actividades recientes")
def recent_activities_endpoint(
        limit: int | None = Query(None, ge=1, le=500, description="Máximo de actividades"),
        store: MemoryStore = Depends(get_store),
):
    return get_recent_activities(store, limit or settings.RECENT_ACTIVITY_LIMIT)


@router.post("", response_model=Activity, status_code=status.HTTP_201_CREATED, summary="Registrar actividad")
def create_activity_endpoint(
        payload: ActivityCreate,
        store: MemoryStore = Depends(get_store),
):
    return create_activity(store, payload)


@router.get("/{activity_id}", response_model=Activity, summary="Obtener actividad")
def get_activity_endpoint(
        activity_id: int = Path(..., gt=0, description="ID de la actividad"),
        store: MemoryStore = Depends(get_store),
):
    return get_activity(store, activity_id)


@router.patch("/{activity_id}", response_model=Activity, summary="Actualizar actividad")
def update_activity_endpoint(
        payload: ActivityUpdate,
        activity_id: int = Path(..., gt=0, description="ID de la actividad"),
        store: MemoryStore = Depends(get_store),
):
    return update_activity(store, activity_id, payload)


@router.delete("/{activity_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar actividad")
def delete_activity_endpoint(
        activity_id: int = Path(..., gt=0, description="ID de la actividad"),
        store: MemoryStore = Depends(get_store),
):
    delete_activity(store, activity_id)
    return None
