# models/crop_cycle.py
from __future__ import annotations

from datetime import date, datetime
from pydantic import Field

from enums.enums import CropCycleStatusEnum
from models.base import Record


class CropCycle(Record):
    """
    Ciclo de cultivo: una siembra hasta su cosecha, para un campo y un cultivo.

    Características:
    - harvest_date es derivada (planting_date + periodo de crecimiento del cultivo)
      y se recalcula si cambia planting_date o crop_type, salvo que el llamador
      la envíe explícitamente
    - planned_harvest_date es un override opcional (informativo)
    - Al eliminarlo se eliminan sus recordatorios (único borrado en cascada)
    """
    crop_cycle_id: int = Field(..., gt=0)
    crop_type: str
    variety: str = ""
    field_location: str
    planting_date: date
    harvest_date: date
    planned_harvest_date: date | None = None
    acreage: float = Field(0, ge=0)
    status: CropCycleStatusEnum = CropCycleStatusEnum.planned
    notes: str = ""
    created_at: datetime
    updated_at: datetime
