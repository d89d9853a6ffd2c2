# schemas/crop_cycle.py
from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field, field_validator

from enums.enums import CropCycleStatusEnum


def _strip_or_none(v: str | None) -> str | None:
    """Quita espacios; un texto en blanco cuenta como ausente (None)."""
    if v is not None:
        v = v.strip()
        return v or None
    return None


class CropCycleCreate(BaseModel):
    """
    Crear ciclo de cultivo.

    NOTA: crop_type, planting_date y field_location son obligatorios, pero se
    validan en el servicio (RequiredFieldsError) para que el error sea el mismo
    desde la API o desde una llamada directa.
    """
    crop_type: str | None = None
    variety: str = ""
    field_location: str | None = None
    planting_date: date | None = None
    planned_harvest_date: date | None = None
    acreage: float = Field(0, ge=0)
    notes: str = ""

    @field_validator("crop_type", "field_location")
    @classmethod
    def strip_required_text(cls, v: str | None) -> str | None:
        return _strip_or_none(v)

    @field_validator("variety")
    @classmethod
    def strip_variety(cls, v: str) -> str:
        return v.strip()


class CropCycleUpdate(BaseModel):
    """
    Actualizar ciclo (merge parcial).

    Si cambia planting_date o crop_type se recalcula harvest_date, salvo que
    harvest_date venga explícita.
    """
    crop_type: str | None = None
    variety: str | None = None
    field_location: str | None = None
    planting_date: date | None = None
    harvest_date: date | None = None
    planned_harvest_date: date | None = None
    acreage: float | None = Field(None, ge=0)
    status: CropCycleStatusEnum | None = None
    notes: str | None = None

    @field_validator("crop_type", "field_location")
    @classmethod
    def strip_required_text(cls, v: str | None) -> str | None:
        """Ej: "  Corn " -> "Corn"; en blanco -> None (se ignora en el merge)"""
        return _strip_or_none(v)

    @field_validator("variety")
    @classmethod
    def strip_variety(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None


class CropCycleStatusUpdate(BaseModel):
    status: CropCycleStatusEnum
