# schemas/activity.py
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from enums.enums import ActivityTypeEnum


class ActivityCreate(BaseModel):
    """Registrar actividad. date (hoy) y created_by los asigna el servicio."""
    customer_id: str = Field(..., min_length=1)
    type: ActivityTypeEnum
    description: str = Field("", max_length=1000)
    outcome: str | None = None

    @field_validator("customer_id", mode="before")
    @classmethod
    def coerce_customer_id(cls, v):
        if isinstance(v, int):
            return str(v)
        return v


class ActivityUpdate(BaseModel):
    type: ActivityTypeEnum | None = None
    description: str | None = Field(None, max_length=1000)
    outcome: str | None = None
