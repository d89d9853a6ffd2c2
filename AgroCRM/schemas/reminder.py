# schemas/reminder.py
from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field, field_validator

from enums.enums import ReminderPriorityEnum, ReminderTypeEnum


class ReminderCreate(BaseModel):
    """
    Crear recordatorio.

    title y reminder_date son obligatorios (validados en el servicio).
    """
    title: str | None = Field(None, max_length=160)
    description: str = Field("", max_length=500)
    reminder_date: date | None = None
    reminder_type: ReminderTypeEnum = ReminderTypeEnum.task
    priority: ReminderPriorityEnum = ReminderPriorityEnum.medium
    crop_cycle_id: int | None = None

    @field_validator("crop_cycle_id")
    @classmethod
    def convert_zero_to_none(cls, v: int | None) -> int | None:
        """Convertir 0 a None (ID opcional)"""
        if v == 0:
            return None
        return v

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            return v or None
        return None


class ReminderUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=160)
    description: str | None = Field(None, max_length=500)
    reminder_date: date | None = None
    reminder_type: ReminderTypeEnum | None = None
    priority: ReminderPriorityEnum | None = None
    crop_cycle_id: int | None = None
    completed: bool | None = None
