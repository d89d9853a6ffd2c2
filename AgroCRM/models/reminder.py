# models/reminder.py
from __future__ import annotations

from datetime import date, datetime
from pydantic import Field

from enums.enums import ReminderPriorityEnum, ReminderTypeEnum
from models.base import Record


class Reminder(Record):
    """
    Recordatorio con fecha, opcionalmente vinculado a un ciclo de cultivo.

    crop_cycle_id es solo una referencia hacia atrás (sin propiedad); el
    borrado en cascada lo ejecuta el servicio de ciclos.
    """
    reminder_id: int = Field(..., gt=0)
    title: str
    description: str = ""
    reminder_date: date
    reminder_type: ReminderTypeEnum = ReminderTypeEnum.task
    priority: ReminderPriorityEnum = ReminderPriorityEnum.medium
    crop_cycle_id: int | None = None
    completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
