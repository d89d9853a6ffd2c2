# schemas/planning.py
from __future__ import annotations

import datetime as dt
from pydantic import BaseModel

from models.crop_cycle import CropCycle


class CropTypeOut(BaseModel):
    crop_type: str
    growing_period_days: int


class CalendarDay(BaseModel):
    """Celda del calendario de planificación (6 semanas x 7 días)"""
    date: dt.date
    is_current_month: bool
    is_today: bool
    crop_cycles: list[CropCycle]


class PlanningSummaryOut(BaseModel):
    total_crops: int
    active_cycles: int
    total_acreage: float
    upcoming_harvests: int
