# models/activity.py
from __future__ import annotations

import datetime as dt
from pydantic import Field

from enums.enums import ActivityTypeEnum
from models.base import Record


class Activity(Record):
    activity_id: int = Field(..., gt=0)
    customer_id: str  # Referencia a Customer.customer_id (string)
    type: ActivityTypeEnum
    description: str = ""
    date: dt.date
    created_by: str = "System User"
    outcome: str | None = None
