# models/customer.py
from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field

from enums.enums import CustomerStatusEnum
from models.base import Record


class Location(BaseModel):
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


class Customer(Record):
    """
    Cliente (productor agrícola).

    Los pedidos y actividades lo referencian por customer_id en forma de
    string; no hay borrado en cascada.
    """
    customer_id: int = Field(..., gt=0)
    name: str
    farm_name: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    location: Location = Field(default_factory=Location)
    farm_size: float = Field(0, ge=0, description="Acres")
    primary_crops: list[str] = Field(default_factory=list)
    customer_since: date
    status: CustomerStatusEnum = CustomerStatusEnum.active
    notes: str = ""
