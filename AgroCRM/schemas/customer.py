# schemas/customer.py
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from enums.enums import CustomerStatusEnum
from models.customer import Location


class CustomerCreate(BaseModel):
    """
    Crear cliente.

    customer_since y status los asigna el servicio (hoy / Active).
    """
    name: str = Field(..., min_length=1, max_length=160)
    farm_name: str = Field("", max_length=160)
    contact_email: str = Field("", max_length=254)
    contact_phone: str = Field("", max_length=40)
    location: Location = Field(default_factory=Location)
    farm_size: float = Field(0, ge=0)
    primary_crops: list[str] = Field(default_factory=list)
    notes: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validar que el nombre no esté vacío después de strip"""
        if not v.strip():
            raise ValueError("Customer name cannot be blank")
        return v.strip()


class CustomerUpdate(BaseModel):
    """Actualizar cliente (merge parcial)"""
    name: str | None = Field(None, min_length=1, max_length=160)
    farm_name: str | None = Field(None, max_length=160)
    contact_email: str | None = Field(None, max_length=254)
    contact_phone: str | None = Field(None, max_length=40)
    location: Location | None = None
    farm_size: float | None = Field(None, ge=0)
    primary_crops: list[str] | None = None
    status: CustomerStatusEnum | None = None
    notes: str | None = None
