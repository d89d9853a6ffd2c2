# schemas/order.py
from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field, field_validator

from enums.enums import OrderStatusEnum, PaymentStatusEnum
from models.order import OrderItem


class OrderCreate(BaseModel):
    """
    Crear pedido.

    order_date, status (Confirmed) y payment_status (Pending) los asigna el servicio.
    Si total_amount no viene, se calcula con la suma de las líneas.
    """
    customer_id: str = Field(..., min_length=1)
    delivery_date: date | None = None
    items: list[OrderItem] = Field(default_factory=list)
    total_amount: float | None = Field(None, ge=0)
    payment_method: str = ""
    notes: str = ""

    @field_validator("customer_id", mode="before")
    @classmethod
    def coerce_customer_id(cls, v):
        """Aceptar customer_id numérico; se guarda como string"""
        if isinstance(v, int):
            return str(v)
        return v


class OrderUpdate(BaseModel):
    delivery_date: date | None = None
    items: list[OrderItem] | None = None
    total_amount: float | None = Field(None, ge=0)
    status: OrderStatusEnum | None = None
    payment_status: PaymentStatusEnum | None = None
    payment_method: str | None = None
    notes: str | None = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatusEnum
