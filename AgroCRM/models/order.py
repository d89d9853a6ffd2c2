# models/order.py
from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field

from enums.enums import OrderStatusEnum, PaymentStatusEnum
from models.base import Record


class OrderItem(BaseModel):
    product: str
    quantity: float = Field(..., gt=0)
    unit: str = ""
    unit_price: float = Field(..., ge=0)

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price


class Order(Record):
    order_id: int = Field(..., gt=0)
    customer_id: str  # Referencia a Customer.customer_id (string)
    order_date: date
    delivery_date: date | None = None
    items: list[OrderItem] = Field(default_factory=list)
    total_amount: float = Field(0, ge=0)
    status: OrderStatusEnum = OrderStatusEnum.confirmed
    payment_status: PaymentStatusEnum = PaymentStatusEnum.pending
    payment_method: str = ""
    notes: str = ""
