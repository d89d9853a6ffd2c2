# services/order_service.py
from __future__ import annotations

import logging

from enums.enums import OrderStatusEnum, PaymentStatusEnum
from models.order import Order, OrderItem
from schemas.order import OrderCreate, OrderUpdate
from utils.datetime_utils import today_local
from utils.errors import NotFoundError
from utils.store import MemoryStore, find_index, next_id, transactional

logger = logging.getLogger(__name__)

ENTITY = "Order"

# Estados que cuentan como "pendientes" en el dashboard
PENDING_STATUSES = (
    OrderStatusEnum.quote,
    OrderStatusEnum.confirmed,
    OrderStatusEnum.processing,
)


def _get_index(store: MemoryStore, order_id: int) -> int:
    index = find_index(store.orders, "order_id", order_id)
    if index is None:
        raise NotFoundError(ENTITY, order_id)
    return index


def calculate_order_total(items: list[OrderItem]) -> float:
    """total = Σ(quantity × unit_price)"""
    return round(sum(item.line_total for item in items), 2)


def list_orders(store: MemoryStore, status: OrderStatusEnum | None = None) -> list[Order]:
    return [
        o.model_copy(deep=True)
        for o in store.orders
        if status is None or o.status == status
    ]


def get_order(store: MemoryStore, order_id: int) -> Order:
    return store.orders[_get_index(store, order_id)].model_copy(deep=True)


def get_orders_by_customer(store: MemoryStore, customer_id: int | str) -> list[Order]:
    """customer_id se compara como string (así se guarda en el pedido)."""
    key = str(customer_id)
    return [o.model_copy(deep=True) for o in store.orders if o.customer_id == key]


@transactional
def create_order(store: MemoryStore, payload: OrderCreate) -> Order:
    """
    Crear pedido.

    - order_date = hoy
    - status = Confirmed, payment_status = Pending
    - total_amount = suma de líneas si no viene
    """
    data = payload.model_dump(exclude={"total_amount"})
    total = payload.total_amount
    if total is None:
        total = calculate_order_total(payload.items)

    order = Order(
        order_id=next_id(store.orders, "order_id"),
        order_date=today_local(),
        status=OrderStatusEnum.confirmed,
        payment_status=PaymentStatusEnum.pending,
        total_amount=total,
        **data,
    )
    store.orders.append(order)

    logger.info("Order %d created for customer %s (total %.2f)", order.order_id, order.customer_id, total)
    return order.model_copy(deep=True)


@transactional
def update_order(store: MemoryStore, order_id: int, payload: OrderUpdate) -> Order:
    """
    Actualizar pedido (merge parcial).
    Si cambian las líneas y no viene total_amount, se recalcula el total.
    """
    index = _get_index(store, order_id)
    data = payload.model_dump(exclude_unset=True, exclude_none=True)

    if payload.items is not None and payload.total_amount is None:
        data["total_amount"] = calculate_order_total(payload.items)

    updated = Order.model_validate({**store.orders[index].model_dump(), **data})
    store.orders[index] = updated

    logger.info("Order %d updated", order_id)
    return updated.model_copy(deep=True)


@transactional
def update_order_status(store: MemoryStore, order_id: int, status: OrderStatusEnum) -> Order:
    index = _get_index(store, order_id)
    order = store.orders[index]
    order.status = status

    logger.info("Order %d status updated to %s", order_id, order.status.value)
    return order.model_copy(deep=True)


@transactional
def delete_order(store: MemoryStore, order_id: int) -> Order:
    deleted = store.orders.pop(_get_index(store, order_id))
    logger.info("Order %d deleted", order_id)
    return deleted
