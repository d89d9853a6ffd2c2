# api/orders.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status

from utils.store import MemoryStore, get_store
from utils.dependencies import simulated_latency

from enums.enums import OrderStatusEnum
from models.order import Order
from schemas.order import OrderCreate, OrderUpdate, OrderStatusUpdate
from services.order_service import (
    list_orders, get_order, create_order, update_order, update_order_status, delete_order
)

router = APIRouter(prefix="/orders", tags=["Orders"], dependencies=[Depends(simulated_latency)])


@router.get("", response_model=list[Order], summary="Listar pedidos")
def list_orders_endpoint(
        status_filter: OrderStatusEnum | None = Query(None, alias="status", description="Filtrar por estado"),
        store: MemoryStore = Depends(get_store),
):
    return list_orders(store, status=status_filter)


@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    summary="Crear pedido",
    description=(
            "Crea un pedido.\n\n"
            "**Valores asignados:**\n"
            "- `order_date`: hoy\n"
            "- `status`: Confirmed\n"
            "- `payment_status`: Pending\n"
            "- `total_amount`: suma de líneas si no se envía"
    )
)
def create_order_endpoint(
        payload: OrderCreate,
        store: MemoryStore = Depends(get_store),
):
    return create_order(store, payload)


@router.get("/{order_id}", response_model=Order, summary="Obtener pedido")
def get_order_endpoint(
        order_id: int = Path(..., gt=0, description="ID del pedido"),
        store: MemoryStore = Depends(get_store),
):
    return get_order(store, order_id)


@router.patch("/{order_id}", response_model=Order, summary="Actualizar pedido")
def update_order_endpoint(
        payload: OrderUpdate,
        order_id: int = Path(..., gt=0, description="ID del pedido"),
        store: MemoryStore = Depends(get_store),
):
    return update_order(store, order_id, payload)


@router.patch("/{order_id}/status", response_model=Order, summary="Actualizar status de pedido (rápido)")
def update_order_status_endpoint(
        payload: OrderStatusUpdate,
        order_id: int = Path(..., gt=0, description="ID del pedido"),
        store: MemoryStore = Depends(get_store),
):
    return update_order_status(store, order_id, payload.status)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar pedido")
def delete_order_endpoint(
        order_id: int = Path(..., gt=0, description="ID del pedido"),
        store: MemoryStore = Depends(get_store),
):
    delete_order(store, order_id)
    return None
