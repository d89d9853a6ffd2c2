# api/customers.py
from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, status

from utils.store import MemoryStore, get_store
from utils.dependencies import simulated_latency

from models.activity import Activity
from models.customer import Customer
from models.order import Order
from schemas.customer import CustomerCreate, CustomerUpdate
from services.customer_service import (
    create_customer, get_customer, update_customer, delete_customer, search_customers
)
from services.order_service import get_orders_by_customer
from services.activity_service import get_activities_by_customer

router = APIRouter(prefix="/customers", tags=["Customers"], dependencies=[Depends(simulated_latency)])


@router.get(
    "",
    response_model=list[Customer],
    summary="Listar / buscar clientes",
    description=(
            "Lista todos los clientes.\n\n"
            "**Búsqueda (`q`):** case-insensitive por nombre, granja, email, "
            "ciudad o cultivo principal. Vacío retorna todos."
    )
)
def list_customers_endpoint(
        q: str | None = Query(None, description="Texto de búsqueda"),
        store: MemoryStore = Depends(get_store),
):
    return search_customers(store, q)


@router.post("", response_model=Customer, status_code=status.HTTP_201_CREATED, summary="Crear cliente")
def create_customer_endpoint(
        payload: CustomerCreate,
        store: MemoryStore = Depends(get_store),
):
    """Alta de cliente (customer_since = hoy, status = Active)"""
    return create_customer(store, payload)


@router.get("/{customer_id}", response_model=Customer, summary="Obtener cliente")
def get_customer_endpoint(
        customer_id: int = Path(..., gt=0, description="ID del cliente"),
        store: MemoryStore = Depends(get_store),
):
    return get_customer(store, customer_id)


@router.patch("/{customer_id}", response_model=Customer, summary="Actualizar cliente")
def update_customer_endpoint(
        payload: CustomerUpdate,
        customer_id: int = Path(..., gt=0, description="ID del cliente"),
        store: MemoryStore = Depends(get_store),
):
    return update_customer(store, customer_id, payload)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Eliminar cliente")
def delete_customer_endpoint(
        customer_id: int = Path(..., gt=0, description="ID del cliente"),
        store: MemoryStore = Depends(get_store),
):
    delete_customer(store, customer_id)
    return None


@router.get("/{customer_id}/orders", response_model=list[Order], summary="Pedidos del cliente")
def customer_orders_endpoint(
        customer_id: int = Path(..., gt=0, description="ID del cliente"),
        store: MemoryStore = Depends(get_store),
):
    get_customer(store, customer_id)
    return get_orders_by_customer(store, customer_id)


@router.get("/{customer_id}/activities", response_model=list[Activity], summary="Actividades del cliente")
def customer_activities_endpoint(
        customer_id: int = Path(..., gt=0, description="ID del cliente"),
        store: MemoryStore = Depends(get_store),
):
    get_customer(store, customer_id)
    return get_activities_by_customer(store, customer_id)
