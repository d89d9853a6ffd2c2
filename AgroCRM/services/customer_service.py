# services/customer_service.py
from __future__ import annotations

import logging

from enums.enums import CustomerStatusEnum
from models.customer import Customer
from schemas.customer import CustomerCreate, CustomerUpdate
from utils.datetime_utils import today_local
from utils.errors import NotFoundError
from utils.store import MemoryStore, find_index, next_id, transactional

logger = logging.getLogger(__name__)

ENTITY = "Customer"


def _get_index(store: MemoryStore, customer_id: int) -> int:
    index = find_index(store.customers, "customer_id", customer_id)
    if index is None:
        raise NotFoundError(ENTITY, customer_id)
    return index


def list_customers(store: MemoryStore) -> list[Customer]:
    return [c.model_copy(deep=True) for c in store.customers]


def get_customer(store: MemoryStore, customer_id: int) -> Customer:
    """
    Obtiene un cliente por ID.

    Raises:
        NotFoundError: Si el cliente no existe
    """
    return store.customers[_get_index(store, customer_id)].model_copy(deep=True)


@transactional
def create_customer(store: MemoryStore, payload: CustomerCreate) -> Customer:
    """Alta de cliente: customer_since = hoy, status = Active."""
    customer = Customer(
        customer_id=next_id(store.customers, "customer_id"),
        customer_since=today_local(),
        status=CustomerStatusEnum.active,
        **payload.model_dump(),
    )
    store.customers.append(customer)

    logger.info('Customer %d "%s" created', customer.customer_id, customer.name)
    return customer.model_copy(deep=True)


@transactional
def update_customer(store: MemoryStore, customer_id: int, payload: CustomerUpdate) -> Customer:
    index = _get_index(store, customer_id)
    data = payload.model_dump(exclude_unset=True, exclude_none=True)

    updated = Customer.model_validate({**store.customers[index].model_dump(), **data})
    store.customers[index] = updated

    logger.info('Customer %d "%s" updated', customer_id, updated.name)
    return updated.model_copy(deep=True)


@transactional
def delete_customer(store: MemoryStore, customer_id: int) -> Customer:
    """
    Elimina el cliente.
    NO elimina pedidos ni actividades (solo lo referencian por ID).
    """
    deleted = store.customers.pop(_get_index(store, customer_id))
    logger.info('Customer %d "%s" deleted', customer_id, deleted.name)
    return deleted


def search_customers(store: MemoryStore, query: str | None) -> list[Customer]:
    """
    Búsqueda case-insensitive por nombre, granja, email, ciudad o cultivo principal.
    Query vacío retorna todos.
    """
    if not query or not query.strip():
        return list_customers(store)

    term = query.strip().lower()

    def _matches(c: Customer) -> bool:
        return (
            term in c.name.lower()
            or term in c.farm_name.lower()
            or term in c.contact_email.lower()
            or term in c.location.city.lower()
            or any(term in crop.lower() for crop in c.primary_crops)
        )

    return [c.model_copy(deep=True) for c in store.customers if _matches(c)]
