"""Tests for customer CRUD and search."""
import pytest
from pydantic import ValidationError

from enums.enums import CustomerStatusEnum
from schemas.customer import CustomerCreate, CustomerUpdate
from services import customer_service as svc
from utils.datetime_utils import today_local
from utils.errors import NotFoundError


def test_seed_customers(seeded_store):
    customers = svc.list_customers(seeded_store)
    assert len(customers) == 6
    assert customers[0].location.city == "Ames"


def test_create_sets_since_and_status(seeded_store):
    customer = svc.create_customer(
        seeded_store,
        CustomerCreate(name="Ana Ruiz", farm_name="Ruiz Berries", primary_crops=["Strawberries"]),
    )
    assert customer.customer_id == 7
    assert customer.customer_since == today_local()
    assert customer.status == CustomerStatusEnum.active
    assert svc.get_customer(seeded_store, 7).farm_name == "Ruiz Berries"


def test_create_requires_name():
    with pytest.raises(ValidationError):
        CustomerCreate(name="   ")


def test_update_partial(seeded_store):
    updated = svc.update_customer(seeded_store, 5, CustomerUpdate(status=CustomerStatusEnum.active, notes="Back"))
    assert updated.status == CustomerStatusEnum.active
    assert updated.name == "Michael O'Brien"
    assert updated.notes == "Back"


def test_delete(seeded_store):
    svc.delete_customer(seeded_store, 2)
    with pytest.raises(NotFoundError) as exc:
        svc.get_customer(seeded_store, 2)
    assert exc.value.entity_id == 2
    # los pedidos no se eliminan
    assert any(o.customer_id == "2" for o in seeded_store.orders)


@pytest.mark.parametrize("query,expected", [
    ("miller", [1]),
    ("ORGANICS", [2]),
    ("garciacotton", [3]),
    ("stuttgart", [4]),
    ("wheat", [3, 6]),
    ("zzz", []),
])
def test_search(seeded_store, query, expected):
    assert [c.customer_id for c in svc.search_customers(seeded_store, query)] == expected


@pytest.mark.parametrize("query", [None, "", "   "])
def test_blank_search_returns_all(seeded_store, query):
    assert len(svc.search_customers(seeded_store, query)) == 6
