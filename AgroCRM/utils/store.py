"""
Almacén en memoria del proceso.

Reemplaza a la base de datos: cinco listas mutables que viven mientras viva
el proceso y se recargan desde los JSON mock de seed/ con reset_store().
"""
from __future__ import annotations

import json
import logging
import threading
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Iterable, Sequence

from pydantic import BaseModel

from config.settings import settings
from models import Activity, CropCycle, Customer, Order, Reminder

logger = logging.getLogger(__name__)

# atributo del store -> (archivo seed, modelo)
SEED_FILES: dict[str, tuple[str, type[BaseModel]]] = {
    "customers": ("customers.json", Customer),
    "orders": ("orders.json", Order),
    "activities": ("activities.json", Activity),
    "crop_cycles": ("crop_cycles.json", CropCycle),
    "reminders": ("reminders.json", Reminder),
}


class MemoryStore:
    """
    Listas por entidad.

    Los endpoints `def` de FastAPI corren en un threadpool: toda mutación pasa
    por uow(), que toma `lock` para que next_id + insert sean atómicos.
    """

    def __init__(
            self,
            *,
            customers: Iterable[Customer] = (),
            orders: Iterable[Order] = (),
            activities: Iterable[Activity] = (),
            crop_cycles: Iterable[CropCycle] = (),
            reminders: Iterable[Reminder] = (),
    ):
        self.customers: list[Customer] = list(customers)
        self.orders: list[Order] = list(orders)
        self.activities: list[Activity] = list(activities)
        self.crop_cycles: list[CropCycle] = list(crop_cycles)
        self.reminders: list[Reminder] = list(reminders)
        self.lock = threading.RLock()

    @classmethod
    def from_seed(cls, seed_dir: Path) -> MemoryStore:
        """
        Carga los datasets mock. Cada registro se valida con su modelo;
        un archivo faltante deja la lista vacía.
        """
        data = {}
        for attr, (filename, model) in SEED_FILES.items():
            path = Path(seed_dir) / filename
            if not path.exists():
                logger.warning("Seed file %s not found; %s starts empty", path, attr)
                continue
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
            data[attr] = [model.model_validate(item) for item in raw]
            logger.debug("Loaded %d %s from %s", len(data[attr]), attr, path)

        store = cls(**data)
        logger.info(
            "Seed data loaded: %d customers, %d orders, %d activities, %d crop cycles, %d reminders",
            len(store.customers), len(store.orders), len(store.activities),
            len(store.crop_cycles), len(store.reminders),
        )
        return store


def next_id(records: Sequence[BaseModel], field: str) -> int:
    """ID nuevo = máximo actual + 1 (1 si la lista está vacía)."""
    return max((getattr(r, field) for r in records), default=0) + 1


def find_index(records: Sequence[BaseModel], field: str, value: int) -> int | None:
    for i, record in enumerate(records):
        if getattr(record, field) == value:
            return i
    return None


@contextmanager
def uow(store: MemoryStore):
    """
    Uso:
        with uow(store):
            ... # lecturas y escrituras
    Un solo hilo a la vez modifica el store.
    """
    with store.lock:
        yield store


def transactional(func):
    """Ejecuta una operación de servicio `func(store, ...)` dentro de uow(store)."""
    @wraps(func)
    def wrapper(store: MemoryStore, *args, **kwargs):
        with uow(store):
            return func(store, *args, **kwargs)
    return wrapper


# ============================================================================
# Store global del proceso
# ============================================================================

_store: MemoryStore | None = None
_store_lock = threading.Lock()


def _build_store() -> MemoryStore:
    if settings.LOAD_SEED_DATA:
        return MemoryStore.from_seed(settings.SEED_DATA_DIR)
    return MemoryStore()


def get_store() -> MemoryStore:
    """Dependencia FastAPI: retorna el store del proceso (lo crea la primera vez)."""
    global _store
    with _store_lock:
        if _store is None:
            _store = _build_store()
    return _store


def reset_store() -> MemoryStore:
    """Descarta todos los cambios y recarga los datos mock."""
    global _store
    with _store_lock:
        _store = _build_store()
    return _store
