# services/reminder_service.py
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from enums.enums import ReminderPriorityEnum, ReminderTypeEnum
from models.reminder import Reminder
from schemas.reminder import ReminderCreate, ReminderUpdate
from utils.datetime_utils import add_days, now_local, today_local
from utils.errors import NotFoundError, RequiredFieldsError
from utils.store import MemoryStore, find_index, next_id, transactional

logger = logging.getLogger(__name__)

ENTITY = "Reminder"

# Un update con crop_cycle_id None desvincula el recordatorio; otros None se ignoran
_NULLABLE_FIELDS = ("crop_cycle_id",)


def _get_index(store: MemoryStore, reminder_id: int) -> int:
    index = find_index(store.reminders, "reminder_id", reminder_id)
    if index is None:
        raise NotFoundError(ENTITY, reminder_id)
    return index


def sort_reminders(reminders: Iterable[Reminder]) -> list[Reminder]:
    """Fecha ascendente; en la misma fecha, prioridad High > Medium > Low."""
    return sorted(reminders, key=lambda r: (r.reminder_date, -r.priority.rank))


# ============================================================================
# CRUD Básico
# ============================================================================

def list_reminders(store: MemoryStore) -> list[Reminder]:
    return [r.model_copy(deep=True) for r in store.reminders]


def get_reminder(store: MemoryStore, reminder_id: int) -> Reminder:
    return store.reminders[_get_index(store, reminder_id)].model_copy(deep=True)


@transactional
def create_reminder(store: MemoryStore, payload: ReminderCreate) -> Reminder:
    """
    Crear recordatorio.

    Validaciones:
    - title y reminder_date obligatorios

    Defaults: reminder_type Task, priority Medium, completed False.
    """
    missing = [f for f in ("title", "reminder_date") if not getattr(payload, f)]
    if missing:
        raise RequiredFieldsError(missing, "Title and reminder date are required")

    now = now_local()
    reminder = Reminder(
        reminder_id=next_id(store.reminders, "reminder_id"),
        title=payload.title,
        description=payload.description,
        reminder_date=payload.reminder_date,
        reminder_type=payload.reminder_type or ReminderTypeEnum.task,
        priority=payload.priority or ReminderPriorityEnum.medium,
        crop_cycle_id=payload.crop_cycle_id,
        completed=False,
        created_at=now,
        updated_at=now,
    )
    store.reminders.insert(0, reminder)

    logger.info('Reminder %d "%s" created for %s', reminder.reminder_id, reminder.title, reminder.reminder_date)
    return reminder.model_copy(deep=True)


@transactional
def update_reminder(store: MemoryStore, reminder_id: int, payload: ReminderUpdate) -> Reminder:
    """
    Actualizar recordatorio (merge parcial).

    Lógica automática:
    - completed False → True registra completed_at
    - completed True → False limpia completed_at
    """
    index = _get_index(store, reminder_id)
    current = store.reminders[index]

    data = {
        k: v for k, v in payload.model_dump(exclude_unset=True).items()
        if v is not None or k in _NULLABLE_FIELDS
    }

    now = now_local()
    if "completed" in data:
        if data["completed"] and not current.completed:
            data["completed_at"] = now
        elif not data["completed"]:
            data["completed_at"] = None
    data["updated_at"] = now

    updated = Reminder.model_validate({**current.model_dump(), **data})
    store.reminders[index] = updated

    logger.info('Reminder %d "%s" updated', reminder_id, updated.title)
    return updated.model_copy(deep=True)


@transactional
def mark_reminder_completed(store: MemoryStore, reminder_id: int) -> Reminder:
    index = _get_index(store, reminder_id)
    reminder = store.reminders[index]
    now = now_local()
    reminder.completed = True
    reminder.completed_at = now
    reminder.updated_at = now

    logger.info('Reminder %d "%s" marked as completed', reminder_id, reminder.title)
    return reminder.model_copy(deep=True)


@transactional
def delete_reminder(store: MemoryStore, reminder_id: int) -> Reminder:
    deleted = store.reminders.pop(_get_index(store, reminder_id))
    logger.info('Reminder %d "%s" deleted', reminder_id, deleted.title)
    return deleted


# ============================================================================
# Queries de Filtrado
# ============================================================================

def get_reminders_by_crop_cycle(store: MemoryStore, crop_cycle_id: int) -> list[Reminder]:
    return [
        r.model_copy(deep=True)
        for r in store.reminders
        if r.crop_cycle_id == crop_cycle_id
    ]


def get_upcoming_reminders(
        store: MemoryStore,
        days: int = 7,
        today: date | None = None,
) -> list[Reminder]:
    """
    Recordatorios pendientes con reminder_date en [hoy, hoy + days].
    Ordenar por reminder_date ASC.
    """
    today = today or today_local()
    horizon = add_days(today, days)

    upcoming = [
        r for r in store.reminders
        if today <= r.reminder_date <= horizon and not r.completed
    ]
    upcoming.sort(key=lambda r: r.reminder_date)
    return [r.model_copy(deep=True) for r in upcoming]
