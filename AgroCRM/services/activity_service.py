# services/activity_service.py
from __future__ import annotations

import logging
from typing import Iterable

from enums.enums import ActivityTypeEnum
from models.activity import Activity
from schemas.activity import ActivityCreate, ActivityUpdate
from utils.datetime_utils import today_local
from utils.errors import NotFoundError
from utils.store import MemoryStore, find_index, next_id, transactional

logger = logging.getLogger(__name__)

ENTITY = "Activity"

SYSTEM_USER = "System User"


def _get_index(store: MemoryStore, activity_id: int) -> int:
    index = find_index(store.activities, "activity_id", activity_id)
    if index is None:
        raise NotFoundError(ENTITY, activity_id)
    return index


def _newest_first(activities: Iterable[Activity]) -> list[Activity]:
    return [
        a.model_copy(deep=True)
        for a in sorted(activities, key=lambda a: a.date, reverse=True)
    ]


def list_activities(store: MemoryStore, activity_type: ActivityTypeEnum | None = None) -> list[Activity]:
    """Actividades ordenadas por fecha (más reciente primero)."""
    return _newest_first(
        a for a in store.activities
        if activity_type is None or a.type == activity_type
    )


def get_activity(store: MemoryStore, activity_id: int) -> Activity:
    return store.activities[_get_index(store, activity_id)].model_copy(deep=True)


def get_activities_by_customer(store: MemoryStore, customer_id: int | str) -> list[Activity]:
    key = str(customer_id)
    return _newest_first(a for a in store.activities if a.customer_id == key)


def get_recent_activities(store: MemoryStore, limit: int = 10) -> list[Activity]:
    return _newest_first(store.activities)[:limit]


@transactional
def create_activity(store: MemoryStore, payload: ActivityCreate) -> Activity:
    """Registrar actividad: date = hoy, created_by = System User."""
    activity = Activity(
        activity_id=next_id(store.activities, "activity_id"),
        date=today_local(),
        created_by=SYSTEM_USER,
        **payload.model_dump(),
    )
    store.activities.append(activity)

    logger.info("%s activity %d logged for customer %s", activity.type.value, activity.activity_id, activity.customer_id)
    return activity.model_copy(deep=True)


@transactional
def update_activity(store: MemoryStore, activity_id: int, payload: ActivityUpdate) -> Activity:
    index = _get_index(store, activity_id)
    data = payload.model_dump(exclude_unset=True, exclude_none=True)

    updated = Activity.model_validate({**store.activities[index].model_dump(), **data})
    store.activities[index] = updated

    logger.info("Activity %d updated", activity_id)
    return updated.model_copy(deep=True)


@transactional
def delete_activity(store: MemoryStore, activity_id: int) -> Activity:
    deleted = store.activities.pop(_get_index(store, activity_id))
    logger.info("Activity %d deleted", activity_id)
    return deleted
