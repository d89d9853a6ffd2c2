"""Tests for reminder CRUD and the upcoming-reminder filter."""
from datetime import date, timedelta

import pytest

from enums.enums import ReminderPriorityEnum, ReminderTypeEnum
from schemas.reminder import ReminderCreate, ReminderUpdate
from services import reminder_service as svc
from utils.errors import NotFoundError, RequiredFieldsError
from utils.store import MemoryStore
from factories import make_reminder

TODAY = date(2024, 4, 10)


def test_create_defaults(store):
    reminder = svc.create_reminder(store, ReminderCreate(title="  Spray fungicide ", reminder_date=TODAY))

    assert reminder.reminder_id == 1
    assert reminder.title == "Spray fungicide"
    assert reminder.reminder_type == ReminderTypeEnum.task
    assert reminder.priority == ReminderPriorityEnum.medium
    assert reminder.crop_cycle_id is None
    assert reminder.completed is False
    assert reminder.completed_at is None


def test_create_zero_crop_cycle_is_none(store):
    reminder = svc.create_reminder(store, ReminderCreate(title="x", reminder_date=TODAY, crop_cycle_id=0))
    assert reminder.crop_cycle_id is None


@pytest.mark.parametrize("payload,fields", [
    ({"reminder_date": TODAY}, ["title"]),
    ({"title": "   ", "reminder_date": TODAY}, ["title"]),
    ({"title": "Irrigate"}, ["reminder_date"]),
    ({}, ["title", "reminder_date"]),
])
def test_create_requires_title_and_date(store, payload, fields):
    with pytest.raises(RequiredFieldsError) as exc:
        svc.create_reminder(store, ReminderCreate(**payload))
    assert exc.value.fields == fields
    assert store.reminders == []


def test_create_prepends(store):
    first = svc.create_reminder(store, ReminderCreate(title="a", reminder_date=TODAY))
    second = svc.create_reminder(store, ReminderCreate(title="b", reminder_date=TODAY))
    assert second.reminder_id == first.reminder_id + 1
    assert [r.title for r in svc.list_reminders(store)] == ["b", "a"]


def test_get_not_found(store):
    with pytest.raises(NotFoundError) as exc:
        svc.get_reminder(store, 11)
    assert exc.value.entity_id == 11


def test_mark_completed(store):
    reminder = svc.create_reminder(store, ReminderCreate(title="a", reminder_date=TODAY))
    done = svc.mark_reminder_completed(store, reminder.reminder_id)
    assert done.completed is True
    assert done.completed_at is not None


def test_update_completed_toggles_timestamp(store):
    reminder = svc.create_reminder(store, ReminderCreate(title="a", reminder_date=TODAY))

    done = svc.update_reminder(store, reminder.reminder_id, ReminderUpdate(completed=True))
    assert done.completed_at is not None

    reopened = svc.update_reminder(store, reminder.reminder_id, ReminderUpdate(completed=False))
    assert reopened.completed is False
    assert reopened.completed_at is None


def test_update_merges_fields(store):
    reminder = svc.create_reminder(store, ReminderCreate(title="a", reminder_date=TODAY))
    updated = svc.update_reminder(
        store, reminder.reminder_id,
        ReminderUpdate(priority=ReminderPriorityEnum.high, reminder_date=TODAY + timedelta(days=2)),
    )
    assert updated.title == "a"
    assert updated.priority == ReminderPriorityEnum.high
    assert updated.reminder_date == date(2024, 4, 12)


def test_delete(store):
    reminder = svc.create_reminder(store, ReminderCreate(title="a", reminder_date=TODAY))
    svc.delete_reminder(store, reminder.reminder_id)
    assert store.reminders == []
    with pytest.raises(NotFoundError):
        svc.delete_reminder(store, reminder.reminder_id)


def test_by_crop_cycle():
    store = MemoryStore(reminders=[
        make_reminder(1, TODAY, crop_cycle_id=2),
        make_reminder(2, TODAY),
        make_reminder(3, TODAY, crop_cycle_id=2),
    ])
    assert [r.reminder_id for r in svc.get_reminders_by_crop_cycle(store, 2)] == [1, 3]


def test_sort_by_date_then_priority():
    reminders = [
        make_reminder(1, date(2024, 4, 12), priority="Low"),
        make_reminder(2, date(2024, 4, 11), priority="Low"),
        make_reminder(3, date(2024, 4, 12), priority="High"),
        make_reminder(4, date(2024, 4, 12), priority="Medium"),
    ]
    assert [r.reminder_id for r in svc.sort_reminders(reminders)] == [2, 3, 4, 1]


# -------------------------------------------------------------------
# Upcoming
# -------------------------------------------------------------------

def test_upcoming_horizon_and_completed():
    store = MemoryStore(reminders=[
        make_reminder(1, TODAY + timedelta(days=15)),               # horizonte + 1
        make_reminder(2, TODAY + timedelta(days=14)),               # último día incluido
        make_reminder(3, TODAY + timedelta(days=3), completed=True),
        make_reminder(4, TODAY),
        make_reminder(5, TODAY - timedelta(days=1)),                # pasado
        make_reminder(6, TODAY + timedelta(days=30)),
        make_reminder(7, TODAY + timedelta(days=5)),
    ])
    upcoming = svc.get_upcoming_reminders(store, days=14, today=TODAY)
    assert [r.reminder_id for r in upcoming] == [4, 7, 2]


def test_upcoming_default_week():
    store = MemoryStore(reminders=[
        make_reminder(1, TODAY + timedelta(days=7)),
        make_reminder(2, TODAY + timedelta(days=8)),
    ])
    assert [r.reminder_id for r in svc.get_upcoming_reminders(store, today=TODAY)] == [1]


def test_update_unlinks_crop_cycle_and_ignores_other_none(store):
    reminder = svc.create_reminder(
        store, ReminderCreate(title="a", description="Check pivots", reminder_date=TODAY, crop_cycle_id=3)
    )
    updated = svc.update_reminder(
        store, reminder.reminder_id, ReminderUpdate(crop_cycle_id=None, description=None, priority=None)
    )
    assert updated.crop_cycle_id is None
    assert updated.description == "Check pivots"
    assert updated.priority == ReminderPriorityEnum.medium
