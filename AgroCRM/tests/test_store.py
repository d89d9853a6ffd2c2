"""Tests for the in-memory store: ids and serialized mutations."""
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from schemas.reminder import ReminderCreate
from services.reminder_service import create_reminder
from utils.store import MemoryStore, next_id, uow
from factories import make_reminder

TODAY = date(2024, 4, 10)


@pytest.fixture()
def fast_switching():
    previous = sys.getswitchinterval()
    sys.setswitchinterval(1e-6)
    try:
        yield
    finally:
        sys.setswitchinterval(previous)


def test_next_id_is_max_plus_one():
    records = [make_reminder(4, TODAY), make_reminder(9, TODAY), make_reminder(2, TODAY)]
    assert next_id(records, "reminder_id") == 10
    assert next_id([], "reminder_id") == 1


def test_concurrent_creates_get_unique_ids(store, fast_switching):
    def create(i):
        return create_reminder(store, ReminderCreate(title=f"r{i}", reminder_date=TODAY)).reminder_id

    with ThreadPoolExecutor(max_workers=16) as pool:
        ids = list(pool.map(create, range(400)))

    assert sorted(ids) == list(range(1, 401))
    assert len({r.reminder_id for r in store.reminders}) == 400


def test_mutation_waits_for_open_uow(store):
    done = threading.Event()

    def create():
        create_reminder(store, ReminderCreate(title="late", reminder_date=TODAY))
        done.set()

    with uow(store):
        worker = threading.Thread(target=create)
        worker.start()
        assert not done.wait(timeout=0.2)
        assert store.reminders == []

    worker.join(timeout=5)
    assert done.is_set()
    assert [r.title for r in store.reminders] == ["late"]


def test_from_seed_missing_dir_starts_empty(tmp_path):
    store = MemoryStore.from_seed(tmp_path)
    assert store.crop_cycles == []
    assert store.reminders == []
