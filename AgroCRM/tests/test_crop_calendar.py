"""Tests for harvest projection, overlap filter and calendar grid."""
import logging
from datetime import date, datetime, timedelta

import pytest

from services.crop_calendar import (
    CALENDAR_DAYS, CROP_TYPES, DEFAULT_GROWING_PERIOD_DAYS, FIELD_LOCATIONS,
    build_calendar_grid, calculate_harvest_date, calendar_grid_origin, cycle_overlaps,
)
from factories import make_cycle


@pytest.mark.parametrize("crop_type,days", sorted(CROP_TYPES.items()))
def test_harvest_date_uses_growing_period(crop_type, days):
    planting = date(2024, 3, 1)
    assert calculate_harvest_date(planting, crop_type) == planting + timedelta(days=days)


def test_corn_and_lettuce_periods():
    assert calculate_harvest_date(date(2024, 3, 1), "Corn") == date(2024, 6, 29)
    assert calculate_harvest_date(date(2024, 3, 1), "Lettuce") == date(2024, 4, 15)


def test_unknown_crop_defaults_to_90_days(caplog):
    with caplog.at_level(logging.WARNING):
        harvest = calculate_harvest_date(date(2024, 1, 1), "Dragonfruit")
    assert harvest == date(2024, 1, 1) + timedelta(days=DEFAULT_GROWING_PERIOD_DAYS)
    assert harvest == date(2024, 3, 31)
    assert "Dragonfruit" in caplog.text


def test_harvest_date_truncates_datetime():
    assert calculate_harvest_date(datetime(2024, 3, 1, 23, 59), "Wheat") == date(2024, 5, 30)


def test_field_locations():
    assert len(FIELD_LOCATIONS) == 12
    assert FIELD_LOCATIONS[0] == "North Field A"
    assert "West Field C" in FIELD_LOCATIONS


# -------------------------------------------------------------------
# Overlap
# -------------------------------------------------------------------

def test_cycle_containing_range_is_included():
    cycle = make_cycle(1, date(2024, 3, 1), date(2024, 6, 29))
    assert cycle_overlaps(cycle, date(2024, 4, 1), date(2024, 4, 30))


@pytest.mark.parametrize("start,end,expected", [
    (date(2024, 2, 1), date(2024, 3, 1), True),     # siembra en el borde
    (date(2024, 6, 29), date(2024, 7, 31), True),   # cosecha en el borde
    (date(2024, 2, 1), date(2024, 8, 1), True),     # rango contiene el ciclo
    (date(2024, 1, 1), date(2024, 2, 29), False),   # antes
    (date(2024, 6, 30), date(2024, 7, 31), False),  # después
])
def test_cycle_overlap_edges(start, end, expected):
    cycle = make_cycle(1, date(2024, 3, 1), date(2024, 6, 29))
    assert cycle_overlaps(cycle, start, end) is expected


# -------------------------------------------------------------------
# Calendar grid
# -------------------------------------------------------------------

@pytest.mark.parametrize("year", [2023, 2024, 2025, 2026])
@pytest.mark.parametrize("month", range(1, 13))
def test_grid_shape(year, month):
    reference = date(year, month, 15)
    grid = build_calendar_grid(reference, [], today=date(2000, 1, 1))

    assert len(grid) == CALENDAR_DAYS == 42
    assert grid[0].date.weekday() == 6  # domingo
    assert date(year, month, 1) in [cell.date for cell in grid]
    assert all(b.date - a.date == timedelta(days=1) for a, b in zip(grid, grid[1:]))


def test_grid_origin_when_month_starts_on_sunday():
    # 2024-09-01 fue domingo
    assert calendar_grid_origin(date(2024, 9, 20)) == date(2024, 9, 1)


def test_grid_origin_walks_back_to_sunday():
    # 2024-05-01 fue miércoles
    assert calendar_grid_origin(date(2024, 5, 31)) == date(2024, 4, 28)


def test_grid_marks_current_month_and_today():
    grid = build_calendar_grid(date(2024, 5, 10), [], today=date(2024, 5, 10))
    in_month = [c for c in grid if c.is_current_month]
    assert len(in_month) == 31
    assert [c.date for c in grid if c.is_today] == [date(2024, 5, 10)]


def test_grid_annotates_planting_and_harvest_days_only():
    corn = make_cycle(1, date(2024, 5, 3), date(2024, 8, 31))
    lettuce = make_cycle(2, date(2024, 4, 1), date(2024, 5, 16), crop_type="Lettuce")
    grid = build_calendar_grid(date(2024, 5, 1), [corn, lettuce], today=date(2000, 1, 1))
    by_date = {cell.date: [c.crop_cycle_id for c in cell.crop_cycles] for cell in grid}

    assert by_date[date(2024, 5, 3)] == [1]
    assert by_date[date(2024, 5, 16)] == [2]
    # días intermedios no se marcan
    assert by_date[date(2024, 5, 10)] == []
    assert sum(len(ids) for ids in by_date.values()) == 2


def test_same_day_cycle_listed_once():
    cycle = make_cycle(1, date(2024, 5, 3), date(2024, 5, 3))
    grid = build_calendar_grid(date(2024, 5, 1), [cycle], today=date(2000, 1, 1))
    cell = next(c for c in grid if c.date == date(2024, 5, 3))
    assert len(cell.crop_cycles) == 1
