from datetime import datetime

from models import CropCycle, Reminder

STAMP = datetime(2024, 1, 1, 8, 0)


def make_cycle(crop_cycle_id, planting, harvest, crop_type="Corn", **extra):
    data = dict(
        crop_cycle_id=crop_cycle_id,
        crop_type=crop_type,
        field_location="North Field A",
        planting_date=planting,
        harvest_date=harvest,
        created_at=STAMP,
        updated_at=STAMP,
    )
    data.update(extra)
    return CropCycle(**data)


def make_reminder(reminder_id, reminder_date, **extra):
    data = dict(
        reminder_id=reminder_id,
        title=f"Reminder {reminder_id}",
        reminder_date=reminder_date,
        created_at=STAMP,
        updated_at=STAMP,
    )
    data.update(extra)
    return Reminder(**data)
