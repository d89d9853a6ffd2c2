# models/__init__.py
from .base import Record  # re-export
from .customer import Customer, Location
from .order import Order, OrderItem
from .activity import Activity
from .crop_cycle import CropCycle
from .reminder import Reminder
