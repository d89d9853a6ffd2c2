from enum import Enum

# =====================================================
# 👥 CLIENTES
# =====================================================
class CustomerStatusEnum(str, Enum):
    active = "Active"
    inactive = "Inactive"


# =====================================================
# 🧾 PEDIDOS
# =====================================================
class OrderStatusEnum(str, Enum):
    quote = "Quote"
    confirmed = "Confirmed"
    processing = "Processing"
    shipped = "Shipped"
    delivered = "Delivered"
    cancelled = "Cancelled"


class PaymentStatusEnum(str, Enum):
    pending = "Pending"
    paid = "Paid"
    overdue = "Overdue"
    failed = "Failed"
    not_required = "Not Required"


# =====================================================
# 📞 ACTIVIDADES
# =====================================================
class ActivityTypeEnum(str, Enum):
    phone_call = "Phone Call"
    email = "Email"
    meeting = "Meeting"
    site_visit = "Site Visit"
    order_delivery = "Order Delivery"
    order_shipped = "Order Shipped"
    quote_sent = "Quote Sent"
    payment_received = "Payment Received"


# =====================================================
# 🌱 CICLOS DE CULTIVO
# =====================================================
class CropCycleStatusEnum(str, Enum):
    planned = "Planned"
    growing = "Growing"
    harvested = "Harvested"

    @classmethod
    def _missing_(cls, value):
        """Permitir valores independientemente del case ("growing" -> Growing)"""
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None


# =====================================================
# ⏰ RECORDATORIOS
# =====================================================
class ReminderPriorityEnum(str, Enum):
    low = "Low"
    medium = "Medium"
    high = "High"

    @property
    def rank(self) -> int:
        """Peso para ordenar: High > Medium > Low"""
        return {"Low": 1, "Medium": 2, "High": 3}[self.value]


class ReminderTypeEnum(str, Enum):
    task = "Task"
    fertilizer = "Fertilizer"
    pest_control = "Pest Control"
    irrigation = "Irrigation"
    harvest = "Harvest"
    soil_management = "Soil Management"
    equipment = "Equipment"
    supply_management = "Supply Management"
    field_preparation = "Field Preparation"
