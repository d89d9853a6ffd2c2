# services/dashboard_service.py
from enums.enums import CustomerStatusEnum, OrderStatusEnum, PaymentStatusEnum
from schemas.dashboard import DashboardMetricsOut
from services.activity_service import get_recent_activities
from services.order_service import PENDING_STATUSES
from utils.store import MemoryStore

# Ventana de actividades que muestra el dashboard
DASHBOARD_ACTIVITY_LIMIT = 30


def get_dashboard_metrics(store: MemoryStore) -> DashboardMetricsOut:
    """
    Métricas del dashboard.

    - pending_orders: Quote, Confirmed o Processing
    - total_revenue: solo pedidos Delivered y Paid (cobrado)
    - recent_activities: las últimas DASHBOARD_ACTIVITY_LIMIT actividades
    """
    customers = store.customers
    orders = store.orders

    revenue = sum(
        o.total_amount for o in orders
        if o.status == OrderStatusEnum.delivered and o.payment_status == PaymentStatusEnum.paid
    )
    return DashboardMetricsOut(
        total_customers=len(customers),
        active_customers=sum(1 for c in customers if c.status == CustomerStatusEnum.active),
        total_orders=len(orders),
        pending_orders=sum(1 for o in orders if o.status in PENDING_STATUSES),
        total_revenue=round(revenue, 2),
        recent_activities=len(get_recent_activities(store, limit=DASHBOARD_ACTIVITY_LIMIT)),
    )
