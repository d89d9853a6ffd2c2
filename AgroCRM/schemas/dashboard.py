# schemas/dashboard.py
from pydantic import BaseModel


class DashboardMetricsOut(BaseModel):
    total_customers: int
    active_customers: int
    total_orders: int
    pending_orders: int
    total_revenue: float
    recent_activities: int
