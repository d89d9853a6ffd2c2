"""Tests for dashboard metrics."""
from enums.enums import OrderStatusEnum
from services.dashboard_service import get_dashboard_metrics
from services.order_service import update_order_status


def test_seed_metrics(seeded_store):
    metrics = get_dashboard_metrics(seeded_store)

    assert metrics.total_customers == 6
    assert metrics.active_customers == 5
    assert metrics.total_orders == 8
    assert metrics.pending_orders == 3
    # solo Delivered + Paid (pedidos 1 y 2)
    assert metrics.total_revenue == 15495.0
    assert metrics.recent_activities == 10


def test_metrics_follow_order_status(seeded_store):
    update_order_status(seeded_store, 3, OrderStatusEnum.delivered)
    metrics = get_dashboard_metrics(seeded_store)

    assert metrics.pending_orders == 2
    # pedido 3 sigue Pending de pago
    assert metrics.total_revenue == 15495.0


def test_empty_store(store):
    metrics = get_dashboard_metrics(store)
    assert metrics.total_customers == 0
    assert metrics.total_revenue == 0
    assert metrics.recent_activities == 0
