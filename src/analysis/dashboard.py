"""Dashboard özet istatistikleri."""

from __future__ import annotations

from src.analysis.aggregations import (
    active_shipments,
    average_reliability,
    delayed_shipments,
    unresolved_alerts,
)
from src.models.supply_chain import DashboardStats, Snapshot


def compute_dashboard_stats(snapshot: Snapshot) -> DashboardStats:
    return DashboardStats(
        total_suppliers=len(snapshot.suppliers),
        total_products=len(snapshot.products),
        active_shipments=len(active_shipments(snapshot.shipments)),
        delayed_shipments=len(delayed_shipments(snapshot.shipments)),
        avg_supplier_reliability=average_reliability(snapshot.suppliers),
        active_alerts=len(unresolved_alerts(snapshot.alerts)),
    )
