"""Niyet kategorisi başına analizörler.

Her analizör saf bir fonksiyondur: Snapshot alır, AnalysisResult döndürür.
Veri kaynağına erişmez, yan etkisi yoktur.
"""

from __future__ import annotations

from src.analysis.aggregations import (
    LOW_RELIABILITY_THRESHOLD,
    active_shipments,
    average_reliability,
    calculate_reorder_value,
    delayed_shipments,
    distinct_supplier_names,
    format_amount,
    low_reliability_suppliers,
    low_stock_items,
    most_common_delay_reason,
    out_of_stock_items,
    reorder_percentage,
    unresolved_alerts,
    upcoming_deliveries,
)
from src.models.supply_chain import AnalysisResult, Snapshot


def analyze_delays(snapshot: Snapshot) -> AnalysisResult:
    delayed = delayed_shipments(snapshot.shipments)
    if not delayed:
        return AnalysisResult(response="No delayed shipments found in the system.")

    suppliers = distinct_supplier_names(delayed)
    return AnalysisResult(
        response=f"Found {len(delayed)} delayed shipments.",
        insights=(
            f"{len(suppliers)} suppliers have delayed shipments",
            f"Most common delay reason: {most_common_delay_reason(delayed)}",
        ),
        recommendations=(
            "Contact delayed suppliers for updated delivery timelines",
            "Consider alternative suppliers for critical items",
        ),
    )


def analyze_reorders(snapshot: Snapshot) -> AnalysisResult:
    low_stock = low_stock_items(snapshot.inventory)
    if not low_stock:
        return AnalysisResult(response="All inventory levels are above reorder points.")

    value = calculate_reorder_value(low_stock, snapshot.products)
    return AnalysisResult(
        response=f"Found {len(low_stock)} items that need reordering.",
        insights=(
            f"{len(low_stock)} products are below reorder points",
            f"Total value of items needing reorder: ${format_amount(value)}",
        ),
        recommendations=(
            "Place orders for low stock items immediately",
            "Review reorder points for frequently low items",
        ),
    )


def analyze_reliability(snapshot: Snapshot) -> AnalysisResult:
    low = low_reliability_suppliers(snapshot.suppliers)
    insights = [f"{len(low)} suppliers have reliability below {LOW_RELIABILITY_THRESHOLD}%"]
    recommendations: list[str] = []

    if low:
        # Filtrelenmiş listenin ilk elemanı; snapshot skora göre sıralı değilse gerçek minimum olmayabilir
        first = low[0]
        insights.append(f"Lowest reliability supplier: {first.name} ({first.reliability_score}%)")
        recommendations.append("Review contracts with low reliability suppliers")
        recommendations.append("Develop backup supplier relationships")

    return AnalysisResult(
        response=f"Average supplier reliability is {average_reliability(snapshot.suppliers)}%.",
        insights=tuple(insights),
        recommendations=tuple(recommendations),
    )


def analyze_inventory(snapshot: Snapshot) -> AnalysisResult:
    total_items = len(snapshot.inventory)
    low_stock_count = len(low_stock_items(snapshot.inventory))
    out_of_stock_count = len(out_of_stock_items(snapshot.inventory))

    insights = [
        f"{reorder_percentage(low_stock_count, total_items):.1f}% of items need reordering"
    ]
    recommendations: list[str] = []
    if out_of_stock_count > 0:
        insights.append(f"{out_of_stock_count} items are completely out of stock")
        recommendations.append("Urgently reorder out-of-stock items")

    return AnalysisResult(
        response=(
            f"Current inventory status: {total_items} total items, "
            f"{low_stock_count} need reorder, {out_of_stock_count} out of stock."
        ),
        insights=tuple(insights),
        recommendations=tuple(recommendations),
    )


def analyze_shipments(snapshot: Snapshot) -> AnalysisResult:
    active = active_shipments(snapshot.shipments)
    upcoming = upcoming_deliveries(snapshot.shipments, snapshot.taken_at)

    insights = [f"{len(upcoming)} deliveries expected this week"]
    if upcoming:
        # Snapshot sırasındaki ilk kayıt, en erken tarih değil
        next_delivery = upcoming[0]
        insights.append(
            f"Next delivery: {next_delivery.product_name} from {next_delivery.supplier_name}"
        )

    return AnalysisResult(
        response=f"There are {len(active)} active shipments.",
        insights=tuple(insights),
    )


def analyze_overview(snapshot: Snapshot) -> AnalysisResult:
    return AnalysisResult(
        response="I've analyzed your supply chain data. Here's what I found:",
        insights=(
            f"Total suppliers: {len(snapshot.suppliers)}",
            f"Total products: {len(snapshot.products)}",
            f"Active shipments: {len(active_shipments(snapshot.shipments))}",
            f"Active alerts: {len(unresolved_alerts(snapshot.alerts))}",
        ),
        recommendations=(
            "Review dashboard metrics for detailed insights",
            "Check alerts for any urgent issues",
        ),
    )
