"""Analizörler ve dashboard tarafından paylaşılan toplama yardımcıları."""

from __future__ import annotations

import math
from collections import Counter
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from src.models.supply_chain import (
    UNKNOWN_LABEL,
    Alert,
    InventoryStatus,
    Product,
    ShipmentDetails,
    ShipmentStatus,
    Supplier,
)

ACTIVE_SHIPMENT_STATUSES = frozenset({ShipmentStatus.ORDERED, ShipmentStatus.IN_TRANSIT})
LOW_RELIABILITY_THRESHOLD = 70
UPCOMING_DELIVERY_WINDOW = timedelta(days=7)


def round_half_up(value: float) -> int:
    """0.5 değerleri yukarı yuvarlar (Python'un banker yuvarlaması yerine)."""
    return int(math.floor(value + 0.5))


def format_amount(value: float) -> str:
    """Tutarı iki ondalığa yuvarlar, gereksiz sıfırları atar (17998.00 -> 17998)."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def active_shipments(shipments: Iterable[ShipmentDetails]) -> list[ShipmentDetails]:
    return [s for s in shipments if s.status in ACTIVE_SHIPMENT_STATUSES]


def delayed_shipments(shipments: Iterable[ShipmentDetails]) -> list[ShipmentDetails]:
    return [s for s in shipments if s.status == ShipmentStatus.DELAYED]


def upcoming_deliveries(
    shipments: Iterable[ShipmentDetails], now: datetime
) -> list[ShipmentDetails]:
    """Beklenen teslim tarihi (now, now + 7 gün) aralığında olan sevkiyatlar.

    Sıralama snapshot sırasıdır, tarih sırası değil.
    """
    horizon = now + UPCOMING_DELIVERY_WINDOW
    return [
        s for s in shipments
        if now < s.shipment.expected_delivery_date < horizon
    ]


def most_common_delay_reason(shipments: Iterable[ShipmentDetails]) -> str:
    """En sık gecikme nedeni; eşitlikte ilk karşılaşılan neden kazanır."""
    reasons = Counter(
        s.shipment.delay_reason for s in shipments if s.shipment.delay_reason
    )
    if not reasons:
        return UNKNOWN_LABEL
    # Counter ekleme sırasını korur, max ilk en büyüğü döndürür
    return max(reasons, key=reasons.get)


def distinct_supplier_names(shipments: Iterable[ShipmentDetails]) -> list[str]:
    names: list[str] = []
    for s in shipments:
        if s.supplier_name not in names:
            names.append(s.supplier_name)
    return names


def low_stock_items(inventory: Iterable[InventoryStatus]) -> list[InventoryStatus]:
    return [item for item in inventory if item.needs_reorder]


def out_of_stock_items(inventory: Iterable[InventoryStatus]) -> list[InventoryStatus]:
    return [item for item in inventory if item.available_stock == 0]


def calculate_reorder_value(
    items: Iterable[InventoryStatus], products: Iterable[Product]
) -> float:
    """Yeniden sipariş gereken kalemlerin toplam değeri (miktar x birim fiyat).

    Ürünü bulunamayan kalem 0 katkı yapar.
    """
    product_index = {p.product_id: p for p in products}
    total = 0.0
    for item in items:
        product = product_index.get(item.product_id)
        if product is None:
            continue
        total += product.reorder_quantity * product.unit_price
    return total


def reorder_percentage(low_stock_count: int, total_items: int) -> float:
    if total_items == 0:
        return 0.0
    return low_stock_count / total_items * 100


def average_reliability(suppliers: Sequence[Supplier]) -> int:
    """Ortalama güvenilirlik skoru, tamsayıya yuvarlanmış. Tedarikçi yoksa 0."""
    if not suppliers:
        return 0
    total = sum(s.reliability_score for s in suppliers)
    return round_half_up(total / len(suppliers))


def low_reliability_suppliers(suppliers: Iterable[Supplier]) -> list[Supplier]:
    return [s for s in suppliers if s.reliability_score < LOW_RELIABILITY_THRESHOLD]


def unresolved_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    return [a for a in alerts if not a.is_resolved]
