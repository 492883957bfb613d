"""DynamoDB item <-> model dönüşümleri.

DynamoDB sayıları Decimal döndürür ve float kabul etmez; zaman damgaları
ISO 8601 UTC string olarak saklanır.
"""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from src.models.supply_chain import (
    Alert,
    AlertSeverity,
    AlertType,
    InventoryRecord,
    Product,
    QueryRecord,
    Shipment,
    ShipmentStatus,
    Supplier,
    SupplierStatus,
    as_utc,
)


def to_native(obj):
    """Decimal ve iç içe yapıları JSON uyumlu Python tiplerine çevirir."""
    if isinstance(obj, Decimal):
        return int(obj) if obj == int(obj) else float(obj)
    if isinstance(obj, dict):
        return {k: to_native(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [to_native(i) for i in obj]
    return obj


def to_dynamo(obj):
    """float'ları Decimal'e, enum ve datetime'ları string'e çevirir; None alanları atar."""
    if isinstance(obj, bool):
        return obj
    if isinstance(obj, float):
        return Decimal(str(obj))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {k: to_dynamo(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, (list, tuple)):
        return [to_dynamo(i) for i in obj]
    return obj


def record_to_item(record: Any) -> dict:
    if not is_dataclass(record):
        raise TypeError(f"Dataclass bekleniyordu: {type(record).__name__}")
    return to_dynamo(asdict(record))


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    # Python 3.10 fromisoformat "Z" sonekini kabul etmez
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return as_utc(datetime.fromisoformat(value))


def supplier_from_item(item: dict) -> Supplier:
    item = to_native(item)
    return Supplier(
        supplier_id=item["supplier_id"],
        name=item["name"],
        location=item.get("location", ""),
        reliability_score=int(item["reliability_score"]),
        average_delivery_days=int(item.get("average_delivery_days", 0)),
        contact_email=item.get("contact_email", ""),
        status=SupplierStatus(item.get("status", "active")),
    )


def product_from_item(item: dict) -> Product:
    item = to_native(item)
    return Product(
        product_id=item["product_id"],
        name=item["name"],
        sku=item["sku"],
        category=item.get("category", ""),
        unit_price=float(item.get("unit_price", 0)),
        reorder_point=int(item.get("reorder_point", 0)),
        reorder_quantity=int(item.get("reorder_quantity", 0)),
        supplier_id=item["supplier_id"],
    )


def inventory_from_item(item: dict) -> InventoryRecord:
    item = to_native(item)
    return InventoryRecord(
        inventory_id=item["inventory_id"],
        product_id=item["product_id"],
        current_stock=int(item.get("current_stock", 0)),
        reserved_stock=int(item.get("reserved_stock", 0)),
        available_stock=int(item.get("available_stock", 0)),
        warehouse_location=item.get("warehouse_location", ""),
        last_updated=parse_timestamp(item["last_updated"]),
    )


def shipment_from_item(item: dict) -> Shipment:
    item = to_native(item)
    return Shipment(
        shipment_id=item["shipment_id"],
        supplier_id=item["supplier_id"],
        product_id=item["product_id"],
        quantity=int(item.get("quantity", 0)),
        order_date=parse_timestamp(item["order_date"]),
        expected_delivery_date=parse_timestamp(item["expected_delivery_date"]),
        status=ShipmentStatus(item["status"]),
        actual_delivery_date=parse_timestamp(item.get("actual_delivery_date")),
        tracking_number=item.get("tracking_number"),
        delay_reason=item.get("delay_reason"),
    )


def alert_from_item(item: dict) -> Alert:
    item = to_native(item)
    return Alert(
        alert_id=item["alert_id"],
        type=AlertType(item["type"]),
        title=item.get("title", ""),
        description=item.get("description", ""),
        severity=AlertSeverity(item["severity"]),
        is_resolved=bool(item.get("is_resolved", False)),
        created_at=parse_timestamp(item["created_at"]),
        product_id=item.get("product_id"),
        supplier_id=item.get("supplier_id"),
    )


def query_from_item(item: dict) -> QueryRecord:
    item = to_native(item)
    return QueryRecord(
        query_id=item["query_id"],
        user_id=item["user_id"],
        question=item["question"],
        response=item["response"],
        insights=list(item.get("insights", [])),
        recommendations=list(item.get("recommendations", [])),
        timestamp=item["timestamp"],
    )
