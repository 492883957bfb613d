"""Tedarik zinciri veri modelleri - tedarikçi, ürün, stok, sevkiyat, uyarı."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

UNKNOWN_LABEL = "Unknown"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Saat dilimi olmayan zamanı UTC kabul eder."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class SupplierStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class ShipmentStatus(str, Enum):
    ORDERED = "ordered"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    DELAYED = "delayed"
    CANCELLED = "cancelled"


class AlertType(str, Enum):
    LOW_STOCK = "low_stock"
    SUPPLIER_DELAY = "supplier_delay"
    QUALITY_ISSUE = "quality_issue"
    REORDER_NEEDED = "reorder_needed"


class AlertSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class IntentCategory(str, Enum):
    DELAY = "delay"
    REORDER = "reorder"
    RELIABILITY = "reliability"
    INVENTORY = "inventory"
    SHIPMENT = "shipment"
    DEFAULT = "default"


@dataclass(frozen=True)
class Supplier:
    supplier_id: str
    name: str
    location: str
    reliability_score: int  # 0-100
    average_delivery_days: int
    contact_email: str
    status: SupplierStatus = SupplierStatus.ACTIVE


@dataclass(frozen=True)
class Product:
    product_id: str
    name: str
    sku: str
    category: str
    unit_price: float
    reorder_point: int
    reorder_quantity: int
    supplier_id: str


@dataclass(frozen=True)
class InventoryRecord:
    inventory_id: str
    product_id: str
    current_stock: int
    reserved_stock: int
    available_stock: int
    warehouse_location: str
    last_updated: datetime = field(default_factory=utc_now)


@dataclass(frozen=True)
class Shipment:
    shipment_id: str
    supplier_id: str
    product_id: str
    quantity: int
    order_date: datetime
    expected_delivery_date: datetime
    status: ShipmentStatus
    actual_delivery_date: Optional[datetime] = None
    tracking_number: Optional[str] = None
    delay_reason: Optional[str] = None


@dataclass(frozen=True)
class Alert:
    alert_id: str
    type: AlertType
    title: str
    description: str
    severity: AlertSeverity
    is_resolved: bool = False
    created_at: datetime = field(default_factory=utc_now)
    product_id: Optional[str] = None
    supplier_id: Optional[str] = None


# --- Join sonuçları (joins.py tarafından üretilir) ---


@dataclass(frozen=True)
class ProductListing:
    product: Product
    supplier_name: str


@dataclass(frozen=True)
class InventoryStatus:
    record: InventoryRecord
    product_name: str
    product_sku: str
    reorder_point: int
    needs_reorder: bool

    @property
    def product_id(self) -> str:
        return self.record.product_id

    @property
    def available_stock(self) -> int:
        return self.record.available_stock


@dataclass(frozen=True)
class ShipmentDetails:
    shipment: Shipment
    supplier_name: str
    product_name: str
    product_sku: str

    @property
    def status(self) -> ShipmentStatus:
        return self.shipment.status


@dataclass(frozen=True)
class Snapshot:
    """Tek bir analiz döngüsünün girdisi olan değişmez veri görüntüsü.

    ``taken_at`` okuma anıdır; zamana bağlı kurallar (yaklaşan teslimatlar)
    bu anı "şimdi" olarak kullanır.
    """

    suppliers: tuple[Supplier, ...] = ()
    products: tuple[Product, ...] = ()
    inventory: tuple[InventoryStatus, ...] = ()
    shipments: tuple[ShipmentDetails, ...] = ()
    alerts: tuple[Alert, ...] = ()
    taken_at: datetime = field(default_factory=utc_now)


# --- Analiz çıktıları ---


@dataclass(frozen=True)
class AnalysisResult:
    response: str
    insights: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "response": self.response,
            "insights": list(self.insights),
            "recommendations": list(self.recommendations),
        }


@dataclass(frozen=True)
class DashboardStats:
    total_suppliers: int
    total_products: int
    active_shipments: int
    delayed_shipments: int
    avg_supplier_reliability: int
    active_alerts: int


@dataclass
class QueryRecord:
    query_id: str
    user_id: str
    question: str
    response: str
    insights: list[str]
    recommendations: list[str]
    timestamp: str = field(default_factory=lambda: utc_now().isoformat())


@dataclass
class AnalystConfig:
    shipment_limit: int = 50
    alert_limit: int = 20
    history_limit: int = 10
