"""Örnek tedarik zinciri verisi.

3 tedarikçi, 3 ürün, 3 stok kaydı, 2 sevkiyat (biri yolda, biri gecikmiş)
ve 2 açık uyarı üretir. Tablolarda tedarikçi varsa hiçbir şey yazılmaz.
"""
import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Optional

from src.models.supply_chain import (
    Alert,
    AlertSeverity,
    AlertType,
    InventoryRecord,
    Product,
    Shipment,
    ShipmentStatus,
    Supplier,
    utc_now,
)
from src.storage.records import record_to_item

logger = logging.getLogger(__name__)

ALREADY_EXISTS_MESSAGE = "Sample data already exists"
INITIALIZED_MESSAGE = "Sample data initialized successfully"


def _new_id() -> str:
    return str(uuid.uuid4())


def build_sample_records(now: Optional[datetime] = None) -> dict[str, list]:
    """Tablo adı -> kayıt listesi."""
    now = now or utc_now()
    day = timedelta(days=1)

    global_electronics = Supplier(
        _new_id(), "Global Electronics Co.", "Shenzhen, China", 85, 14,
        "orders@globalelectronics.com",
    )
    fasttrack = Supplier(
        _new_id(), "FastTrack Logistics", "Los Angeles, USA", 92, 7,
        "support@fasttrack.com",
    )
    eurotech = Supplier(
        _new_id(), "EuroTech Solutions", "Berlin, Germany", 78, 21,
        "sales@eurotech.de",
    )

    headphones = Product(
        _new_id(), "Wireless Headphones", "WH-001", "Electronics", 89.99, 50, 200,
        global_electronics.supplier_id,
    )
    phone_case = Product(
        _new_id(), "Smartphone Case", "SC-002", "Accessories", 24.99, 100, 500,
        fasttrack.supplier_id,
    )
    speaker = Product(
        _new_id(), "Bluetooth Speaker", "BS-003", "Electronics", 149.99, 25, 100,
        eurotech.supplier_id,
    )

    inventory = [
        InventoryRecord(_new_id(), headphones.product_id, 45, 10, 35, "Warehouse A", now),
        InventoryRecord(_new_id(), phone_case.product_id, 250, 50, 200, "Warehouse B", now),
        InventoryRecord(_new_id(), speaker.product_id, 15, 5, 10, "Warehouse A", now),
    ]

    shipments = [
        Shipment(
            shipment_id=_new_id(),
            supplier_id=global_electronics.supplier_id,
            product_id=headphones.product_id,
            quantity=200,
            order_date=now - 10 * day,
            expected_delivery_date=now + 4 * day,
            status=ShipmentStatus.IN_TRANSIT,
            tracking_number="TRK123456789",
        ),
        Shipment(
            shipment_id=_new_id(),
            supplier_id=eurotech.supplier_id,
            product_id=speaker.product_id,
            quantity=100,
            order_date=now - 15 * day,
            expected_delivery_date=now - 2 * day,
            status=ShipmentStatus.DELAYED,
            delay_reason="Customs clearance issues",
        ),
    ]

    alerts = [
        Alert(
            alert_id=_new_id(),
            type=AlertType.LOW_STOCK,
            title="Low Stock Alert",
            description="Wireless Headphones stock is below reorder point",
            severity=AlertSeverity.HIGH,
            created_at=now,
            product_id=headphones.product_id,
        ),
        Alert(
            alert_id=_new_id(),
            type=AlertType.SUPPLIER_DELAY,
            title="Supplier Delay",
            description="EuroTech Solutions shipment delayed due to customs",
            severity=AlertSeverity.MEDIUM,
            created_at=now,
            supplier_id=eurotech.supplier_id,
        ),
    ]

    return {
        "Suppliers": [global_electronics, fasttrack, eurotech],
        "Products": [headphones, phone_case, speaker],
        "Inventory": inventory,
        "Shipments": shipments,
        "Alerts": alerts,
    }


def _table_has_data(table: Any) -> bool:
    """Tabloda veri var mı kontrol eder (hızlı scan, 1 item)."""
    resp = table.scan(Limit=1, Select="COUNT")
    return resp.get("Count", 0) > 0


def load_records_to_table(table: Any, records: list) -> int:
    """Kayıtları batch write ile tabloya yazar."""
    with table.batch_writer() as batch:
        for record in records:
            batch.put_item(Item=record_to_item(record))
    return len(records)


def initialize_sample_data(dynamodb_resource: Any, now: Optional[datetime] = None) -> dict:
    """Örnek veriyi yükler; tedarikçi tablosu doluysa dokunmaz."""
    if _table_has_data(dynamodb_resource.Table("Suppliers")):
        logger.info("Örnek veri zaten mevcut, atlanıyor")
        return {"message": ALREADY_EXISTS_MESSAGE}

    for table_name, records in build_sample_records(now).items():
        count = load_records_to_table(dynamodb_resource.Table(table_name), records)
        logger.info("%s: %d kayıt yüklendi", table_name, count)

    return {"message": INITIALIZED_MESSAGE}
