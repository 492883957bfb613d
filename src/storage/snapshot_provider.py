"""DynamoDB tablolarından nokta-zamanlı Snapshot okuma.

Tüm koleksiyonlar tek seferde okunur; analizörler canlı veriye tekrar erişmez.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from src.analysis.joins import build_snapshot, join_inventory, join_products, join_shipments
from src.models.supply_chain import (
    Alert,
    InventoryRecord,
    InventoryStatus,
    Product,
    ProductListing,
    Shipment,
    ShipmentDetails,
    Snapshot,
    Supplier,
    utc_now,
)
from src.storage.records import (
    alert_from_item,
    inventory_from_item,
    product_from_item,
    shipment_from_item,
    supplier_from_item,
)

logger = logging.getLogger(__name__)

SUPPLIERS_TABLE = "Suppliers"
PRODUCTS_TABLE = "Products"
INVENTORY_TABLE = "Inventory"
SHIPMENTS_TABLE = "Shipments"
ALERTS_TABLE = "Alerts"


class SnapshotUnavailableError(Exception):
    """Snapshot okunamadı (DynamoDB hatası)."""
    pass


class DynamoDBSnapshotProvider:
    """Tedarik zinciri koleksiyonlarını DynamoDB'den okur."""

    def __init__(self, dynamodb_resource: Any):
        self.suppliers_table = dynamodb_resource.Table(SUPPLIERS_TABLE)
        self.products_table = dynamodb_resource.Table(PRODUCTS_TABLE)
        self.inventory_table = dynamodb_resource.Table(INVENTORY_TABLE)
        self.shipments_table = dynamodb_resource.Table(SHIPMENTS_TABLE)
        self.alerts_table = dynamodb_resource.Table(ALERTS_TABLE)

    def _scan(self, table: Any, **kwargs: Any) -> list[dict]:
        """Tablonun tüm sayfalarını tarar."""
        try:
            resp = table.scan(**kwargs)
            items = list(resp.get("Items", []))
            while "LastEvaluatedKey" in resp:
                resp = table.scan(ExclusiveStartKey=resp["LastEvaluatedKey"], **kwargs)
                items.extend(resp.get("Items", []))
            return items
        except ClientError as e:
            logger.error("Tablo okuma hatası [%s]: %s", getattr(table, "name", table), e)
            raise SnapshotUnavailableError(str(e)) from e

    def _load(self, table: Any, parser: Callable[[dict], Any], **kwargs: Any) -> list:
        return [parser(item) for item in self._scan(table, **kwargs)]

    # --- Ham koleksiyonlar ---

    def fetch_suppliers(self) -> list[Supplier]:
        return self._load(self.suppliers_table, supplier_from_item)

    def fetch_products(self) -> list[Product]:
        return self._load(self.products_table, product_from_item)

    def fetch_inventory(self) -> list[InventoryRecord]:
        return self._load(self.inventory_table, inventory_from_item)

    def fetch_shipments(self, limit: Optional[int] = None) -> list[Shipment]:
        """Sevkiyatlar, en yeni sipariş tarihi önce."""
        shipments = self._load(self.shipments_table, shipment_from_item)
        shipments.sort(key=lambda s: s.order_date, reverse=True)
        return shipments[:limit] if limit is not None else shipments

    def fetch_alerts(self, limit: Optional[int] = None) -> list[Alert]:
        """Çözülmemiş uyarılar, en yeni önce."""
        alerts = self._load(
            self.alerts_table,
            alert_from_item,
            FilterExpression=Attr("is_resolved").eq(False),
        )
        alerts.sort(key=lambda a: a.created_at, reverse=True)
        return alerts[:limit] if limit is not None else alerts

    # --- Birleştirilmiş görünümler ---

    def get_products(self) -> list[ProductListing]:
        return join_products(self.fetch_products(), self.fetch_suppliers())

    def get_inventory_status(self) -> list[InventoryStatus]:
        return join_inventory(self.fetch_inventory(), self.fetch_products())

    def get_shipments(self, limit: Optional[int] = None) -> list[ShipmentDetails]:
        return join_shipments(
            self.fetch_shipments(limit), self.fetch_suppliers(), self.fetch_products()
        )

    def fetch_snapshot(
        self,
        shipment_limit: Optional[int] = None,
        alert_limit: Optional[int] = None,
    ) -> Snapshot:
        """Tüm koleksiyonları bir kez okuyup birleştirilmiş Snapshot döndürür."""
        taken_at = utc_now()
        suppliers = self.fetch_suppliers()
        products = self.fetch_products()
        inventory = self.fetch_inventory()
        shipments = self.fetch_shipments(shipment_limit)
        alerts = self.fetch_alerts(alert_limit)

        logger.info(
            "Snapshot okundu: %d tedarikçi, %d ürün, %d stok, %d sevkiyat, %d uyarı",
            len(suppliers), len(products), len(inventory), len(shipments), len(alerts),
        )
        return build_snapshot(suppliers, products, inventory, shipments, alerts, taken_at)
