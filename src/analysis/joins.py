"""Kayıtlar arası birleştirme - stok/sevkiyat kayıtlarını ürün ve tedarikçi bilgisiyle zenginleştirir.

Referans verilen kayıt bulunamazsa hesaplama durmaz; etiketler "Unknown" olur.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from src.models.supply_chain import (
    UNKNOWN_LABEL,
    Alert,
    InventoryRecord,
    InventoryStatus,
    Product,
    ProductListing,
    Shipment,
    ShipmentDetails,
    Snapshot,
    Supplier,
    as_utc,
    utc_now,
)


def index_by_id(records: Iterable, attr: str) -> dict:
    """Kayıtları verilen id alanına göre sözlüğe çevirir."""
    return {getattr(r, attr): r for r in records}


def join_products(
    products: Iterable[Product], suppliers: Iterable[Supplier]
) -> list[ProductListing]:
    supplier_index = index_by_id(suppliers, "supplier_id")
    listings = []
    for product in products:
        supplier = supplier_index.get(product.supplier_id)
        listings.append(
            ProductListing(
                product=product,
                supplier_name=supplier.name if supplier else UNKNOWN_LABEL,
            )
        )
    return listings


def join_inventory_item(
    record: InventoryRecord, product: Optional[Product]
) -> InventoryStatus:
    """Tek bir stok kaydını ürünüyle birleştirir ve yeniden sipariş ihtiyacını hesaplar."""
    reorder_point = product.reorder_point if product else 0
    return InventoryStatus(
        record=record,
        product_name=product.name if product else UNKNOWN_LABEL,
        product_sku=product.sku if product else UNKNOWN_LABEL,
        reorder_point=reorder_point,
        needs_reorder=record.available_stock <= reorder_point,
    )


def join_inventory(
    records: Iterable[InventoryRecord], products: Iterable[Product]
) -> list[InventoryStatus]:
    product_index = index_by_id(products, "product_id")
    return [join_inventory_item(r, product_index.get(r.product_id)) for r in records]


def join_shipments(
    shipments: Iterable[Shipment],
    suppliers: Iterable[Supplier],
    products: Iterable[Product],
) -> list[ShipmentDetails]:
    supplier_index = index_by_id(suppliers, "supplier_id")
    product_index = index_by_id(products, "product_id")

    details = []
    for shipment in shipments:
        supplier = supplier_index.get(shipment.supplier_id)
        product = product_index.get(shipment.product_id)
        details.append(
            ShipmentDetails(
                shipment=shipment,
                supplier_name=supplier.name if supplier else UNKNOWN_LABEL,
                product_name=product.name if product else UNKNOWN_LABEL,
                product_sku=product.sku if product else UNKNOWN_LABEL,
            )
        )
    return details


def _shipment_as_utc(shipment: Shipment) -> Shipment:
    return replace(
        shipment,
        order_date=as_utc(shipment.order_date),
        expected_delivery_date=as_utc(shipment.expected_delivery_date),
        actual_delivery_date=as_utc(shipment.actual_delivery_date),
    )


def build_snapshot(
    suppliers: Iterable[Supplier],
    products: Iterable[Product],
    inventory: Iterable[InventoryRecord],
    shipments: Iterable[Shipment],
    alerts: Iterable[Alert],
    taken_at: Optional[datetime] = None,
) -> Snapshot:
    """Ham koleksiyonlardan birleştirilmiş, değişmez bir Snapshot üretir.

    Saat dilimi olmayan tarihler UTC kabul edilir.
    """
    suppliers = tuple(suppliers)
    products = tuple(products)
    shipments = [_shipment_as_utc(s) for s in shipments]
    return Snapshot(
        suppliers=suppliers,
        products=products,
        inventory=tuple(join_inventory(inventory, products)),
        shipments=tuple(join_shipments(shipments, suppliers, products)),
        alerts=tuple(alerts),
        taken_at=as_utc(taken_at) or utc_now(),
    )
