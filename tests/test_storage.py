"""DynamoDB snapshot okuma ve soru geçmişi testleri."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from src.models.supply_chain import AnalysisResult, ShipmentStatus
from src.storage.query_log import DynamoDBQueryLog
from src.storage.records import (
    parse_timestamp,
    record_to_item,
    shipment_from_item,
    supplier_from_item,
    to_native,
)
from src.storage.snapshot_provider import DynamoDBSnapshotProvider, SnapshotUnavailableError
from tests.factories import (
    DAY,
    NOW,
    fake_dynamodb,
    make_alert,
    make_inventory,
    make_product,
    make_shipment,
    make_supplier,
)


def _client_error(operation: str = "Scan") -> ClientError:
    return ClientError({"Error": {"Code": "ResourceNotFoundException", "Message": "yok"}}, operation)


class TestRecordConversion:

    def test_floats_become_decimal(self):
        item = record_to_item(make_product(unit_price=89.99))
        assert item["unit_price"] == Decimal("89.99")

    def test_optional_none_fields_dropped(self):
        item = record_to_item(make_shipment())
        assert "delay_reason" not in item
        assert item["status"] == "in_transit"
        assert item["order_date"] == (NOW - 10 * DAY).isoformat()

    def test_decimal_to_native(self):
        assert to_native({"a": Decimal("3"), "b": [Decimal("1.5")]}) == {"a": 3, "b": [1.5]}

    def test_parse_item_back(self):
        shipment = make_shipment(status=ShipmentStatus.DELAYED, delay_reason="Weather")
        parsed = shipment_from_item(record_to_item(shipment))
        assert parsed == shipment

    def test_naive_timestamp_assumed_utc(self):
        assert parse_timestamp("2025-06-01T12:00:00") == NOW

    def test_z_suffix_timestamp(self):
        assert parse_timestamp("2025-06-01T12:00:00Z") == NOW
        assert parse_timestamp("2025-06-01T12:00:00.000Z") == NOW

    def test_unknown_status_raises(self):
        item = record_to_item(make_supplier())
        item["status"] = "archived"
        with pytest.raises(ValueError):
            supplier_from_item(item)


class TestSnapshotProvider:

    def test_fetch_snapshot_joins_collections(self):
        dynamodb = fake_dynamodb({
            "Suppliers": [make_supplier()],
            "Products": [make_product()],
            "Inventory": [make_inventory(available=35)],
            "Shipments": [make_shipment()],
            "Alerts": [make_alert()],
        })
        snapshot = DynamoDBSnapshotProvider(dynamodb).fetch_snapshot()
        assert len(snapshot.suppliers) == 1
        assert snapshot.inventory[0].needs_reorder is True
        assert snapshot.shipments[0].supplier_name == "Global Electronics Co."
        assert len(snapshot.alerts) == 1

    def test_shipments_newest_first_and_limited(self):
        dynamodb = fake_dynamodb({
            "Shipments": [
                make_shipment("OLD", order_date=NOW - 20 * DAY),
                make_shipment("NEW", order_date=NOW - 1 * DAY),
                make_shipment("MID", order_date=NOW - 5 * DAY),
            ],
        })
        shipments = DynamoDBSnapshotProvider(dynamodb).fetch_shipments(limit=2)
        assert [s.shipment_id for s in shipments] == ["NEW", "MID"]

    def test_alerts_scan_filters_unresolved(self):
        dynamodb = fake_dynamodb({"Alerts": [make_alert()]})
        provider = DynamoDBSnapshotProvider(dynamodb)
        provider.fetch_alerts()
        assert "FilterExpression" in provider.alerts_table.scan.call_args.kwargs

    def test_scan_follows_pagination(self):
        dynamodb = fake_dynamodb({})
        provider = DynamoDBSnapshotProvider(dynamodb)
        provider.suppliers_table.scan.side_effect = [
            {"Items": [record_to_item(make_supplier("S1"))], "LastEvaluatedKey": {"supplier_id": "S1"}},
            {"Items": [record_to_item(make_supplier("S2"))]},
        ]
        assert [s.supplier_id for s in provider.fetch_suppliers()] == ["S1", "S2"]

    def test_client_error_raises_snapshot_unavailable(self):
        dynamodb = fake_dynamodb({})
        provider = DynamoDBSnapshotProvider(dynamodb)
        provider.products_table.scan.side_effect = _client_error()
        with pytest.raises(SnapshotUnavailableError):
            provider.fetch_snapshot()


class TestQueryLog:

    def test_save_writes_record(self):
        dynamodb = MagicMock()
        log = DynamoDBQueryLog(dynamodb)
        result = AnalysisResult("Found 1 delayed shipments.", ("a", "b"), ("c",))

        record = log.save("user-1", "any delays?", result)

        assert record is not None
        assert record.insights == ["a", "b"]
        item = log.table.put_item.call_args.kwargs["Item"]
        assert item["query_id"] == record.query_id
        assert item["user_id"] == "user-1"
        assert item["recommendations"] == ["c"]

    def test_save_failure_returns_none(self):
        dynamodb = MagicMock()
        log = DynamoDBQueryLog(dynamodb)
        log.table.put_item.side_effect = _client_error("PutItem")
        assert log.save("user-1", "q", AnalysisResult("r")) is None

    def test_history_queries_user_index(self):
        dynamodb = MagicMock()
        log = DynamoDBQueryLog(dynamodb)
        log.table.query.return_value = {"Items": [{
            "query_id": "Q1", "user_id": "user-1", "question": "q", "response": "r",
            "insights": [], "recommendations": [], "timestamp": NOW.isoformat(),
        }]}

        history = log.history("user-1", limit=5)

        assert history[0].query_id == "Q1"
        kwargs = log.table.query.call_args.kwargs
        assert kwargs["IndexName"] == "UserTimeIndex"
        assert kwargs["ScanIndexForward"] is False
        assert kwargs["Limit"] == 5

    def test_history_failure_returns_empty(self):
        dynamodb = MagicMock()
        log = DynamoDBQueryLog(dynamodb)
        log.table.query.side_effect = _client_error("Query")
        assert log.history("user-1") == []
