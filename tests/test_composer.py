"""Soru -> cevap uçtan uca senaryoları."""

from src.analysis.composer import ANALYZERS, compose_response
from src.models.supply_chain import IntentCategory, ShipmentStatus
from tests.factories import (
    DAY,
    NOW,
    make_alert,
    make_inventory,
    make_product,
    make_shipment,
    make_snapshot,
    make_supplier,
)


class TestDispatch:

    def test_every_category_has_analyzer(self):
        assert set(ANALYZERS) == set(IntentCategory)

    def test_result_matches_analyzer_output(self):
        snapshot = make_snapshot(suppliers=[make_supplier()])
        expected = ANALYZERS[IntentCategory.RELIABILITY](snapshot)
        assert compose_response("how reliable are we", snapshot) == expected


class TestScenarios:

    def test_delayed_shipment_question(self):
        suppliers = [make_supplier("S1", "Global Electronics Co."), make_supplier("S3", "EuroTech Solutions")]
        products = [make_product("P1", "S1"), make_product("P3", "S3", name="Bluetooth Speaker")]
        shipments = [
            make_shipment("A", "S1", "P1", ShipmentStatus.IN_TRANSIT),
            make_shipment(
                "B", "S3", "P3", ShipmentStatus.DELAYED,
                expected=NOW - 2 * DAY, delay_reason="Customs clearance issues",
            ),
        ]
        snapshot = make_snapshot(suppliers=suppliers, products=products, shipments=shipments)

        result = compose_response("Which supplier is causing delays?", snapshot)
        assert result.response == "Found 1 delayed shipments."
        assert len(result.insights) == 2
        assert result.insights[1].endswith("Customs clearance issues")
        assert len(result.recommendations) == 2

    def test_reorder_question(self):
        products = [make_product(reorder_point=50, reorder_quantity=200, unit_price=89.99)]
        inventory = [make_inventory(available=35)]
        snapshot = make_snapshot(products=products, inventory=inventory)

        assert snapshot.inventory[0].needs_reorder is True
        result = compose_response("What should I reorder this week?", snapshot)
        assert result.response == "Found 1 items that need reordering."
        assert any("17998" in insight for insight in result.insights)

    def test_reliability_question(self):
        suppliers = [
            make_supplier("S1", score=85),
            make_supplier("S2", score=92),
            make_supplier("S3", score=78),
        ]
        result = compose_response(
            "Which suppliers have the lowest reliability?", make_snapshot(suppliers=suppliers)
        )
        assert result.response == "Average supplier reliability is 85%."
        assert result.insights == ("0 suppliers have reliability below 70%",)
        assert result.recommendations == ()

    def test_empty_question_returns_overview(self):
        snapshot = make_snapshot(
            suppliers=[make_supplier()],
            products=[make_product()],
            shipments=[make_shipment()],
            alerts=[make_alert()],
        )
        result = compose_response("", snapshot)
        assert result.response == "I've analyzed your supply chain data. Here's what I found:"
        assert len(result.insights) == 4
        assert result.insights[2] == "Active shipments: 1"

    def test_empty_snapshot_never_fails(self):
        snapshot = make_snapshot()
        for question in ("delay", "reorder", "reliable", "inventory", "delivery", "hi"):
            assert compose_response(question, snapshot).response
