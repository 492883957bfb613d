"""Sohbet arayuzu komut ve formatlama testleri."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

from chat import (
    COMMANDS,
    HELP_TEXT,
    USER_ID,
    format_inventory,
    format_shipments,
    handle_input,
)


def _mock_manager(data) -> MagicMock:
    manager = MagicMock()
    manager.call_tool = AsyncMock(return_value={"success": True, "data": data})
    return manager


class TestCommands:

    def test_dashboard_read_commands_listed(self):
        assert COMMANDS["/inventory"][0] == "get_inventory_status"
        assert COMMANDS["/shipments"][0] == "get_shipments"
        assert "/inventory" in HELP_TEXT
        assert "/shipments" in HELP_TEXT

    def test_inventory_command_calls_tool(self):
        manager = _mock_manager([])
        output = asyncio.run(handle_input("/inventory", manager))
        manager.call_tool.assert_awaited_once_with("get_inventory_status", {})
        assert output == "Stok kaydi yok."

    def test_shipments_command_calls_tool(self):
        manager = _mock_manager([])
        asyncio.run(handle_input("/Shipments", manager))
        manager.call_tool.assert_awaited_once_with("get_shipments", {})

    def test_history_sends_user(self):
        manager = _mock_manager([])
        asyncio.run(handle_input("/history", manager))
        manager.call_tool.assert_awaited_once_with("get_query_history", {"user_id": USER_ID})

    def test_question_goes_to_ask_tool(self):
        manager = _mock_manager({"response": "Found 1 delayed shipments.", "insights": [], "recommendations": []})
        output = asyncio.run(handle_input("any delays?", manager))
        assert manager.call_tool.await_args.args[0] == "ask_question"
        assert output == "Found 1 delayed shipments."

    def test_tool_error_reported(self):
        manager = MagicMock()
        manager.call_tool = AsyncMock(return_value={"success": False, "error": "Snapshot okunamadi"})
        assert asyncio.run(handle_input("/shipments", manager)) == "Hata: Snapshot okunamadi"


class TestFormatting:

    def test_inventory_rows(self):
        data = [
            {"product_name": "Wireless Headphones", "product_sku": "WH-001",
             "available_stock": 35, "reorder_point": 50, "needs_reorder": True},
            {"product_name": "Smart Watch", "product_sku": "SW-002",
             "available_stock": 80, "reorder_point": 30, "needs_reorder": False},
        ]
        assert format_inventory(data).splitlines() == [
            "  Wireless Headphones (WH-001): 35 available / reorder at 50  REORDER",
            "  Smart Watch (SW-002): 80 available / reorder at 30",
        ]

    def test_shipment_rows(self):
        data = [
            {"shipment_id": "SHP002", "status": "delayed", "product_name": "Bluetooth Speaker",
             "quantity": 200, "supplier_name": "EuroTech Solutions",
             "expected_delivery_date": "2025-06-05 12:00:00+00:00",
             "delay_reason": "Customs clearance issues"},
            {"shipment_id": "SHP001", "status": "in_transit", "product_name": "Smart Watch",
             "quantity": 50, "supplier_name": "Global Electronics Co.",
             "expected_delivery_date": "2025-06-03 12:00:00+00:00", "delay_reason": None},
        ]
        assert format_shipments(data).splitlines() == [
            "  SHP002  [delayed] Bluetooth Speaker x200 from EuroTech Solutions, expected 2025-06-05"
            " (Customs clearance issues)",
            "  SHP001  [in_transit] Smart Watch x50 from Global Electronics Co., expected 2025-06-03",
        ]

    def test_empty_shipments(self):
        assert format_shipments([]) == "Sevkiyat yok."
