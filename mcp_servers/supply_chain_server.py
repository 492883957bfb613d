"""
Supply Chain MCP Server

Provides tools for asking free-text supply chain questions and reading dashboard data
(stats, alerts, inventory, shipments, query history) from DynamoDB.
"""

import json
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
import env_loader  # noqa: F401

import boto3
from dataclasses import asdict
from typing import Dict, List
from mcp.server import Server
from mcp.types import Tool, TextContent

from data_layer.generators.sample_data import initialize_sample_data
from src.agents.supply_chain_analyst import SupplyChainAnalystAgent
from src.storage.snapshot_provider import SnapshotUnavailableError

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger("supply_chain_server")

app = Server("supply-chain")

REGION = os.environ.get("AWS_DEFAULT_REGION", "us-west-2")
DEFAULT_USER = "local-user"

# Ilk tool cagrisinda lazy init edilir
_agent = None


def get_agent() -> SupplyChainAnalystAgent:
    global _agent
    if _agent is None:
        _agent = SupplyChainAnalystAgent(
            region_name=REGION,
            dynamodb_resource=boto3.resource("dynamodb", region_name=REGION),
            s3_client=boto3.client("s3", region_name=REGION),
        )
    return _agent


def _result(data):
    return [TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False, default=str))]


@app.list_tools()
async def list_tools() -> List[Tool]:
    user_schema = {"type": "string", "description": "Optional: owner of the query history"}
    return [
        Tool(name="ask_question", description="Analyze a free-text supply chain question and store it in the query history",
             inputSchema={"type": "object", "properties": {
                 "question": {"type": "string"}, "user_id": user_schema,
             }, "required": ["question"]}),
        Tool(name="get_dashboard_stats", description="Get supplier, product, shipment and alert summary counts",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_alerts", description="List unresolved alerts, newest first",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_inventory_status", description="List inventory with product details and reorder flags",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_shipments", description="List recent shipments with supplier and product names",
             inputSchema={"type": "object", "properties": {}}),
        Tool(name="get_query_history", description="List the most recent questions of a user",
             inputSchema={"type": "object", "properties": {"user_id": user_schema}}),
        Tool(name="initialize_sample_data", description="Load sample suppliers, products, inventory, shipments and alerts",
             inputSchema={"type": "object", "properties": {}}),
    ]


@app.call_tool()
async def call_tool(name: str, arguments: dict) -> List[TextContent]:
    handlers = {
        "ask_question": lambda a: ask_question(a["question"], a.get("user_id", DEFAULT_USER)),
        "get_dashboard_stats": lambda a: get_dashboard_stats(),
        "get_alerts": lambda a: get_alerts(),
        "get_inventory_status": lambda a: get_inventory_status(),
        "get_shipments": lambda a: get_shipments(),
        "get_query_history": lambda a: get_query_history(a.get("user_id", DEFAULT_USER)),
        "initialize_sample_data": lambda a: seed_sample_data(),
    }
    handler = handlers.get(name)
    if not handler:
        raise ValueError(f"Unknown tool: {name}")
    return _result(handler(arguments))


# --- Implementation ---

def ask_question(question: str, user_id: str) -> Dict:
    try:
        result = get_agent().process(question, user_id)
        return {"success": True, "data": result.to_dict()}
    except SnapshotUnavailableError as e:
        return {"success": False, "error": str(e)}


def get_dashboard_stats() -> Dict:
    try:
        return {"success": True, "data": asdict(get_agent().get_dashboard_stats())}
    except SnapshotUnavailableError as e:
        return {"success": False, "error": str(e)}


def get_alerts() -> Dict:
    try:
        alerts = get_agent().get_alerts()
        return {"success": True, "count": len(alerts), "data": [asdict(a) for a in alerts]}
    except SnapshotUnavailableError as e:
        return {"success": False, "error": str(e)}


def get_inventory_status() -> Dict:
    try:
        items = get_agent().get_inventory_status()
        data = [
            {
                **asdict(item.record),
                "product_name": item.product_name,
                "product_sku": item.product_sku,
                "reorder_point": item.reorder_point,
                "needs_reorder": item.needs_reorder,
            }
            for item in items
        ]
        return {"success": True, "count": len(data), "data": data}
    except SnapshotUnavailableError as e:
        return {"success": False, "error": str(e)}


def get_shipments() -> Dict:
    try:
        shipments = get_agent().get_shipments()
        data = [
            {
                **asdict(s.shipment),
                "supplier_name": s.supplier_name,
                "product_name": s.product_name,
                "product_sku": s.product_sku,
            }
            for s in shipments
        ]
        return {"success": True, "count": len(data), "data": data}
    except SnapshotUnavailableError as e:
        return {"success": False, "error": str(e)}


def get_query_history(user_id: str) -> Dict:
    history = get_agent().get_query_history(user_id)
    return {"success": True, "count": len(history), "data": [asdict(q) for q in history]}


def seed_sample_data() -> Dict:
    return {"success": True, "data": initialize_sample_data(get_agent().dynamodb)}


if __name__ == "__main__":
    import asyncio
    from mcp.server.stdio import stdio_server

    async def run():
        async with stdio_server() as (read, write):
            await app.run(read, write, app.create_initialization_options())

    asyncio.run(run())
