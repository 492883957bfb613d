"""
Tedarik zinciri dashboard'u ile interaktif sohbet arayuzu - MCP Server entegrasyonlu.

MCP server subprocess olarak baslatilir, tum islemler MCP tool'lari uzerinden yapilir.
Kullanim:
    python chat.py
"""

import asyncio
import json
import logging
import os
import sys
from contextlib import AsyncExitStack

import env_loader  # noqa: F401
from mcp.client.session import ClientSession
from mcp.client.stdio import StdioServerParameters, stdio_client

REGION = os.environ.get("AWS_DEFAULT_REGION", "us-west-2")
USER_ID = os.environ.get("SUPPLY_CHAIN_USER", "local-user")
SERVER_SCRIPT = "mcp_servers/supply_chain_server.py"

# Logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger("chat")
# MCP log'larini biraz kisalim
logging.getLogger("mcp").setLevel(logging.WARNING)


class MCPManager:
    """Supply chain MCP server'ini subprocess olarak baslatir ve tool call yapar."""

    def __init__(self):
        self._session = None
        self._tools: dict[str, dict] = {}
        self._exit_stack = AsyncExitStack()

    async def start(self):
        params = StdioServerParameters(
            command=sys.executable,
            args=[SERVER_SCRIPT],
            env={**os.environ, "AWS_DEFAULT_REGION": REGION},
        )
        read, write = await self._exit_stack.enter_async_context(stdio_client(params))
        session = await self._exit_stack.enter_async_context(ClientSession(read, write))
        await session.initialize()
        self._session = session

        tools_resp = await session.list_tools()
        for tool in tools_resp.tools:
            self._tools[tool.name] = {"schema": tool.inputSchema, "description": tool.description}
        logger.info("MCP server baslatildi (%d tool)", len(tools_resp.tools))

    async def call_tool(self, tool_name: str, arguments: dict) -> dict:
        """Bir MCP tool'u cagir."""
        if tool_name not in self._tools:
            return {"success": False, "error": f"Unknown tool: {tool_name}"}
        if self._session is None:
            return {"success": False, "error": "Server not connected"}

        try:
            result = await self._session.call_tool(tool_name, arguments)
            for content in result.content:
                if hasattr(content, "text"):
                    return json.loads(content.text)
            return {"success": False, "error": "No text content in response"}
        except Exception as e:
            logger.error("MCP call error [%s]: %s", tool_name, e)
            return {"success": False, "error": str(e)}

    def list_tools(self) -> dict:
        return self._tools

    async def stop(self):
        try:
            await self._exit_stack.aclose()
        except (asyncio.CancelledError, Exception) as e:
            logger.debug("MCP shutdown (beklenen): %s", e)


# ============================================================
# Cikti formatlama
# ============================================================

def format_analysis(data: dict) -> str:
    lines = [data["response"]]
    if data.get("insights"):
        lines.append("\nInsights:")
        lines.extend(f"  - {i}" for i in data["insights"])
    if data.get("recommendations"):
        lines.append("\nRecommendations:")
        lines.extend(f"  - {r}" for r in data["recommendations"])
    return "\n".join(lines)


def format_stats(data: dict) -> str:
    return "\n".join([
        f"Total suppliers:      {data['total_suppliers']}",
        f"Total products:       {data['total_products']}",
        f"Active shipments:     {data['active_shipments']}",
        f"Delayed shipments:    {data['delayed_shipments']}",
        f"Avg reliability:      {data['avg_supplier_reliability']}%",
        f"Active alerts:        {data['active_alerts']}",
    ])


def format_alerts(data: list) -> str:
    if not data:
        return "Acik uyari yok."
    return "\n".join(f"  [{a['severity']}] {a['title']}: {a['description']}" for a in data)


def format_inventory(data: list) -> str:
    if not data:
        return "Stok kaydi yok."
    lines = []
    for item in data:
        flag = "  REORDER" if item["needs_reorder"] else ""
        lines.append(
            f"  {item['product_name']} ({item['product_sku']}): "
            f"{item['available_stock']} available / reorder at {item['reorder_point']}{flag}"
        )
    return "\n".join(lines)


def format_shipments(data: list) -> str:
    if not data:
        return "Sevkiyat yok."
    lines = []
    for s in data:
        line = (
            f"  {s['shipment_id']}  [{s['status']}] {s['product_name']} x{s['quantity']} "
            f"from {s['supplier_name']}, expected {str(s['expected_delivery_date'])[:10]}"
        )
        if s.get("delay_reason"):
            line += f" ({s['delay_reason']})"
        lines.append(line)
    return "\n".join(lines)


def format_history(data: list) -> str:
    if not data:
        return "Henuz soru sorulmadi."
    return "\n".join(f"  {q['timestamp'][:19]}  {q['question']}" for q in data)


COMMANDS = {
    "/stats": ("get_dashboard_stats", format_stats),
    "/alerts": ("get_alerts", format_alerts),
    "/inventory": ("get_inventory_status", format_inventory),
    "/shipments": ("get_shipments", format_shipments),
    "/history": ("get_query_history", format_history),
    "/seed": ("initialize_sample_data", lambda d: d["message"]),
}


async def handle_input(user_input: str, mcp: MCPManager) -> str:
    command = COMMANDS.get(user_input.lower())
    if command is None:
        tool_name, formatter = "ask_question", format_analysis
        arguments = {"question": user_input, "user_id": USER_ID}
    else:
        tool_name, formatter = command
        arguments = {"user_id": USER_ID} if tool_name == "get_query_history" else {}

    result = await mcp.call_tool(tool_name, arguments)
    if not result.get("success"):
        return f"Hata: {result.get('error', '?')}"
    return formatter(result["data"])


# ============================================================
# Main
# ============================================================

HELP_TEXT = """
Tedarik Zinciri Dashboard - MCP
  Ingilizce soru yaz (or. "Which supplier is causing delays?")

  /stats     - Dashboard ozetini goster
  /alerts    - Acik uyarilari goster
  /inventory - Stok durumunu goster
  /shipments - Son sevkiyatlari goster
  /history   - Son sorularini goster
  /seed      - Ornek veriyi yukle
  help       - Bu menuyu goster
  exit       - Cikis
"""


async def main():
    mcp = MCPManager()
    try:
        print("MCP server baslatiliyor...")
        await mcp.start()
    except Exception as e:
        print(f"Baslatma hatasi: {e}")
        await mcp.stop()
        sys.exit(1)

    print(HELP_TEXT)
    try:
        while True:
            try:
                user_input = input("\nSen: ").strip()
            except (EOFError, KeyboardInterrupt):
                print("\nGorusuruz!")
                break

            if not user_input:
                continue
            if user_input.lower() in ("cikis", "exit", "quit", "q"):
                print("Gorusuruz!")
                break
            if user_input.lower() in ("yardim", "help", "h"):
                print(HELP_TEXT)
                continue

            print(f"\n{await handle_input(user_input, mcp)}")
    finally:
        await mcp.stop()


if __name__ == "__main__":
    asyncio.run(main())
