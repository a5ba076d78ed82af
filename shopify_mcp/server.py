from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from observability.metrics import record_tool_call
from utils import mcp_text_response

from . import __version__
from .categories import ALL_CATEGORIES, get_enabled_tool_count, resolve_enabled_categories
from .client import ShopifyGraphQLClient, make_transport
from .config import ClientConfig, Settings
from .dispatch import register_enabled_categories
from .errors import ToolArgumentError
from .registry import ToolRegistry
from .tool_definitions import get_scopes_for_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "shopify-graphql-mcp"


class ShopifyMCPServer:
    """MCP request handling over a registry of mounted tools.

    Module registrars receive this object as their server handle and mount
    tools through ``register_tool``.
    """

    def __init__(
        self,
        client: ShopifyGraphQLClient,
        settings: Optional[Settings] = None,
        registry: Optional[ToolRegistry] = None,
    ):
        self.client = client
        self.settings = settings or Settings()
        self.registry = registry or ToolRegistry()
        self.enabled_categories: List[str] = []

    # --- Registration API used by module registrars ---
    def register_tool(
        self,
        name: str,
        handler: Callable[[Dict[str, Any]], Any],
        *,
        description: str = "",
        input_schema: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.registry.register(name, handler, description=description, input_schema=input_schema)

    def mount_categories(self, enabled_categories: List[str], registrars=None) -> List[str]:
        self.enabled_categories = list(enabled_categories)
        return register_enabled_categories(self, self.client, self.enabled_categories, registrars=registrars)

    # --- Protocol ---
    def handle_message(self, message: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Handle one JSON-RPC message; notifications get no response."""
        method = message.get("method")
        msg_id = message.get("id")
        try:
            if method == "initialize":
                return self._result(msg_id, {
                    "protocolVersion": self.settings.protocol_version,
                    "capabilities": {"tools": {"listChanged": False}},
                    "serverInfo": {"name": SERVER_NAME, "version": __version__},
                })
            if method is not None and method.startswith("notifications/"):
                return None
            if method == "ping":
                return self._result(msg_id, {})
            if method == "tools/list":
                return self._result(msg_id, {"tools": self.registry.get_all_tool_schemas()})
            if method == "tools/call":
                return self.handle_tool_call(message)
            return self._error(msg_id, -32601, f"Method not found: {method}")
        except Exception:
            logger.exception("Error handling message %s", method)
            return self._error(msg_id, -32603, "Internal error")

    def handle_tool_call(self, message: Dict[str, Any]) -> Dict[str, Any]:
        """Invoke a tool. Failures inside the tool become error text, not protocol errors."""
        msg_id = message.get("id")
        params = message.get("params") or {}
        tool_name = params.get("name")
        arguments = params.get("arguments") or {}
        if not tool_name:
            return self._error(msg_id, -32602, "Missing tool name")
        if tool_name not in self.registry:
            return self._error(msg_id, -32601, f"Unknown tool: {tool_name}")

        start = time.time()
        try:
            result = self.registry.call_tool(tool_name, arguments)
        except ToolArgumentError as e:
            record_tool_call(tool_name, False, time.time() - start)
            return self._result(msg_id, mcp_text_response(f"Error: {e}", is_error=True))
        except Exception as e:
            logger.exception("Tool %s failed", tool_name)
            record_tool_call(tool_name, False, time.time() - start)
            return self._result(msg_id, mcp_text_response(f"Error: {e}", is_error=True))

        record_tool_call(tool_name, True, time.time() - start)
        return self._result(msg_id, mcp_text_response(result))

    # --- Built-in tools ---
    def register_builtin_tools(self) -> None:
        self.register_tool(
            "health_check",
            self._health_check,
            description="Check if the Shopify GraphQL MCP server is running and configured",
        )
        self.register_tool(
            "get_enabled_categories",
            self._enabled_categories_report,
            description="List the tool categories enabled for this server and the declared tool count",
        )

    def _health_check(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        configured = self.client.get_config().is_configured()
        return {
            "status": "healthy" if configured else "not_configured",
            "message": "Server is running and configured" if configured else "Server is running but missing credentials",
            "transport": getattr(self.client.transport, "name", type(self.client.transport).__name__),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    def _enabled_categories_report(self, arguments: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "enabled": list(self.enabled_categories),
            "declared_tool_count": get_enabled_tool_count(self.enabled_categories),
            "mounted_tool_count": len(self.registry),
            "required_scopes": get_scopes_for_tools(self.registry.list_tools()),
            "available": [
                {"name": c.name, "description": c.description, "tool_count": c.tool_count}
                for c in ALL_CATEGORIES
            ],
        }

    # --- Utilities ---
    @staticmethod
    def _result(msg_id: Any, result: Dict[str, Any]) -> Dict[str, Any]:
        return {"jsonrpc": "2.0", "id": msg_id, "result": result}

    @staticmethod
    def _error(msg_id: Any, code: int, message: str) -> Dict[str, Any]:
        return {"jsonrpc": "2.0", "id": msg_id, "error": {"code": code, "message": message}}


def build_server(
    env: Optional[Mapping[str, str]] = None,
    *,
    settings: Optional[Settings] = None,
    transport=None,
    registrars=None,
) -> ShopifyMCPServer:
    """Composition root: settings, client, built-in tools, enabled categories.

    Raises ConfigurationError when a Shopify credential is missing.
    """
    settings = settings or Settings.from_env(env)
    client = ShopifyGraphQLClient(
        ClientConfig.from_env(env),
        transport=transport if transport is not None else make_transport(settings.transport),
    )
    server = ShopifyMCPServer(client, settings)
    server.register_builtin_tools()

    enabled = resolve_enabled_categories(env)
    server.mount_categories(enabled, registrars=registrars)
    logger.info(
        "Enabled tool categories: %s (~%d tools declared, %d mounted)",
        ", ".join(enabled) if enabled else "none",
        get_enabled_tool_count(enabled),
        len(server.registry),
    )
    return server
