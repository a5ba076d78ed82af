from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .errors import ToolArgumentError

logger = logging.getLogger(__name__)

_JSON_TYPES = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "array": list,
    "object": dict,
}


@dataclass
class RegisteredTool:
    name: str
    handler: Callable[[Dict[str, Any]], Any]
    description: str = ""
    input_schema: Dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})

    def schema(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "inputSchema": self.input_schema}


def validate_arguments(args: Dict[str, Any], schema: Optional[Dict[str, Any]]) -> List[str]:
    """Check required keys and top-level JSON types. Returns a list of problems."""
    props = (schema or {}).get("properties", {})
    required = (schema or {}).get("required", [])
    errors = []
    for key in required:
        if key not in args or args.get(key) in (None, ""):
            errors.append(f"Missing required: {key}")
    for key, meta in props.items():
        if key not in args or args[key] is None or not isinstance(meta, dict):
            continue
        val = args[key]
        expected = _JSON_TYPES.get(meta.get("type"))
        # bool is an int subclass; reject it where a number is expected
        if expected is not None and (not isinstance(val, expected) or (isinstance(val, bool) and meta["type"] != "boolean")):
            errors.append(f"{key} expected {meta['type']}")
            continue
        enum = meta.get("enum")
        if enum is not None and val not in enum:
            errors.append(f"{key} must be one of {enum}")
    return errors


class ToolRegistry:
    """Tool registry mapping names to handlers, descriptions and input schemas.

    This is the server handle module registrars mount their tools on.
    Handlers take the arguments dict and return a string or a JSON-able value.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, RegisteredTool] = {}

    def register(
        self,
        name: str,
        handler: Callable[[Dict[str, Any]], Any],
        *,
        description: str = "",
        input_schema: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("Tool name must be a non-empty string")
        if name in self._tools:
            logger.warning("Tool %s registered more than once; keeping the latest handler", name)
        self._tools[name] = RegisteredTool(
            name=name,
            handler=handler,
            description=description,
            input_schema=input_schema or {"type": "object", "properties": {}},
        )

    def register_tool(
        self,
        name: str,
        handler: Callable[[Dict[str, Any]], Any],
        *,
        description: str = "",
        input_schema: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Registrar-facing alias of ``register``."""
        self.register(name, handler, description=description, input_schema=input_schema)

    def get_tool(self, name: str) -> Optional[RegisteredTool]:
        return self._tools.get(name)

    def list_tools(self) -> Dict[str, Callable[..., Any]]:
        return {k: v.handler for k, v in self._tools.items()}

    def get_all_tool_schemas(self) -> List[dict]:
        return [tool.schema() for tool in self._tools.values()]

    def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Any:
        tool = self._tools.get(name)
        if tool is None:
            raise KeyError(name)
        arguments = arguments or {}
        problems = validate_arguments(arguments, tool.input_schema)
        if problems:
            raise ToolArgumentError(name, problems)
        return tool.handler(arguments)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)
