import json
from typing import Any, Dict


def to_text_content(result: Any) -> str:
    """
    Produce a text string suitable for MCP content.

    Strings pass through untouched; anything else is JSON-encoded with a
    two-space indent, falling back to ``str()`` for values JSON cannot encode.

    Args:
        result: Handler return value.

    Returns:
        The text to place in a ``{"type": "text"}`` content item.
    """
    if isinstance(result, str):
        return result
    try:
        return json.dumps(result, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(result)


def mcp_text_response(result: Any, is_error: bool = False) -> Dict[str, Any]:
    """Build a valid MCP result payload with text content only."""
    payload: Dict[str, Any] = {"content": [{"type": "text", "text": to_text_content(result)}]}
    if is_error:
        payload["isError"] = True
    return payload
