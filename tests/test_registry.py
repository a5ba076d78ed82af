import logging

import pytest

from shopify_mcp.errors import ToolArgumentError
from shopify_mcp.registry import validate_arguments

SCHEMA = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "first": {"type": "integer"},
        "enabled": {"type": "boolean"},
        "status": {"type": "string", "enum": ["ACTIVE", "DRAFT"]},
        "tags": {"type": "array"},
    },
    "required": ["id"],
}


def test_register_and_call(registry):
    registry.register("echo", lambda args: args["id"], description="Echo", input_schema=SCHEMA)
    assert "echo" in registry
    assert len(registry) == 1
    assert registry.call_tool("echo", {"id": "gid://shopify/Product/1"}) == "gid://shopify/Product/1"
    assert registry.get_all_tool_schemas() == [{"name": "echo", "description": "Echo", "inputSchema": SCHEMA}]


def test_default_schema_is_empty_object(registry):
    registry.register("noop", lambda args: "ok")
    assert registry.get_tool("noop").input_schema == {"type": "object", "properties": {}}
    assert registry.call_tool("noop") == "ok"


def test_reregistration_replaces_and_warns(registry, caplog):
    registry.register("dup", lambda args: 1)
    with caplog.at_level(logging.WARNING):
        registry.register("dup", lambda args: 2)
    assert registry.call_tool("dup", {}) == 2
    assert "dup registered more than once" in caplog.text
    assert list(registry.list_tools()) == ["dup"]


def test_unknown_tool_raises_key_error(registry):
    with pytest.raises(KeyError):
        registry.call_tool("missing", {})


def test_invalid_name_rejected(registry):
    with pytest.raises(ValueError):
        registry.register("", lambda args: None)


def test_call_checks_arguments(registry):
    registry.register("t", lambda args: "ran", input_schema=SCHEMA)
    with pytest.raises(ToolArgumentError) as exc:
        registry.call_tool("t", {"first": "ten"})
    assert "Missing required: id" in exc.value.problems
    assert "first expected integer" in exc.value.problems
    assert exc.value.tool_name == "t"


@pytest.mark.parametrize("args, problem", [
    ({"id": ""}, "Missing required: id"),
    ({"id": "1", "enabled": "yes"}, "enabled expected boolean"),
    ({"id": "1", "first": True}, "first expected integer"),
    ({"id": "1", "status": "GONE"}, "status must be one of ['ACTIVE', 'DRAFT']"),
    ({"id": "1", "tags": "a,b"}, "tags expected array"),
])
def test_validate_arguments_problems(args, problem):
    assert problem in validate_arguments(args, SCHEMA)


def test_validate_arguments_accepts_none_for_optional():
    assert validate_arguments({"id": "1", "first": None, "status": None}, SCHEMA) == []


def test_register_tool_mounts_like_register(registry):
    from handlers import shop

    shop.register(registry, None)
    assert "get_shop_info" in registry
    registry.register_tool("noop", lambda args: "ok", description="No-op")
    assert registry.get_tool("noop").description == "No-op"
