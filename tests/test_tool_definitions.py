from shopify_mcp.tool_definitions import (
    TOOL_DEFINITIONS,
    get_all_tool_names,
    get_scopes_for_tools,
    get_tools_by_category,
    get_tools_by_scope,
)


def test_names_are_unique():
    names = get_all_tool_names()
    assert len(names) == len(set(names)) == len(TOOL_DEFINITIONS)


def test_lookup_by_category_and_scope():
    assert {t.name for t in get_tools_by_category("shop")} == {"get_shop_info", "get_shop_policies"}
    assert all(t.scope == "write_products" for t in get_tools_by_scope("write_products"))
    assert get_tools_by_category("nonexistent") == []


def test_definitions_are_metadata_only():
    tool = TOOL_DEFINITIONS[0]
    assert (tool.name, tool.scope, tool.category) == ("get_orders", "read_all_orders", "orders")


def test_scopes_for_tools_are_sorted_and_deduplicated():
    names = ["get_products", "create_product", "get_collections", "not_a_tool"]
    assert get_scopes_for_tools(names) == ["read_products", "write_products"]
    assert get_scopes_for_tools([]) == []
