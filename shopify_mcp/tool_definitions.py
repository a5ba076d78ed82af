"""Access-scope metadata for the tools this server can mount.

Nothing enforces these scopes; the enabled-categories report lists the
scopes its mounted tools need so operators can check the access token.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    scope: str
    category: str


TOOL_DEFINITIONS: Tuple[ToolDefinition, ...] = (
    # Orders
    ToolDefinition("get_orders", "Fetch orders from the Shopify store with optional filtering", "read_all_orders", "orders"),
    ToolDefinition("get_order", "Fetch a specific order by ID", "read_all_orders", "orders"),
    ToolDefinition("create_order", "Create a new order in the Shopify store", "write_draft_orders", "orders"),
    ToolDefinition("update_order", "Update an existing order", "write_draft_orders", "orders"),
    ToolDefinition("delete_order", "Delete an order from the store", "write_draft_orders", "orders"),
    # Products
    ToolDefinition("get_products", "Fetch products from the Shopify store with optional filtering", "read_products", "products"),
    ToolDefinition("get_product", "Fetch a specific product by ID", "read_products", "products"),
    ToolDefinition("create_product", "Create a new product in the Shopify store", "write_products", "products"),
    ToolDefinition("update_product", "Update an existing product", "write_products", "products"),
    ToolDefinition("delete_product", "Delete a product from the store", "write_products", "products"),
    # Customers
    ToolDefinition("get_customers", "Fetch customers from the Shopify store with optional filtering", "read_customers", "customers"),
    ToolDefinition("get_customer", "Fetch a specific customer by ID", "read_customers", "customers"),
    ToolDefinition("create_customer", "Create a new customer in the Shopify store", "write_customers", "customers"),
    ToolDefinition("update_customer", "Update an existing customer", "write_customers", "customers"),
    ToolDefinition("delete_customer", "Delete a customer from the store", "write_customers", "customers"),
    # Collections
    ToolDefinition("get_collections", "Fetch collections from the Shopify store", "read_products", "collections"),
    ToolDefinition("get_collection", "Fetch a specific collection by ID", "read_products", "collections"),
    ToolDefinition("create_collection", "Create a new collection", "write_products", "collections"),
    ToolDefinition("update_collection", "Update an existing collection", "write_products", "collections"),
    ToolDefinition("delete_collection", "Delete a collection", "write_products", "collections"),
    # Inventory
    ToolDefinition("get_inventory", "Fetch inventory levels for products", "read_inventory", "inventory"),
    ToolDefinition("update_inventory", "Update inventory levels", "write_inventory", "inventory"),
    ToolDefinition("get_inventory_items", "Fetch inventory items", "read_inventory", "inventory"),
    ToolDefinition("adjust_inventory", "Adjust inventory quantities", "write_inventory", "inventory"),
    # Fulfillments
    ToolDefinition("get_fulfillments", "Fetch fulfillments for orders", "read_fulfillments", "fulfillments"),
    ToolDefinition("create_fulfillment", "Create a fulfillment for an order", "write_fulfillments", "fulfillments"),
    ToolDefinition("update_fulfillment", "Update an existing fulfillment", "write_fulfillments", "fulfillments"),
    ToolDefinition("cancel_fulfillment", "Cancel a fulfillment", "write_fulfillments", "fulfillments"),
    # Draft Orders
    ToolDefinition("get_draft_orders", "Fetch draft orders from the store", "read_draft_orders", "draft_orders"),
    ToolDefinition("get_draft_order", "Fetch a specific draft order by ID", "read_draft_orders", "draft_orders"),
    ToolDefinition("create_draft_order", "Create a new draft order", "write_draft_orders", "draft_orders"),
    ToolDefinition("update_draft_order", "Update an existing draft order", "write_draft_orders", "draft_orders"),
    ToolDefinition("delete_draft_order", "Delete a draft order", "write_draft_orders", "draft_orders"),
    ToolDefinition("complete_draft_order", "Complete a draft order and convert to order", "write_draft_orders", "draft_orders"),
    # Discounts
    ToolDefinition("get_discounts", "Fetch discount codes from the store", "read_discounts", "discounts"),
    ToolDefinition("get_discount", "Fetch a specific discount by ID", "read_discounts", "discounts"),
    ToolDefinition("create_discount", "Create a new discount code", "write_discounts", "discounts"),
    ToolDefinition("update_discount", "Update an existing discount", "write_discounts", "discounts"),
    ToolDefinition("delete_discount", "Delete a discount code", "write_discounts", "discounts"),
    # Gift Cards
    ToolDefinition("get_gift_cards", "Fetch gift cards from the store", "read_gift_cards", "gift_cards"),
    ToolDefinition("get_gift_card", "Fetch a specific gift card by ID", "read_gift_cards", "gift_cards"),
    ToolDefinition("create_gift_card", "Create a new gift card", "write_gift_cards", "gift_cards"),
    ToolDefinition("update_gift_card", "Update an existing gift card", "write_gift_cards", "gift_cards"),
    ToolDefinition("disable_gift_card", "Disable a gift card", "write_gift_cards", "gift_cards"),
    # Files
    ToolDefinition("get_files", "Fetch files from the store", "read_files", "files"),
    ToolDefinition("upload_file", "Upload a file to the store", "write_files", "files"),
    ToolDefinition("delete_file", "Delete a file from the store", "write_files", "files"),
    # Metaobjects
    ToolDefinition("get_metaobject_definitions", "Fetch metaobject definitions", "read_metaobject_definitions", "metaobjects"),
    ToolDefinition("get_metaobjects", "Fetch metaobjects", "read_metaobjects", "metaobjects"),
    ToolDefinition("create_metaobject", "Create a new metaobject", "write_metaobjects", "metaobjects"),
    ToolDefinition("update_metaobject", "Update an existing metaobject", "write_metaobjects", "metaobjects"),
    ToolDefinition("delete_metaobject", "Delete a metaobject", "write_metaobjects", "metaobjects"),
    # Channels
    ToolDefinition("get_channels", "Fetch sales channels", "read_channels", "channels"),
    ToolDefinition("create_channel", "Create a sales channel", "write_channels", "channels"),
    ToolDefinition("update_channel", "Update a sales channel", "write_channels", "channels"),
    ToolDefinition("delete_channel", "Delete a sales channel", "write_channels", "channels"),
    # Locations
    ToolDefinition("get_locations", "Fetch store locations", "read_locations", "locations"),
    ToolDefinition("create_location", "Create a new location", "write_locations", "locations"),
    ToolDefinition("update_location", "Update an existing location", "write_locations", "locations"),
    ToolDefinition("delete_location", "Delete a location", "write_locations", "locations"),
    # Marketing
    ToolDefinition("get_marketing_events", "Fetch marketing events", "read_marketing_events", "marketing"),
    ToolDefinition("create_marketing_event", "Create a marketing event", "write_marketing_events", "marketing"),
    # Analytics
    ToolDefinition("get_analytics", "Fetch store analytics data", "read_analytics", "analytics"),
    ToolDefinition("shopifyql_query", "Execute a ShopifyQL query for analytics", "read_analytics", "analytics"),
    # Shop Information
    ToolDefinition("get_shop_info", "Fetch general shop information", "read_analytics", "shop"),
    ToolDefinition("get_shop_policies", "Fetch shop policies", "read_legal_policies", "shop"),
)


def get_tools_by_category(category: str) -> List[ToolDefinition]:
    return [tool for tool in TOOL_DEFINITIONS if tool.category == category]


def get_tools_by_scope(scope: str) -> List[ToolDefinition]:
    return [tool for tool in TOOL_DEFINITIONS if tool.scope == scope]


def get_all_tool_names() -> List[str]:
    return [tool.name for tool in TOOL_DEFINITIONS]


def get_scopes_for_tools(names: Iterable[str]) -> List[str]:
    """Sorted access scopes of the listed tools; names without a definition are skipped."""
    wanted = set(names)
    return sorted({tool.scope for tool in TOOL_DEFINITIONS if tool.name in wanted})
