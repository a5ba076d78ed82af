from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import array, gid, graphql_tool, integer, obj, string

MONEY = "shopMoney { amount currencyCode }"

CALCULATED_ORDER = f"""
id
totalPriceSet {{ {MONEY} }}
subtotalPriceSet {{ {MONEY} }}
totalTaxSet {{ {MONEY} }}
lineItems(first: 50) {{
  edges {{ node {{ id title quantity originalUnitPriceSet {{ {MONEY} }} }} }}
}}
"""

GET_ORDER_EDIT = f"""
query GetOrderEdit($id: ID!) {{
  node(id: $id) {{
    ... on CalculatedOrder {{
      {CALCULATED_ORDER}
      originalOrder {{ id name }}
      addedLineItems(first: 50) {{ edges {{ node {{ id title quantity }} }} }}
    }}
  }}
}}
"""

CALCULATE_ORDER_EDIT = f"""
mutation OrderEditCalculate($id: ID!, $input: OrderEditInput!) {{
  orderEditCalculate(id: $id, input: $input) {{
    calculatedOrder {{ {CALCULATED_ORDER} }}
    userErrors {{ field message }}
  }}
}}
"""

APPLY_ORDER_EDIT = f"""
mutation OrderEditApply($id: ID!, $input: OrderEditInput!) {{
  orderEditApply(id: $id, input: $input) {{
    order {{ id name totalPriceSet {{ {MONEY} }} }}
    userErrors {{ field message }}
  }}
}}
"""

ADD_LINE_ITEMS = f"""
mutation OrderEditAddLineItems($id: ID!, $input: OrderEditAddLineItemsInput!) {{
  orderEditAddLineItems(id: $id, input: $input) {{
    calculatedOrder {{ {CALCULATED_ORDER} }}
    userErrors {{ field message }}
  }}
}}
"""

REMOVE_LINE_ITEMS = f"""
mutation OrderEditRemoveLineItems($id: ID!, $input: OrderEditRemoveLineItemsInput!) {{
  orderEditRemoveLineItems(id: $id, input: $input) {{
    calculatedOrder {{ {CALCULATED_ORDER} }}
    userErrors {{ field message }}
  }}
}}
"""


def _edit_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["additions", "removals", "edits", "note"], skip_empty=True)
    return {"id": arguments["orderId"], "input": patch.as_dict()}


def _line_items_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {"id": arguments["orderId"], "input": {"lineItems": arguments["lineItems"]}}


def register(server, client) -> None:
    changes = {
        "additions": array(obj({
            "productVariantId": string("Product variant ID"),
            "quantity": integer("Quantity to add", 1),
        }, required=["productVariantId", "quantity"]), "Items to add"),
        "removals": array(obj({
            "lineItemId": string("Line item ID to remove"),
            "quantity": integer("Quantity to remove", 1),
        }, required=["lineItemId", "quantity"]), "Items to remove"),
        "edits": array(obj({
            "lineItemId": string("Line item ID to edit"),
            "quantity": integer("New quantity"),
            "price": string("New price"),
        }, required=["lineItemId"]), "Line items to change"),
    }
    graphql_tool(
        server, client, "get_order_edit", "Fetch an order edit session by ID", GET_ORDER_EDIT,
        properties={"id": gid("Order Edit", "OrderEdit")},
        required=["id"],
    )
    graphql_tool(
        server, client, "calculate_order_edit", "Preview the totals of an order edit without applying it",
        CALCULATE_ORDER_EDIT,
        properties={"orderId": string("Order ID to edit"), **changes},
        required=["orderId"],
        variables=_edit_variables,
    )
    graphql_tool(
        server, client, "apply_order_edit", "Apply an order edit to the order", APPLY_ORDER_EDIT,
        properties={"orderId": string("Order ID to edit"), **changes, "note": string("Note about the edit")},
        required=["orderId"],
        variables=_edit_variables,
    )
    graphql_tool(
        server, client, "add_line_items_to_order", "Add line items to an existing order", ADD_LINE_ITEMS,
        properties={
            "orderId": string("Order ID"),
            "lineItems": array(obj({
                "productVariantId": string("Product variant ID"),
                "quantity": integer("Quantity", 1),
                "price": string("Custom price (optional)"),
            }, required=["productVariantId", "quantity"]), "Line items to add"),
        },
        required=["orderId", "lineItems"],
        variables=_line_items_variables,
    )
    graphql_tool(
        server, client, "remove_line_items_from_order", "Remove line items from an existing order",
        REMOVE_LINE_ITEMS,
        properties={
            "orderId": string("Order ID"),
            "lineItems": array(obj({
                "lineItemId": string("Line item ID"),
                "quantity": integer("Quantity to remove", 1),
            }, required=["lineItemId", "quantity"]), "Line items to remove"),
        },
        required=["orderId", "lineItems"],
        variables=_line_items_variables,
    )
