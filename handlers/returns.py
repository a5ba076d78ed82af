from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import array, enum, gid, graphql_tool, integer, money, number, obj, string

RETURN_REASONS = [
    "UNKNOWN", "REQUESTED_BY_CUSTOMER", "NOT_AS_DESCRIBED", "DEFECTIVE",
    "DELIVERED_LATE", "NOT_DELIVERED", "RETURNED", "EXCHANGE", "OTHER",
]
DECLINE_REASONS = ["OUT_OF_POLICY", "ITEM_NOT_RECEIVED", "REFUND_NOT_APPROVED", "OTHER"]

RETURN_FIELDS = "id name status createdAt order { id name }"

GET_RETURNABLE = """
query GetReturnableFulfillments($orderId: ID!, $first: Int!, $after: String) {
  returnableFulfillments(orderId: $orderId, first: $first, after: $after) {
    edges {
      node {
        id
        fulfillment { id }
        returnableFulfillmentLineItems(first: 50) {
          edges { node { quantity fulfillmentLineItem { id lineItem { id title sku } } } }
        }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_ORDER_RETURNS = f"""
query GetOrderReturns($id: ID!) {{
  order(id: $id) {{
    id name
    returns(first: 50) {{ edges {{ node {{ {RETURN_FIELDS} totalQuantity }} }} }}
  }}
}}
"""

GET_RETURN = f"""
query GetReturn($id: ID!) {{
  return(id: $id) {{
    {RETURN_FIELDS}
    totalQuantity
    decline {{ reason note }}
    returnLineItems(first: 50) {{
      edges {{ node {{ id quantity returnReason customerNote fulfillmentLineItem {{ id lineItem {{ title sku }} }} }} }}
    }}
    refunds(first: 10) {{ edges {{ node {{ id createdAt totalRefundedSet {{ shopMoney {{ amount currencyCode }} }} }} }} }}
  }}
}}
"""

CREATE_RETURN = f"""
mutation CreateReturn($input: ReturnInput!) {{
  returnCreate(returnInput: $input) {{
    return {{ {RETURN_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

APPROVE_RETURN = """
mutation ApproveReturnRequest($input: ReturnApproveRequestInput!) {
  returnApproveRequest(input: $input) {
    return { id name status }
    userErrors { field message }
  }
}
"""

DECLINE_RETURN = """
mutation DeclineReturnRequest($input: ReturnDeclineRequestInput!) {
  returnDeclineRequest(input: $input) {
    return { id name status decline { reason note } }
    userErrors { field message }
  }
}
"""

CLOSE_RETURN = """
mutation CloseReturn($id: ID!) {
  returnClose(id: $id) {
    return { id name status closedAt }
    userErrors { field message }
  }
}
"""


def _return_input(arguments: Dict[str, Any]) -> Dict[str, Any]:
    line_items = []
    for item in arguments["returnLineItems"]:
        line = Patch.from_arguments(item, ["fulfillmentLineItemId", "quantity"])
        if item.get("reason"):
            line.set("returnReason", item["reason"])
        if item.get("note"):
            line.set("customerNote", item["note"])
        line_items.append(line.as_dict())
    patch = Patch().set("orderId", arguments["orderId"]).set("returnLineItems", line_items)
    if arguments.get("returnShippingFee") is not None:
        patch.set("returnShippingFee", {
            "amount": money(arguments["returnShippingFee"], arguments.get("currencyCode", "USD")),
        })
    return {"input": patch.as_dict()}


def _decline_input(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch().set("id", arguments["returnId"]).set("declineReason", arguments["reason"])
    if arguments.get("note"):
        patch.set("declineNote", arguments["note"])
    return {"input": patch.as_dict()}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_returnable_fulfillments",
        "Fetch fulfillments of an order that are eligible for return", GET_RETURNABLE,
        properties={
            "orderId": gid("Order", "Order"),
            "first": integer("Number of fulfillments to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        required=["orderId"],
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_returns_by_order", "Fetch all returns for an order", GET_ORDER_RETURNS,
        properties={"orderId": gid("Order", "Order")},
        required=["orderId"],
        variables=lambda args: {"id": args["orderId"]},
    )
    graphql_tool(
        server, client, "get_return", "Fetch a specific return by ID", GET_RETURN,
        properties={"id": gid("Return", "Return")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_return", "Create a new return from an order", CREATE_RETURN,
        properties={
            "orderId": gid("Order", "Order"),
            "returnLineItems": array(obj({
                "fulfillmentLineItemId": string("Fulfillment line item ID"),
                "quantity": integer("Quantity to return", 1),
                "reason": enum(RETURN_REASONS, "Return reason"),
                "note": string("Return note"),
            }, required=["fulfillmentLineItemId", "quantity"]), "Return line items"),
            "returnShippingFee": number("Return shipping fee amount"),
            "currencyCode": string("Currency of the return shipping fee (default: USD)"),
        },
        required=["orderId", "returnLineItems"],
        variables=_return_input,
    )
    graphql_tool(
        server, client, "approve_return_request", "Approve a customer's return request", APPROVE_RETURN,
        properties={"returnId": gid("Return", "Return")},
        required=["returnId"],
        variables=lambda args: {"input": {"id": args["returnId"]}},
    )
    graphql_tool(
        server, client, "decline_return_request", "Decline a customer's return request", DECLINE_RETURN,
        properties={
            "returnId": gid("Return", "Return"),
            "reason": enum(DECLINE_REASONS, "Reason for declining"),
            "note": string("Note explaining why return was declined"),
        },
        required=["returnId", "reason"],
        variables=_decline_input,
    )
    graphql_tool(
        server, client, "close_return", "Close a completed return", CLOSE_RETURN,
        properties={"returnId": gid("Return", "Return")},
        required=["returnId"],
        variables=lambda args: {"id": args["returnId"]},
    )
