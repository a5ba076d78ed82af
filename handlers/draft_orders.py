from __future__ import annotations

from .common import array, boolean, gid, graphql_tool, integer, obj, page, patched_input, string

MONEY = "shopMoney { amount currencyCode }"

DRAFT_ORDER_FIELDS = f"""
id name email phone createdAt updatedAt completedAt status
subtotalPriceSet {{ {MONEY} }}
totalPriceSet {{ {MONEY} }}
"""

GET_DRAFT_ORDERS = f"""
query GetDraftOrders($first: Int!, $after: String, $query: String, $reverse: Boolean) {{
  draftOrders(first: $first, after: $after, query: $query, reverse: $reverse) {{
    edges {{ node {{ {DRAFT_ORDER_FIELDS} customer {{ id email }} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_DRAFT_ORDER = f"""
query GetDraftOrder($id: ID!) {{
  draftOrder(id: $id) {{
    {DRAFT_ORDER_FIELDS}
    note2
    tags
    customer {{ id firstName lastName email }}
    lineItems(first: 50) {{
      edges {{ node {{ id title quantity originalUnitPriceSet {{ {MONEY} }} variant {{ id title }} }} }}
    }}
    order {{ id name }}
  }}
}}
"""

CREATE_DRAFT_ORDER = f"""
mutation DraftOrderCreate($input: DraftOrderInput!) {{
  draftOrderCreate(input: $input) {{
    draftOrder {{ {DRAFT_ORDER_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

COMPLETE_DRAFT_ORDER = """
mutation DraftOrderComplete($id: ID!, $paymentPending: Boolean) {
  draftOrderComplete(id: $id, paymentPending: $paymentPending) {
    draftOrder { id name status completedAt order { id name } }
    userErrors { field message }
  }
}
"""

DELETE_DRAFT_ORDER = """
mutation DraftOrderDelete($input: DraftOrderDeleteInput!) {
  draftOrderDelete(input: $input) {
    deletedId
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_draft_orders", "Fetch draft orders from the store", GET_DRAFT_ORDERS,
        properties={**page("draft orders"), "reverse": boolean("Reverse the sort order")},
        defaults={"first": 50, "reverse": True},
    )
    graphql_tool(
        server, client, "get_draft_order", "Fetch a specific draft order by ID", GET_DRAFT_ORDER,
        properties={"id": gid("Draft Order", "DraftOrder")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_draft_order", "Create a new draft order", CREATE_DRAFT_ORDER,
        properties={
            "email": string("Customer email"),
            "phone": string("Customer phone"),
            "lineItems": array(obj({
                "variantId": string("Product variant ID"),
                "quantity": integer("Quantity", 1),
            }, required=["variantId", "quantity"]), "Line items"),
            "note": string("Draft order note"),
            "tags": array(string(), "Draft order tags"),
        },
        required=["lineItems"],
        variables=patched_input(["email", "phone", "lineItems", "note", "tags"]),
    )
    graphql_tool(
        server, client, "complete_draft_order", "Complete a draft order and convert to order", COMPLETE_DRAFT_ORDER,
        properties={
            "id": string("Draft Order ID"),
            "paymentPending": boolean("Mark as payment pending"),
        },
        required=["id"],
        defaults={"paymentPending": False},
    )
    graphql_tool(
        server, client, "delete_draft_order", "Delete a draft order", DELETE_DRAFT_ORDER,
        properties={"id": string("Draft Order ID")},
        required=["id"],
        variables=lambda args: {"input": {"id": args["id"]}},
    )
