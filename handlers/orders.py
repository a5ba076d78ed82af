from __future__ import annotations

from .common import boolean, enum, gid, graphql_tool, page

ORDER_SORT_KEYS = ["CREATED_AT", "UPDATED_AT", "PROCESSED_AT", "TOTAL_PRICE", "ID"]

MONEY = "shopMoney { amount currencyCode }"

GET_ORDERS = f"""
query GetOrders($first: Int!, $after: String, $query: String, $sortKey: OrderSortKeys, $reverse: Boolean) {{
  orders(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        id
        name
        createdAt
        updatedAt
        displayFinancialStatus
        displayFulfillmentStatus
        totalPriceSet {{ {MONEY} }}
        customer {{ id firstName lastName email }}
        lineItems(first: 10) {{ edges {{ node {{ id title quantity sku }} }} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_ALL_ORDERS = f"""
query GetAllOrders($first: Int!, $after: String, $query: String, $sortKey: OrderSortKeys, $reverse: Boolean) {{
  orders(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        id
        name
        createdAt
        updatedAt
        processedAt
        cancelledAt
        closedAt
        displayFinancialStatus
        displayFulfillmentStatus
        totalPriceSet {{ {MONEY} }}
        customer {{ id email }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_ORDER = f"""
query GetOrder($id: ID!) {{
  order(id: $id) {{
    id
    name
    createdAt
    updatedAt
    displayFinancialStatus
    displayFulfillmentStatus
    email
    phone
    note
    tags
    totalPriceSet {{ {MONEY} }}
    subtotalPriceSet {{ {MONEY} }}
    totalTaxSet {{ {MONEY} }}
    totalShippingPriceSet {{ {MONEY} }}
    customer {{ id firstName lastName email phone }}
    shippingAddress {{ address1 address2 city province country zip phone }}
    billingAddress {{ address1 address2 city province country zip phone }}
    lineItems(first: 50) {{
      edges {{
        node {{
          id title quantity sku
          originalUnitPriceSet {{ {MONEY} }}
          variant {{ id title }}
        }}
      }}
    }}
    fulfillments {{ id status trackingInfo {{ number url company }} }}
  }}
}}
"""

CANCEL_ORDER = """
mutation OrderCancel($orderId: ID!, $reason: OrderCancelReason!, $refund: Boolean!, $restock: Boolean!) {
  orderCancel(orderId: $orderId, reason: $reason, refund: $refund, restock: $restock) {
    job { id done }
    orderCancelUserErrors { field message code }
  }
}
"""

CANCEL_REASONS = ["CUSTOMER", "DECLINED", "FRAUD", "INVENTORY", "OTHER", "STAFF"]


def _list_properties(query_hint: str):
    return {
        **page("orders", query_hint),
        "sortKey": enum(ORDER_SORT_KEYS, "Field to sort by"),
        "reverse": boolean("Reverse the sort order"),
    }


def register(server, client) -> None:
    list_defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    graphql_tool(
        server, client, "get_orders",
        "Fetch orders from the Shopify store with optional filtering",
        GET_ORDERS,
        properties=_list_properties("Filter query (e.g., 'status:open', 'created_at:>2024-01-01')"),
        defaults=list_defaults,
    )
    graphql_tool(
        server, client, "get_order", "Fetch a specific order by ID", GET_ORDER,
        properties={"id": gid("Order", "Order")},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_all_orders",
        "Fetch orders of any status, including archived and cancelled ones",
        GET_ALL_ORDERS,
        properties=_list_properties("Filter query (e.g., 'status:any', 'created_at:>2024-01-01')"),
        defaults={**list_defaults, "query": "status:any"},
    )
    graphql_tool(
        server, client, "cancel_order", "Cancel an order", CANCEL_ORDER,
        properties={
            "id": gid("Order", "Order"),
            "reason": enum(CANCEL_REASONS, "Cancellation reason (default: OTHER)"),
            "refund": boolean("Whether to refund the order (default: false)"),
            "restock": boolean("Whether to restock inventory (default: false)"),
        },
        required=["id"],
        variables=lambda args: {
            "orderId": args["id"],
            "reason": args.get("reason") or "OTHER",
            "refund": bool(args.get("refund", False)),
            "restock": bool(args.get("restock", False)),
        },
    )
