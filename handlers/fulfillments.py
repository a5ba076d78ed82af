from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import array, boolean, enum, gid, graphql_tool, integer, obj, string

ASSIGNMENT_STATUSES = ["FULFILLMENT_REQUESTED", "CANCELLATION_REQUESTED", "FULFILLMENT_ACCEPTED", "FULFILLMENT_UNSUBMITTED"]

ADDRESS = "address { address1 city province country zip }"

GET_ASSIGNED = f"""
query GetAssignedFulfillmentOrders($first: Int!, $after: String, $assignmentStatus: FulfillmentOrderAssignmentStatus, $locationIds: [ID!]) {{
  assignedFulfillmentOrders(first: $first, after: $after, assignmentStatus: $assignmentStatus, locationIds: $locationIds) {{
    edges {{
      node {{
        id status requestStatus
        assignedLocation {{ name {ADDRESS} location {{ id }} }}
        order {{ id name }}
        lineItems(first: 20) {{ edges {{ node {{ id totalQuantity remainingQuantity lineItem {{ title sku }} }} }} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_FULFILLMENT_ORDER = f"""
query GetFulfillmentOrder($id: ID!) {{
  fulfillmentOrder(id: $id) {{
    id status requestStatus fulfillAt
    assignedLocation {{ name {ADDRESS} location {{ id }} }}
    destination {{ address1 city province countryCode zip }}
    order {{ id name }}
    lineItems(first: 50) {{ edges {{ node {{ id totalQuantity remainingQuantity lineItem {{ title sku }} }} }} }}
    merchantRequests(first: 10) {{ edges {{ node {{ kind message requestOptions }} }} }}
  }}
}}
"""

ACCEPT_REQUEST = """
mutation FulfillmentOrderAcceptFulfillmentRequest($id: ID!, $message: String) {
  fulfillmentOrderAcceptFulfillmentRequest(id: $id, message: $message) {
    fulfillmentOrder { id status requestStatus }
    userErrors { field message }
  }
}
"""

REJECT_REQUEST = """
mutation FulfillmentOrderRejectFulfillmentRequest($id: ID!, $message: String) {
  fulfillmentOrderRejectFulfillmentRequest(id: $id, message: $message) {
    fulfillmentOrder { id status requestStatus }
    userErrors { field message }
  }
}
"""

GET_FULFILLMENT_SERVICES = """
query GetFulfillmentServices {
  shop {
    fulfillmentServices {
      id handle serviceName callbackUrl inventoryManagement trackingSupport
      location { id name }
    }
  }
}
"""

CREATE_FULFILLMENT = """
mutation FulfillmentCreate($fulfillment: FulfillmentInput!) {
  fulfillmentCreate(fulfillment: $fulfillment) {
    fulfillment { id status trackingInfo { number url company } createdAt }
    userErrors { field message }
  }
}
"""


def _fulfillment_input(arguments: Dict[str, Any]) -> Dict[str, Any]:
    by_order: Dict[str, Any] = {"fulfillmentOrderId": arguments["fulfillmentOrderId"]}
    if arguments.get("lineItems"):
        by_order["fulfillmentOrderLineItems"] = arguments["lineItems"]
    patch = Patch().set("lineItemsByFulfillmentOrder", [by_order])
    if "trackingInfo" in arguments:
        patch.set("trackingInfo", arguments["trackingInfo"])
    if "notifyCustomer" in arguments:
        patch.set("notifyCustomer", arguments["notifyCustomer"])
    return {"fulfillment": patch.as_dict()}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_assigned_fulfillment_orders",
        "Fetch fulfillment orders assigned to the app's locations", GET_ASSIGNED,
        properties={
            "first": integer("Number of fulfillment orders to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "assignmentStatus": enum(ASSIGNMENT_STATUSES, "Filter by assignment status"),
            "locationIds": array(string(), "Filter by location IDs"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_fulfillment_order", "Fetch a specific fulfillment order", GET_FULFILLMENT_ORDER,
        properties={"id": gid("Fulfillment Order", "FulfillmentOrder")},
        required=["id"],
    )
    for name, description, query, hint in (
        ("accept_fulfillment_request", "Accept a fulfillment request", ACCEPT_REQUEST, "Optional message"),
        ("reject_fulfillment_request", "Reject a fulfillment request", REJECT_REQUEST, "Reason for rejection"),
    ):
        graphql_tool(
            server, client, name, description, query,
            properties={"fulfillmentOrderId": string("Fulfillment Order ID"), "message": string(hint)},
            required=["fulfillmentOrderId"],
            variables=lambda args: {"id": args["fulfillmentOrderId"], "message": args.get("message")},
        )
    graphql_tool(
        server, client, "get_fulfillment_services", "Fetch fulfillment services registered on the shop",
        GET_FULFILLMENT_SERVICES,
    )
    graphql_tool(
        server, client, "create_fulfillment", "Create a fulfillment for a fulfillment order", CREATE_FULFILLMENT,
        properties={
            "fulfillmentOrderId": string("Fulfillment Order ID"),
            "trackingInfo": obj({
                "number": string("Tracking number"),
                "url": string("Tracking URL"),
                "company": string("Shipping carrier company"),
            }, "Tracking information"),
            "notifyCustomer": boolean("Notify customer of shipment"),
            "lineItems": array(obj({
                "id": string("Fulfillment order line item ID"),
                "quantity": integer("Quantity to fulfill", 1),
            }, required=["id", "quantity"]), "Line items to fulfill (default: all)"),
        },
        required=["fulfillmentOrderId"],
        variables=_fulfillment_input,
    )
