from __future__ import annotations

from typing import Any, Dict

from .common import boolean, graphql_tool, integer, patched_input, string

SERVICE_FIELDS = """
id handle serviceName callbackUrl inventoryManagement trackingSupport fulfillmentOrdersOptIn
location { id name address { address1 city province country zip } }
"""

GET_SERVICES = f"""
query GetFulfillmentServices($first: Int!, $after: String) {{
  fulfillmentServices(first: $first, after: $after) {{
    edges {{ node {{ {SERVICE_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

CREATE_SERVICE = f"""
mutation FulfillmentServiceCreate($input: FulfillmentServiceInput!) {{
  fulfillmentServiceCreate(input: $input) {{
    fulfillmentService {{ {SERVICE_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_SERVICE = f"""
mutation FulfillmentServiceUpdate($id: ID!, $input: FulfillmentServiceInput!) {{
  fulfillmentServiceUpdate(id: $id, input: $input) {{
    fulfillmentService {{ {SERVICE_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_SERVICE = """
mutation FulfillmentServiceDelete($id: ID!) {
  fulfillmentServiceDelete(id: $id) {
    deletedId
    userErrors { field message }
  }
}
"""

CREATE_DEFAULTS = {
    "productBased": True,
    "inventoryManagement": False,
    "trackingSupport": True,
    "fulfillmentOrdersOptIn": True,
}


def _create_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    service = {key: arguments[key] for key in ("name", "handle", "email", "locationId")}
    for key, default in CREATE_DEFAULTS.items():
        service[key] = arguments.get(key, default)
    return {"input": service}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_custom_fulfillment_services", "Fetch custom fulfillment services for the store",
        GET_SERVICES,
        properties={
            "first": integer("Number of services to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "create_custom_fulfillment_service", "Create a new custom fulfillment service",
        CREATE_SERVICE,
        properties={
            "name": string("Service name"),
            "handle": string("Unique handle for the service"),
            "email": string("Service email address"),
            "locationId": string("Location ID for the service"),
            "productBased": boolean("Whether the service is product-based (default: true)"),
            "inventoryManagement": boolean("Whether the service manages inventory (default: false)"),
            "trackingSupport": boolean("Whether the service supports tracking (default: true)"),
            "fulfillmentOrdersOptIn": boolean("Whether to opt-in to fulfillment orders (default: true)"),
        },
        required=["name", "handle", "email", "locationId"],
        variables=_create_variables,
    )
    graphql_tool(
        server, client, "update_custom_fulfillment_service", "Update an existing custom fulfillment service",
        UPDATE_SERVICE,
        properties={
            "id": string("Fulfillment Service ID"),
            "name": string("Service name"),
            "email": string("Service email address"),
            "trackingSupport": boolean("Whether the service supports tracking"),
            "fulfillmentOrdersOptIn": boolean("Whether to opt-in to fulfillment orders"),
        },
        required=["id"],
        variables=patched_input(["name", "email", "trackingSupport", "fulfillmentOrdersOptIn"], keys=["id"]),
    )
    graphql_tool(
        server, client, "delete_custom_fulfillment_service", "Delete a custom fulfillment service", DELETE_SERVICE,
        properties={"id": string("Fulfillment Service ID to delete")},
        required=["id"],
    )
