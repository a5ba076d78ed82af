from __future__ import annotations

from typing import Any, Dict

from .common import array, boolean, enum, gid, graphql_tool, integer, obj, page, patched_input, string

SORT_KEYS = ["CREATED_AT", "UPDATED_AT", "ID"]

ADDRESS = "id address1 address2 city province country zip name"
ITEM = "inventoryItem { id sku product { id title } }"
LINE_ITEM = "id sku quantity expectedQuantity receivedQuantity"

GET_INVENTORY_SHIPMENTS = f"""
query GetInventoryShipments(
  $first: Int!, $after: String, $query: String, $sortKey: InventoryShipmentSortKeys, $reverse: Boolean
) {{
  inventoryShipments(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        id status createdAt updatedAt completedAt displayName
        origin {{ {ADDRESS} }}
        destination {{ {ADDRESS} }}
        lineItems(first: 50) {{ edges {{ node {{ {LINE_ITEM} {ITEM} }} }} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_INVENTORY_SHIPMENT = f"""
query GetInventoryShipment($id: ID!) {{
  inventoryShipment(id: $id) {{
    id status createdAt updatedAt completedAt displayName
    origin {{ {ADDRESS} }}
    destination {{ {ADDRESS} }}
    lineItems(first: 100) {{
      edges {{
        node {{
          {LINE_ITEM}
          inventoryItem {{ id sku product {{ id title variants(first: 10) {{ edges {{ node {{ id title }} }} }} }} }}
        }}
      }}
    }}
  }}
}}
"""

CREATE_INVENTORY_SHIPMENT = """
mutation InventoryShipmentCreate($input: InventoryShipmentCreateInput!) {
  inventoryShipmentCreate(input: $input) {
    inventoryShipment { id status displayName createdAt }
    userErrors { field message }
  }
}
"""

RECEIVE_INVENTORY_SHIPMENT = """
mutation InventoryShipmentReceive($id: ID!, $input: InventoryShipmentReceiveInput!) {
  inventoryShipmentReceive(id: $id, input: $input) {
    inventoryShipment { id status completedAt lineItems(first: 50) { edges { node { id receivedQuantity } } } }
    userErrors { field message }
  }
}
"""

GET_RECEIVED_ITEMS = f"""
query GetInventoryShipmentsReceivedItems($first: Int!, $after: String, $inventoryItemId: ID) {{
  inventoryShipmentsReceivedItems(first: $first, after: $after, inventoryItemId: $inventoryItemId) {{
    edges {{
      node {{ id {ITEM} shipment {{ id status displayName }} quantity receivedAt }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

LIST_DEFAULTS = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}


def stock_line_items(description: str, quantity_description: str) -> Dict[str, Any]:
    """Inventory item / quantity pairs shared by shipments and transfers."""
    schema = array(obj({
        "inventoryItemId": string("Inventory item ID"),
        "quantity": integer(quantity_description, 1),
    }, required=["inventoryItemId", "quantity"]), description)
    schema["minItems"] = 1
    return schema


def receive_variables(key: str):
    def build(arguments: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": arguments[key], "input": {"lineItems": arguments["lineItems"]}}

    return build


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_inventory_shipments", "Fetch inventory shipments for the store",
        GET_INVENTORY_SHIPMENTS,
        properties={
            **page("shipments"),
            "sortKey": enum(SORT_KEYS, "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults=LIST_DEFAULTS,
    )
    graphql_tool(
        server, client, "get_inventory_shipment", "Fetch a specific inventory shipment by ID",
        GET_INVENTORY_SHIPMENT,
        properties={"id": gid("Inventory Shipment", "InventoryShipment")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_inventory_shipment", "Create a new inventory shipment", CREATE_INVENTORY_SHIPMENT,
        properties={
            "originLocationId": string("Origin location ID"),
            "destinationLocationId": string("Destination location ID"),
            "lineItems": stock_line_items("Line items to ship", "Quantity to ship"),
            "displayName": string("Display name for the shipment"),
        },
        required=["originLocationId", "destinationLocationId", "lineItems"],
        variables=patched_input(
            ["originLocationId", "destinationLocationId", "lineItems", "displayName"], skip_empty=True
        ),
    )
    graphql_tool(
        server, client, "receive_inventory_shipment", "Receive items from an inventory shipment",
        RECEIVE_INVENTORY_SHIPMENT,
        properties={
            "shipmentId": string("Inventory Shipment ID"),
            "lineItems": stock_line_items("Line items to receive", "Quantity received"),
        },
        required=["shipmentId", "lineItems"],
        variables=receive_variables("shipmentId"),
    )
    graphql_tool(
        server, client, "get_inventory_shipments_received_items", "Fetch inventory items received in shipments",
        GET_RECEIVED_ITEMS,
        properties={
            "first": integer("Number of items to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "inventoryItemId": string("Filter by inventory item ID"),
        },
        defaults={"first": 50},
    )
