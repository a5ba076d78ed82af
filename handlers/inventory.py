from __future__ import annotations

from .common import graphql_tool, integer, string

GET_INVENTORY = """
query GetInventory($first: Int!, $query: String) {
  inventoryItems(first: $first, query: $query) {
    edges {
      node {
        id
        sku
        tracked
        variant { id title product { id title } }
        inventoryLevels(first: 10) {
          edges {
            node {
              id
              location { id name }
              quantities(names: ["available", "on_hand", "committed"]) { name quantity }
            }
          }
        }
      }
    }
  }
}
"""

ADJUST_INVENTORY = """
mutation InventoryAdjustQuantities($input: InventoryAdjustQuantitiesInput!) {
  inventoryAdjustQuantities(input: $input) {
    inventoryAdjustmentGroup { reason changes { name delta } }
    userErrors { field message }
  }
}
"""

SET_INVENTORY = """
mutation InventorySetOnHandQuantities($input: InventorySetOnHandQuantitiesInput!) {
  inventorySetOnHandQuantities(input: $input) {
    inventoryAdjustmentGroup { reason changes { name delta } }
    userErrors { field message }
  }
}
"""


def _item_query(args):
    query = args.get("query")
    if args.get("locationId"):
        location = f"location_id:{args['locationId'].rsplit('/', 1)[-1]}"
        query = f"{query} {location}" if query else location
    return {"first": args.get("first", 50), "query": query}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_inventory", "Fetch inventory levels for products", GET_INVENTORY,
        properties={
            "locationId": string("Filter by location ID"),
            "query": string("Filter query"),
            "first": integer("Number of items to fetch (default: 50)", 1, 250),
        },
        variables=_item_query,
    )
    graphql_tool(
        server, client, "adjust_inventory", "Adjust available inventory by a delta", ADJUST_INVENTORY,
        properties={
            "inventoryItemId": string("Inventory item ID"),
            "locationId": string("Location ID"),
            "availableDelta": integer("Quantity adjustment (positive or negative)"),
            "reason": string("Adjustment reason (default: correction)"),
        },
        required=["inventoryItemId", "locationId", "availableDelta"],
        variables=lambda args: {"input": {
            "name": "available",
            "reason": args.get("reason") or "correction",
            "changes": [{
                "inventoryItemId": args["inventoryItemId"],
                "locationId": args["locationId"],
                "delta": args["availableDelta"],
            }],
        }},
    )
    graphql_tool(
        server, client, "set_inventory", "Set the on-hand quantity at a location", SET_INVENTORY,
        properties={
            "inventoryItemId": string("Inventory item ID"),
            "locationId": string("Location ID"),
            "quantity": integer("New on-hand quantity", 0),
            "reason": string("Adjustment reason (default: correction)"),
        },
        required=["inventoryItemId", "locationId", "quantity"],
        variables=lambda args: {"input": {
            "reason": args.get("reason") or "correction",
            "setQuantities": [{
                "inventoryItemId": args["inventoryItemId"],
                "locationId": args["locationId"],
                "quantity": args["quantity"],
            }],
        }},
    )
