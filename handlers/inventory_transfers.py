from __future__ import annotations

from .common import boolean, enum, gid, graphql_tool, page, patched_input, string
from .inventory_shipments import LIST_DEFAULTS, SORT_KEYS, receive_variables, stock_line_items

ADDRESS = "address1 address2 city province country zip"
LINE_ITEM = "id sku quantity expectedQuantity receivedQuantity"
TIMESTAMPS = "id status createdAt updatedAt completedAt sentAt receivedAt"

GET_INVENTORY_TRANSFERS = f"""
query GetInventoryTransfers(
  $first: Int!, $after: String, $query: String, $sortKey: InventoryTransferSortKeys, $reverse: Boolean
) {{
  inventoryTransfers(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        {TIMESTAMPS}
        originLocation {{ id name address {{ {ADDRESS} }} }}
        destinationLocation {{ id name address {{ {ADDRESS} }} }}
        lineItems(first: 50) {{
          edges {{ node {{ {LINE_ITEM} inventoryItem {{ id sku product {{ id title }} }} }} }}
        }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_INVENTORY_TRANSFER = f"""
query GetInventoryTransfer($id: ID!) {{
  inventoryTransfer(id: $id) {{
    {TIMESTAMPS}
    originLocation {{ id name address {{ {ADDRESS} }} }}
    destinationLocation {{ id name address {{ {ADDRESS} }} }}
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

CREATE_INVENTORY_TRANSFER = """
mutation InventoryTransferCreate($input: InventoryTransferCreateInput!) {
  inventoryTransferCreate(input: $input) {
    inventoryTransfer {
      id status createdAt
      originLocation { id name }
      destinationLocation { id name }
    }
    userErrors { field message }
  }
}
"""

RECEIVE_INVENTORY_TRANSFER = """
mutation InventoryTransferReceive($id: ID!, $input: InventoryTransferReceiveInput!) {
  inventoryTransferReceive(id: $id, input: $input) {
    inventoryTransfer {
      id status completedAt receivedAt
      lineItems(first: 50) { edges { node { id receivedQuantity } } }
    }
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_inventory_transfers", "Fetch inventory transfers between locations",
        GET_INVENTORY_TRANSFERS,
        properties={
            **page("transfers", "Filter query (e.g., 'status:pending', 'item:sku123')"),
            "sortKey": enum(SORT_KEYS, "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults=LIST_DEFAULTS,
    )
    graphql_tool(
        server, client, "get_inventory_transfer", "Fetch a specific inventory transfer by ID",
        GET_INVENTORY_TRANSFER,
        properties={"id": gid("Inventory Transfer", "InventoryTransfer")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_inventory_transfer", "Create a new inventory transfer between locations",
        CREATE_INVENTORY_TRANSFER,
        properties={
            "originLocationId": string("Origin location ID"),
            "destinationLocationId": string("Destination location ID"),
            "lineItems": stock_line_items("Line items to transfer", "Quantity to transfer"),
        },
        required=["originLocationId", "destinationLocationId", "lineItems"],
        variables=patched_input(["originLocationId", "destinationLocationId", "lineItems"]),
    )
    graphql_tool(
        server, client, "receive_inventory_transfer", "Receive items from an inventory transfer",
        RECEIVE_INVENTORY_TRANSFER,
        properties={
            "transferId": string("Inventory Transfer ID"),
            "lineItems": stock_line_items("Line items to receive", "Quantity received"),
        },
        required=["transferId", "lineItems"],
        variables=receive_variables("transferId"),
    )
