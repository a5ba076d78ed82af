from __future__ import annotations

from .common import boolean, gid, graphql_tool, integer, patched_input, string

PIXEL_FIELDS = "id name apiKey enabled"

GET_PIXELS = f"""
query GetPixels($first: Int!, $after: String) {{
  pixels(first: $first, after: $after) {{
    edges {{ node {{ {PIXEL_FIELDS} events(first: 10) {{ edges {{ node {{ id name }} }} }} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_PIXEL = f"""
query GetPixel($id: ID!) {{
  pixel(id: $id) {{ {PIXEL_FIELDS} events(first: 50) {{ edges {{ node {{ id name schema }} }} }} }}
}}
"""

CREATE_PIXEL = f"""
mutation CreatePixel($input: PixelInput!) {{
  pixelCreate(input: $input) {{
    pixel {{ {PIXEL_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_PIXEL = f"""
mutation UpdatePixel($id: ID!, $input: PixelInput!) {{
  pixelUpdate(id: $id, input: $input) {{
    pixel {{ {PIXEL_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_PIXEL = """
mutation DeletePixel($id: ID!) {
  pixelDelete(id: $id) {
    deletedPixelId
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    pixel_id = gid("Pixel", "Pixel")
    graphql_tool(
        server, client, "get_pixels", "Fetch pixels from the Shopify store", GET_PIXELS,
        properties={
            "first": integer("Number of pixels to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_pixel", "Fetch a specific pixel by ID", GET_PIXEL,
        properties={"id": pixel_id},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_pixel", "Create a new pixel", CREATE_PIXEL,
        properties={"name": string("Pixel name"), "apiKey": string("Pixel API key")},
        required=["name", "apiKey"],
        variables=patched_input(["name", "apiKey"]),
    )
    graphql_tool(
        server, client, "update_pixel", "Update an existing pixel", UPDATE_PIXEL,
        properties={
            "id": pixel_id,
            "name": string("Pixel name"),
            "apiKey": string("Pixel API key"),
            "enabled": boolean("Whether the pixel is enabled"),
        },
        required=["id"],
        variables=patched_input(["name", "apiKey", "enabled"], keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_pixel", "Delete a pixel", DELETE_PIXEL,
        properties={"id": pixel_id},
        required=["id"],
    )
