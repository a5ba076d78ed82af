from __future__ import annotations

from typing import Any, Dict

from .common import array, boolean, gid, graphql_tool, integer, patched_input, run_graphql, string

PIXEL_FIELDS = "id handle title source status settings createdAt updatedAt"
DETAIL_FIELDS = f"{PIXEL_FIELDS} lastError lastErrorAt shopifyManaged apiClient {{ id title }} events {{ id name }}"

GET_CUSTOM_PIXELS = f"""
query GetCustomPixels($first: Int!, $after: String) {{
  customPixels(first: $first, after: $after) {{
    edges {{ node {{ {DETAIL_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_CUSTOM_PIXEL = f"""
query GetCustomPixel($id: ID!) {{
  customPixel(id: $id) {{ {DETAIL_FIELDS} }}
}}
"""

CREATE_CUSTOM_PIXEL = f"""
mutation CustomPixelCreate($input: CustomPixelInput!) {{
  customPixelCreate(input: $input) {{
    customPixel {{ {PIXEL_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_CUSTOM_PIXEL = f"""
mutation CustomPixelUpdate($id: ID!, $input: CustomPixelInput!) {{
  customPixelUpdate(id: $id, input: $input) {{
    customPixel {{ {PIXEL_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_CUSTOM_PIXEL = """
mutation CustomPixelDelete($id: ID!) {
  customPixelDelete(id: $id) {
    deletedCustomPixelId
    userErrors { field message }
  }
}
"""

TOGGLE_CUSTOM_PIXEL = """
mutation CustomPixel{action}($id: ID!) {{
  customPixel{action}(id: $id) {{
    customPixel {{ id status }}
    userErrors {{ field message }}
  }}
}}
"""
ENABLE_CUSTOM_PIXEL = TOGGLE_CUSTOM_PIXEL.format(action="Enable")
DISABLE_CUSTOM_PIXEL = TOGGLE_CUSTOM_PIXEL.format(action="Disable")


def register(server, client) -> None:
    pixel_id = string("Custom Pixel ID")
    events = array(string(), "Events to subscribe to (e.g., ['checkout_started', 'checkout_completed'])")

    graphql_tool(
        server, client, "get_custom_pixels", "Fetch custom pixels configured for the store", GET_CUSTOM_PIXELS,
        properties={
            "first": integer("Number of pixels to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_custom_pixel", "Fetch a specific custom pixel by ID", GET_CUSTOM_PIXEL,
        properties={"id": gid("Custom Pixel", "CustomPixel")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_custom_pixel", "Create a new custom pixel", CREATE_CUSTOM_PIXEL,
        properties={
            "title": string("Pixel title"),
            "handle": string("Unique handle for the pixel"),
            "source": string("JavaScript source code for the pixel"),
            "settings": string("JSON settings for the pixel"),
            "events": events,
        },
        required=["title", "handle", "source"],
        variables=patched_input(["title", "handle", "source", "settings", "events"], skip_empty=True),
    )
    graphql_tool(
        server, client, "update_custom_pixel", "Update an existing custom pixel", UPDATE_CUSTOM_PIXEL,
        properties={
            "id": pixel_id,
            "title": string("Pixel title"),
            "source": string("JavaScript source code"),
            "settings": string("JSON settings"),
            "events": events,
        },
        required=["id"],
        variables=patched_input(["title", "source", "settings", "events"], keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_custom_pixel", "Delete a custom pixel", DELETE_CUSTOM_PIXEL,
        properties={"id": string("Custom Pixel ID to delete")},
        required=["id"],
    )

    def toggle_custom_pixel(arguments: Dict[str, Any]) -> str:
        mutation = ENABLE_CUSTOM_PIXEL if arguments.get("enabled") else DISABLE_CUSTOM_PIXEL
        return run_graphql(client, mutation, {"id": arguments.get("id")})

    server.register_tool(
        "toggle_custom_pixel",
        toggle_custom_pixel,
        description="Enable or disable a custom pixel",
        input_schema={
            "type": "object",
            "properties": {
                "id": pixel_id,
                "enabled": boolean("Whether to enable (true) or disable (false) the pixel"),
            },
            "required": ["id", "enabled"],
        },
    )
