from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, gid, graphql_tool, page, string

LOCATION_FIELDS = """
id name isActive fulfillsOnlineOrders shipsInventory
address { address1 address2 city province country zip phone }
"""

GET_LOCATIONS = f"""
query GetLocations($first: Int!, $after: String, $query: String, $includeInactive: Boolean) {{
  locations(first: $first, after: $after, query: $query, includeInactive: $includeInactive) {{
    edges {{ node {{ {LOCATION_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_LOCATION = f"""
query GetLocation($id: ID!) {{
  location(id: $id) {{ {LOCATION_FIELDS} createdAt updatedAt }}
}}
"""

CREATE_LOCATION = f"""
mutation LocationAdd($input: LocationAddInput!) {{
  locationAdd(input: $input) {{
    location {{ {LOCATION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_LOCATION = f"""
mutation LocationEdit($id: ID!, $input: LocationEditInput!) {{
  locationEdit(id: $id, input: $input) {{
    location {{ {LOCATION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

ADDRESS_FIELDS = ["address1", "address2", "city", "province", "country", "zip", "phone"]

# LocationAddressInput takes codes, not display names
ADDRESS_RENAME = {"province": "provinceCode", "country": "countryCode"}


def _location_input(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["name", "fulfillsOnlineOrders"])
    address = Patch.from_arguments(arguments, ADDRESS_FIELDS, rename=ADDRESS_RENAME)
    if not address.is_empty():
        patch.set("address", address.as_dict())
    return patch.as_dict()


def register(server, client) -> None:
    address_props = {
        "address1": string("Street address"),
        "address2": string("Apartment, suite, etc."),
        "city": string("City"),
        "province": string("Province/State code"),
        "country": string("Country code"),
        "zip": string("ZIP/Postal code"),
        "phone": string("Phone number"),
    }
    graphql_tool(
        server, client, "get_locations", "Fetch store locations", GET_LOCATIONS,
        properties={**page("locations"), "includeInactive": boolean("Include inactive locations")},
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_location", "Fetch a specific location by ID", GET_LOCATION,
        properties={"id": gid("Location", "Location")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_location", "Create a new location", CREATE_LOCATION,
        properties={
            "name": string("Location name"),
            **address_props,
            "fulfillsOnlineOrders": boolean("Whether location fulfills online orders"),
        },
        required=["name", "address1", "city", "country", "zip"],
        variables=lambda args: {"input": _location_input(args)},
    )
    graphql_tool(
        server, client, "update_location", "Update an existing location", UPDATE_LOCATION,
        properties={
            "id": string("Location ID"),
            "name": string("Location name"),
            **address_props,
            "fulfillsOnlineOrders": boolean("Whether location fulfills online orders"),
        },
        required=["id"],
        variables=lambda args: {"id": args["id"], "input": _location_input(args)},
    )
