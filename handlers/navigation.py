from __future__ import annotations

from .common import array, graphql_tool, integer, obj, patched_input, string

ITEM = "id title url type"

GET_NAVIGATIONS = f"""
query GetNavigations($first: Int!, $after: String) {{
  navigations(first: $first, after: $after) {{
    edges {{
      node {{
        id title handle
        items(first: 100) {{
          edges {{ node {{ {ITEM} items(first: 50) {{ edges {{ node {{ {ITEM} }} }} }} }} }}
        }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_NAVIGATION = f"""
query GetNavigation($handle: String!) {{
  navigation(handle: $handle) {{
    id title handle
    items(first: 200) {{
      edges {{
        node {{
          {ITEM}
          items(first: 100) {{
            edges {{ node {{ {ITEM} items(first: 50) {{ edges {{ node {{ {ITEM} }} }} }} }} }}
          }}
        }}
      }}
    }}
  }}
}}
"""

NAVIGATION_PAYLOAD = "navigation { id title handle items(first: 100) { edges { node { id title url } } } }"

CREATE_NAVIGATION = f"""
mutation NavigationCreate($input: NavigationInput!) {{
  navigationCreate(input: $input) {{
    {NAVIGATION_PAYLOAD}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_NAVIGATION = f"""
mutation NavigationUpdate($id: ID!, $input: NavigationInput!) {{
  navigationUpdate(id: $id, input: $input) {{
    {NAVIGATION_PAYLOAD}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_NAVIGATION = """
mutation NavigationDelete($id: ID!) {
  navigationDelete(id: $id) {
    deletedNavigationId
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    items = array(obj({
        "title": string("Item title"),
        "url": string("Item URL"),
        "type": string("Item type (e.g., 'link', 'product', 'collection')"),
    }, required=["title", "url"]), "Menu items")

    graphql_tool(
        server, client, "get_navigations", "Fetch navigation menus for the online store", GET_NAVIGATIONS,
        properties={
            "first": integer("Number of navigations to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_navigation", "Fetch a specific navigation menu by handle", GET_NAVIGATION,
        properties={"handle": string("Navigation handle (e.g., 'main-menu', 'footer')")},
        required=["handle"],
    )
    graphql_tool(
        server, client, "create_navigation", "Create a new navigation menu", CREATE_NAVIGATION,
        properties={
            "title": string("Navigation title"),
            "handle": string("Unique handle (e.g., 'main-menu')"),
            "items": items,
        },
        required=["title", "handle"],
        variables=patched_input(["title", "handle", "items"], skip_empty=True),
    )
    graphql_tool(
        server, client, "update_navigation", "Update an existing navigation menu", UPDATE_NAVIGATION,
        properties={"id": string("Navigation ID"), "title": string("Navigation title"), "items": items},
        required=["id"],
        variables=patched_input(["title", "items"], keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_navigation", "Delete a navigation menu", DELETE_NAVIGATION,
        properties={"id": string("Navigation ID to delete")},
        required=["id"],
    )
