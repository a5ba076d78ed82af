from __future__ import annotations

from .common import boolean, enum, gid, graphql_tool, integer, patched_input, string

DISPLAY_SCOPES = ["ALL", "ONLINE_STORE", "ORDER_STATUS"]
SCRIPT_TAG_FIELDS = "id src displayScope cache"

GET_SCRIPT_TAGS = f"""
query GetScriptTags($first: Int!, $after: String, $src: URL) {{
  scriptTags(first: $first, after: $after, src: $src) {{
    edges {{ node {{ {SCRIPT_TAG_FIELDS} createdAt updatedAt }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_SCRIPT_TAG = f"""
query GetScriptTag($id: ID!) {{
  scriptTag(id: $id) {{ {SCRIPT_TAG_FIELDS} createdAt updatedAt }}
}}
"""

CREATE_SCRIPT_TAG = f"""
mutation CreateScriptTag($input: ScriptTagInput!) {{
  scriptTagCreate(input: $input) {{
    scriptTag {{ {SCRIPT_TAG_FIELDS} createdAt }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_SCRIPT_TAG = f"""
mutation UpdateScriptTag($id: ID!, $input: ScriptTagInput!) {{
  scriptTagUpdate(id: $id, input: $input) {{
    scriptTag {{ {SCRIPT_TAG_FIELDS} updatedAt }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_SCRIPT_TAG = """
mutation DeleteScriptTag($id: ID!) {
  scriptTagDelete(id: $id) {
    deletedScriptTagId
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    tag_id = gid("Script tag", "ScriptTag")
    src = string("URL to the remote script")
    scope = enum(DISPLAY_SCOPES, "Page(s) where the script should be included")
    cache = boolean("Whether the script can be cached by the CDN")

    graphql_tool(
        server, client, "get_script_tags", "Fetch script tags from the Shopify store", GET_SCRIPT_TAGS,
        properties={
            "first": integer("Number of script tags to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "src": string("Filter by source URL"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_script_tag", "Fetch a specific script tag by ID", GET_SCRIPT_TAG,
        properties={"id": tag_id},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_script_tag", "Create a new script tag", CREATE_SCRIPT_TAG,
        properties={"src": src, "displayScope": scope, "cache": cache},
        required=["src"],
        variables=lambda args: {"input": {
            "src": args["src"],
            "displayScope": args.get("displayScope") or "ALL",
            "cache": bool(args.get("cache", False)),
        }},
    )
    graphql_tool(
        server, client, "update_script_tag", "Update an existing script tag", UPDATE_SCRIPT_TAG,
        properties={"id": tag_id, "src": src, "displayScope": scope, "cache": cache},
        required=["id"],
        variables=patched_input(["src", "displayScope", "cache"], keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_script_tag", "Delete a script tag", DELETE_SCRIPT_TAG,
        properties={"id": tag_id},
        required=["id"],
    )
