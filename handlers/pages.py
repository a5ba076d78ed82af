from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, enum, gid, graphql_tool, page, string

PAGE_FIELDS = "id title handle body bodySummary createdAt updatedAt publishedAt isPublished templateSuffix"

GET_PAGES = f"""
query GetPages($first: Int!, $after: String, $query: String, $sortKey: PageSortKeys, $reverse: Boolean) {{
  pages(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{ node {{ {PAGE_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_PAGE = f"""
query GetPage($id: ID!) {{
  page(id: $id) {{ {PAGE_FIELDS} }}
}}
"""

CREATE_PAGE = """
mutation PageCreate($input: PageCreateInput!) {
  pageCreate(input: $input) {
    page { id title handle body publishedAt createdAt isPublished }
    userErrors { field message }
  }
}
"""

UPDATE_PAGE = """
mutation PageUpdate($id: ID!, $input: PageUpdateInput!) {
  pageUpdate(id: $id, input: $input) {
    page { id title handle body publishedAt updatedAt isPublished }
    userErrors { field message }
  }
}
"""

DELETE_PAGE = """
mutation PageDelete($id: ID!) {
  pageDelete(id: $id) {
    deletedPageId
    userErrors { field message }
  }
}
"""


def _create_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["title", "body"])
    if arguments.get("handle"):
        patch.set("handle", arguments["handle"])
    if arguments.get("published"):
        patch.set("isPublished", True)
    return {"input": patch.as_dict()}


def _update_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["title", "body", "handle"], skip_empty=True)
    if "published" in arguments:
        patch.set("isPublished", arguments["published"])
    return {"id": arguments["id"], "input": patch.as_dict()}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_pages", "Fetch online store pages", GET_PAGES,
        properties={
            **page("pages"),
            "sortKey": enum(["TITLE", "UPDATED_AT", "ID", "PUBLISHED_AT"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "UPDATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_page", "Fetch a specific page by ID", GET_PAGE,
        properties={"id": gid("Page", "Page")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_page", "Create a new online store page", CREATE_PAGE,
        properties={
            "title": string("Page title"),
            "body": string("Page content (HTML or plain text)"),
            "handle": string("URL handle (auto-generated if not provided)"),
            "published": boolean("Publish the page immediately"),
        },
        required=["title", "body"],
        variables=_create_variables,
    )
    graphql_tool(
        server, client, "update_page", "Update an existing page", UPDATE_PAGE,
        properties={
            "id": string("Page ID"),
            "title": string("Page title"),
            "body": string("Page content"),
            "handle": string("URL handle"),
            "published": boolean("Publish/unpublish the page"),
        },
        required=["id"],
        variables=_update_variables,
    )
    graphql_tool(
        server, client, "delete_page", "Delete a page", DELETE_PAGE,
        properties={"id": string("Page ID to delete")},
        required=["id"],
    )
