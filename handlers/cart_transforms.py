from __future__ import annotations

from .common import boolean, function_rule_queries, function_rule_tools, graphql_tool, integer, string

QUERIES = function_rule_queries("CartTransform", "CartTransformInput")

GET_ALL_CART_TRANSFORMS = """
query GetAllCartTransforms($first: Int!, $after: String, $includeInactive: Boolean) {
  allCartTransforms(first: $first, after: $after, includeInactive: $includeInactive) {
    edges {
      node {
        id functionId status
        metafields(first: 10) { edges { node { id namespace key value } } }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""


def register(server, client) -> None:
    function_rule_tools(server, client, noun="cart_transform", label="cart transform", queries=QUERIES)
    graphql_tool(
        server, client, "get_all_cart_transforms", "Fetch all cart transforms including inactive ones",
        GET_ALL_CART_TRANSFORMS,
        properties={
            "first": integer("Number of transforms to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "includeInactive": boolean("Include inactive transforms"),
        },
        defaults={"first": 50, "includeInactive": True},
    )
