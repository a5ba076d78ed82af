from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import array, boolean, enum, gid, graphql_tool, obj, page, patched_input, string

COLLECTION_FIELDS = "id title handle descriptionHtml sortOrder updatedAt productsCount { count }"

SORT_ORDERS = ["MANUAL", "BEST_SELLING", "ALPHA_ASC", "ALPHA_DESC", "PRICE_ASC", "PRICE_DESC", "CREATED", "CREATED_DESC"]

RULE_COLUMNS = ["TITLE", "TYPE", "VENDOR", "VARIANT_PRICE", "TAG"]
RULE_RELATIONS = [
    "CONTAINS", "ENDS_WITH", "EQUALS", "GREATER_THAN", "IS_NOT_SET",
    "LESS_THAN", "NOT_CONTAINS", "NOT_EQUALS", "STARTS_WITH",
]

GET_COLLECTIONS = f"""
query GetCollections($first: Int!, $after: String, $query: String, $sortKey: CollectionSortKeys, $reverse: Boolean) {{
  collections(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{ node {{ {COLLECTION_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_COLLECTION = f"""
query GetCollection($id: ID!) {{
  collection(id: $id) {{
    {COLLECTION_FIELDS}
    ruleSet {{ appliedDisjunctively rules {{ column relation condition }} }}
    products(first: 50) {{ edges {{ node {{ id title handle status }} }} }}
  }}
}}
"""

CREATE_COLLECTION = f"""
mutation CollectionCreate($input: CollectionInput!) {{
  collectionCreate(input: $input) {{
    collection {{ {COLLECTION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

ADD_PRODUCTS = """
mutation CollectionAddProducts($id: ID!, $productIds: [ID!]!) {
  collectionAddProducts(id: $id, productIds: $productIds) {
    collection { id title productsCount { count } }
    userErrors { field message }
  }
}
"""

UPDATE_COLLECTION = f"""
mutation CollectionUpdate($input: CollectionInput!) {{
  collectionUpdate(input: $input) {{
    collection {{ {COLLECTION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_COLLECTION = """
mutation CollectionDelete($input: CollectionDeleteInput!) {
  collectionDelete(input: $input) {
    deletedCollectionId
    userErrors { field message }
  }
}
"""


def _create_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["title", "descriptionHtml"])
    if arguments.get("collectionType") == "SMART" and arguments.get("rules"):
        patch.set("ruleSet", {
            "appliedDisjunctively": bool(arguments.get("disjunctive", False)),
            "rules": arguments["rules"],
        })
    return {"input": patch.as_dict()}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_collections", "Fetch collections from the Shopify store", GET_COLLECTIONS,
        properties={
            **page("collections"),
            "sortKey": enum(["TITLE", "UPDATED_AT", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_collection", "Fetch a specific collection by ID", GET_COLLECTION,
        properties={"id": gid("Collection", "Collection")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_collection", "Create a new manual or smart collection", CREATE_COLLECTION,
        properties={
            "title": string("Collection title"),
            "descriptionHtml": string("Collection description (HTML)"),
            "collectionType": enum(["MANUAL", "SMART"], "Type of collection"),
            "rules": array(obj({
                "column": enum(RULE_COLUMNS),
                "relation": enum(RULE_RELATIONS),
                "condition": string(),
            }, required=["column", "relation", "condition"]), "Smart collection rules"),
            "disjunctive": boolean("Whether rules should be OR'd together (default: AND)"),
        },
        required=["title", "collectionType"],
        variables=_create_variables,
    )
    graphql_tool(
        server, client, "add_products_to_collection", "Add products to a manual collection", ADD_PRODUCTS,
        properties={
            "collectionId": string("Collection ID"),
            "productIds": array(string(), "Array of product IDs to add"),
        },
        required=["collectionId", "productIds"],
        variables=lambda args: {"id": args["collectionId"], "productIds": args["productIds"]},
    )
    graphql_tool(
        server, client, "update_collection", "Update an existing collection", UPDATE_COLLECTION,
        properties={
            "id": gid("Collection", "Collection"),
            "title": string("Collection title"),
            "descriptionHtml": string("Collection description (HTML)"),
            "sortOrder": enum(SORT_ORDERS, "Product sort order"),
        },
        required=["id"],
        variables=patched_input(["title", "descriptionHtml", "sortOrder"], key_in_input=["id"]),
    )
    graphql_tool(
        server, client, "delete_collection", "Delete a collection", DELETE_COLLECTION,
        properties={"id": gid("Collection", "Collection")},
        required=["id"],
        variables=lambda args: {"input": {"id": args["id"]}},
    )
