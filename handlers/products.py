from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import array, boolean, enum, gid, graphql_tool, integer, obj, page, patched_input, string

PRODUCT_STATUSES = ["ACTIVE", "ARCHIVED", "DRAFT"]

GET_PRODUCTS = """
query GetProducts($first: Int!, $after: String, $query: String, $sortKey: ProductSortKeys, $reverse: Boolean) {
  products(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
    edges {
      node {
        id
        title
        handle
        vendor
        productType
        createdAt
        updatedAt
        status
        totalInventory
        tags
        images(first: 5) { edges { node { id url altText } } }
        variants(first: 10) {
          edges { node { id title sku price inventoryQuantity selectedOptions { name value } } }
        }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_PRODUCT = """
query GetProduct($id: ID!) {
  product(id: $id) {
    id
    title
    handle
    descriptionHtml
    vendor
    productType
    createdAt
    updatedAt
    status
    totalInventory
    tags
    seo { title description }
    images(first: 20) { edges { node { id url altText } } }
    variants(first: 50) {
      edges {
        node {
          id title sku price compareAtPrice inventoryQuantity
          selectedOptions { name value }
        }
      }
    }
    collections(first: 10) { edges { node { id title handle } } }
  }
}
"""

PRODUCT_FIELDS = "id title handle descriptionHtml vendor productType status createdAt updatedAt tags"

CREATE_PRODUCT = f"""
mutation ProductCreate($input: ProductInput!) {{
  productCreate(input: $input) {{
    product {{ {PRODUCT_FIELDS} variants(first: 10) {{ edges {{ node {{ id title sku price }} }} }} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_PRODUCT = f"""
mutation ProductUpdate($input: ProductInput!) {{
  productUpdate(input: $input) {{
    product {{ {PRODUCT_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_PRODUCT = """
mutation ProductDelete($input: ProductDeleteInput!) {
  productDelete(input: $input) {
    deletedProductId
    userErrors { field message }
  }
}
"""

EDITABLE_FIELDS = ["title", "descriptionHtml", "vendor", "productType", "tags", "status"]


def _create_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, EDITABLE_FIELDS)
    variants = arguments.get("variants") or []
    if variants:
        patch.set("variants", [
            {k: v[k] for k in ("title", "price", "sku") if k in v}
            for v in variants
        ])
    return {"input": patch.as_dict()}


def register(server, client) -> None:
    editable = {
        "title": string("Product title"),
        "descriptionHtml": string("Product description (HTML)"),
        "vendor": string("Product vendor"),
        "productType": string("Product type/category"),
        "tags": array(string(), "Product tags"),
        "status": enum(PRODUCT_STATUSES, "Product status"),
    }
    graphql_tool(
        server, client, "get_products",
        "Fetch products from the Shopify store with optional filtering",
        GET_PRODUCTS,
        properties={
            **page("products", "Filter query (e.g., 'title:shirt', 'product_type:clothing')"),
            "sortKey": enum(["TITLE", "VENDOR", "INVENTORY_TOTAL", "CREATED_AT", "UPDATED_AT", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "CREATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_product", "Fetch a specific product by ID", GET_PRODUCT,
        properties={"id": gid("Product", "Product")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_product", "Create a new product in the Shopify store", CREATE_PRODUCT,
        properties={
            **editable,
            "variants": array(obj({
                "title": string("Variant title"),
                "price": string("Variant price"),
                "sku": string("Variant SKU"),
                "inventoryQuantity": integer("Inventory quantity"),
            }, required=["title", "price"]), "Product variants"),
        },
        required=["title"],
        variables=_create_variables,
    )
    graphql_tool(
        server, client, "update_product", "Update an existing product", UPDATE_PRODUCT,
        properties={"id": gid("Product", "Product"), **editable},
        required=["id"],
        variables=patched_input(EDITABLE_FIELDS, key_in_input=["id"]),
    )
    graphql_tool(
        server, client, "delete_product", "Delete a product from the store", DELETE_PRODUCT,
        properties={"id": gid("Product", "Product")},
        required=["id"],
        variables=lambda args: {"input": {"id": args["id"]}},
    )
