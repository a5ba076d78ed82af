from __future__ import annotations

from .common import gid, graphql_tool, integer, string

PRICE_RANGE = (
    "priceRangeV2 { minVariantPrice { amount currencyCode } maxVariantPrice { amount currencyCode } }"
)
LISTING_FIELDS = f"id productId title description handle productType vendor tags {PRICE_RANGE}"

GET_PRODUCT_LISTINGS = f"""
query GetProductListings($first: Int!, $after: String) {{
  productListings(first: $first, after: $after) {{
    edges {{
      node {{ {LISTING_FIELDS} images(first: 5) {{ edges {{ node {{ id url altText }} }} }} }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_PRODUCT_LISTING = f"""
query GetProductListing($id: ID!) {{
  productListing(id: $id) {{
    {LISTING_FIELDS}
    images(first: 10) {{ edges {{ node {{ id url altText }} }} }}
    variants(first: 50) {{
      edges {{ node {{ id title price {{ amount currencyCode }} availableForSale sku }} }}
    }}
  }}
}}
"""

GET_COLLECTION_LISTINGS = """
query GetCollectionListings($first: Int!, $after: String) {
  collectionListings(first: $first, after: $after) {
    edges { node { id collectionId title description handle image { id url altText } } cursor }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""


def register(server, client) -> None:
    paged = {
        "first": integer("Number of listings to fetch (1-250, default: 50)", 1, 250),
        "after": string("Cursor for pagination"),
    }
    graphql_tool(
        server, client, "get_product_listings", "Fetch product listings from the Shopify store",
        GET_PRODUCT_LISTINGS,
        properties=paged,
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_product_listing", "Fetch a specific product listing by ID", GET_PRODUCT_LISTING,
        properties={"id": gid("Product listing", "ProductListing")},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_collection_listings", "Fetch collection listings from the Shopify store",
        GET_COLLECTION_LISTINGS,
        properties=paged,
        defaults={"first": 50},
    )
