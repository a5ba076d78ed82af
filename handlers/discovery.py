from __future__ import annotations

from .common import array, boolean, enum, graphql_tool, integer, obj, string

SEARCH_TYPES = ["PRODUCT", "COLLECTION", "PAGE", "ARTICLE", "QUERY"]

SEARCH_PRODUCTS = """
query SearchProducts($first: Int!, $after: String, $query: String, $sortKey: ProductSortKeys, $reverse: Boolean, $filters: [ProductFilter!]) {
  products(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse, filters: $filters) {
    edges {
      node {
        id title description handle productType vendor tags status createdAt updatedAt publishedAt
        variants(first: 10) {
          edges { node { id title sku price compareAtPrice inventoryQuantity availableForSale } }
        }
        images(first: 5) { edges { node { id url altText } } }
        seo { title description }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_RECOMMENDATIONS = """
query GetProductRecommendations($productId: ID!, $first: Int!, $intent: ProductRecommendationIntent) {
  productRecommendations(productId: $productId, first: $first, intent: $intent) {
    edges {
      node {
        id title description handle productType vendor
        priceRangeV2 {
          minVariantPrice { amount currencyCode }
          maxVariantPrice { amount currencyCode }
        }
        images(first: 1) { edges { node { id url altText } } }
      }
      cursor
    }
  }
}
"""

PREDICTIVE_SEARCH = """
query PredictiveSearch($query: String!, $first: Int!, $types: [PredictiveSearchType!]) {
  predictiveSearch(query: $query, first: $first, types: $types) {
    products { edges { node { id title handle productType vendor images(first: 1) { edges { node { url altText } } } } } }
    collections { edges { node { id title handle image { url altText } } } }
    pages { edges { node { id title handle } } }
    articles { edges { node { id title handle blog { handle } } } }
    queries { text styledText trackingParameters }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "search_products", "Search products using Shopify's discovery/search functionality",
        SEARCH_PRODUCTS,
        properties={
            "first": integer("Number of products to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "query": string("Search query (e.g., 't-shirt', 'category:shirts')"),
            "sortKey": enum(
                ["TITLE", "PRICE", "BEST_SELLING", "CREATED_AT", "UPDATED_AT", "RELEVANCE"], "Field to sort by",
            ),
            "reverse": boolean("Reverse the sort order"),
            "filters": array(obj({
                "field": string("Filter field (e.g., 'price', 'vendor', 'product_type')"),
                "value": string("Filter value"),
            }, required=["field", "value"]), "Structured product filters"),
        },
        required=["query"],
        defaults={"first": 50, "sortKey": "RELEVANCE", "reverse": False},
    )
    graphql_tool(
        server, client, "get_product_recommendations", "Get product recommendations based on a product",
        GET_RECOMMENDATIONS,
        properties={
            "productId": string("Product ID to get recommendations for"),
            "first": integer("Number of recommendations (1-50, default: 10)", 1, 50),
            "intent": enum(["RELATED", "COMPLEMENTARY"], "Type of recommendations"),
        },
        required=["productId"],
        defaults={"first": 10, "intent": "RELATED"},
    )
    graphql_tool(
        server, client, "predictive_search", "Get predictive search results (autocomplete)", PREDICTIVE_SEARCH,
        properties={
            "query": string("Search query string"),
            "first": integer("Number of results (1-50, default: 10)", 1, 50),
            "types": array(enum(SEARCH_TYPES), "Types to search for"),
        },
        required=["query"],
        defaults={"first": 10, "types": ["PRODUCT", "COLLECTION", "QUERY"]},
    )
