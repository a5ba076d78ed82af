from __future__ import annotations

from .common import graphql_tool, string

GET_SHOP = """
query GetShop {
  shop {
    id
    name
    email
    contactEmail
    myshopifyDomain
    primaryDomain { url host }
    currencyCode
    ianaTimezone
    timezoneAbbreviation
    createdAt
    updatedAt
    checkoutApiSupported
    taxesIncluded
    taxShipping
    customerAccounts
    shipsToCountries
    plan { displayName partnerDevelopment shopifyPlus }
    billingAddress { address1 city province country zip phone }
    features { storefront reports giftCards bundles { enabled } }
  }
}
"""

GET_SHOP_POLICIES = """
query GetShopPolicies {
  shop {
    shopPolicies { id type title body url createdAt updatedAt }
  }
}
"""

SHOPIFYQL = """
query ShopifyQL($query: String!) {
  shopifyqlQuery(query: $query) {
    parseError
    tableData {
      columns { name dataType displayName }
      rows
      rowCount
    }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(server, client, "get_shop_info", "Fetch general shop information", GET_SHOP)
    graphql_tool(
        server, client, "get_shop_policies",
        "Fetch shop policies (refund, privacy, terms of service, etc.)",
        GET_SHOP_POLICIES,
    )
    graphql_tool(
        server, client, "shopifyql_query",
        "Execute a ShopifyQL query for analytics (requires read_analytics scope)",
        SHOPIFYQL,
        properties={"query": string("ShopifyQL query string")},
        required=["query"],
    )
