from __future__ import annotations

from .common import graphql_tool, integer, string

GET_SHIPPING_ZONES = """
query GetShippingZones {
  shippingZones {
    edges { node { id name countries(first: 50) { edges { node { id name code } } } } }
  }
}
"""

GET_DELIVERY_PROFILES = """
query GetDeliveryProfiles($first: Int!, $after: String) {
  deliveryProfiles(first: $first, after: $after) {
    edges {
      node {
        id name active
        locationGroups(first: 10) {
          edges { node { id locations(first: 10) { edges { node { id name } } } } }
        }
        methods(first: 10) { edges { node { id name } } }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_DELIVERY_CARRIERS = """
query GetDeliveryCarriers($first: Int!, $after: String) {
  carrierServices(first: $first, after: $after) {
    edges { node { id name active serviceName format } cursor }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_SHIPPING_COUNTRIES = """
query GetShippingCountries {
  countries(first: 250) {
    edges {
      node { id name code currencyCode provinces(first: 50) { edges { node { id name code } } } }
    }
  }
}
"""


def _paged(noun: str):
    return {
        "first": integer(f"Number of {noun} to fetch (1-250, default: 50)", 1, 250),
        "after": string("Cursor for pagination"),
    }


def register(server, client) -> None:
    graphql_tool(server, client, "get_shipping_zones", "Fetch shipping zones from the Shopify store", GET_SHIPPING_ZONES)
    graphql_tool(
        server, client, "get_delivery_profiles", "Fetch delivery profiles", GET_DELIVERY_PROFILES,
        properties=_paged("profiles"),
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_delivery_carriers", "Fetch delivery carrier services", GET_DELIVERY_CARRIERS,
        properties=_paged("carriers"),
        defaults={"first": 50},
    )
    graphql_tool(server, client, "get_shipping_countries", "Fetch available shipping countries", GET_SHIPPING_COUNTRIES)
