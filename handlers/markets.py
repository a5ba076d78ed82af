from __future__ import annotations

from .common import gid, graphql_tool, integer, patched_input, string

MARKET_FIELDS = """
id name handle status
supportedLocales { locale enabled }
currencies { currencyCode exchangeRate format }
priceListByContext { id name }
"""

GET_MARKETS = f"""
query GetMarkets($first: Int!, $after: String) {{
  markets(first: $first, after: $after) {{
    edges {{
      node {{
        {MARKET_FIELDS}
        webPresences(first: 10) {{ edges {{ node {{ id domain launchAt alternateLocales }} }} }}
        regions(first: 10) {{ edges {{ node {{ id name code }} }} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_MARKET = f"""
query GetMarket($id: ID!) {{
  market(id: $id) {{
    {MARKET_FIELDS}
    webPresences(first: 20) {{ edges {{ node {{ id domain launchAt alternateLocales defaultLocale }} }} }}
    regions(first: 20) {{ edges {{ node {{ id name code }} }} }}
  }}
}}
"""

CREATE_MARKET = """
mutation MarketCreate($input: MarketCreateInput!) {
  marketCreate(input: $input) {
    market { id name handle status }
    userErrors { field message }
  }
}
"""

UPDATE_MARKET = """
mutation MarketUpdate($id: ID!, $input: MarketUpdateInput!) {
  marketUpdate(id: $id, input: $input) {
    market { id name handle status }
    userErrors { field message }
  }
}
"""

DELETE_MARKET = """
mutation MarketDelete($id: ID!) {
  marketDelete(id: $id) {
    deletedId
    userErrors { field message }
  }
}
"""

GET_MARKETS_HOME = """
query GetMarketsHome {
  marketsHome {
    totalMarkets
    totalRevenue
    topMarkets(first: 10) { marketId marketName totalOrders totalSales }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_markets", "Fetch markets configured for the store", GET_MARKETS,
        properties={
            "first": integer("Number of markets to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_market", "Fetch a specific market by ID", GET_MARKET,
        properties={"id": gid("Market", "Market")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_market", "Create a new market", CREATE_MARKET,
        properties={
            "name": string("Market name"),
            "handle": string("Unique handle for the market"),
        },
        required=["name", "handle"],
        variables=lambda args: {"input": {"name": args["name"], "handle": args["handle"]}},
    )
    graphql_tool(
        server, client, "update_market", "Update an existing market", UPDATE_MARKET,
        properties={
            "id": string("Market ID"),
            "name": string("Market name"),
            "handle": string("Handle"),
        },
        required=["id"],
        variables=patched_input(["name", "handle"], keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_market", "Delete a market", DELETE_MARKET,
        properties={"id": string("Market ID to delete")},
        required=["id"],
    )
    graphql_tool(server, client, "get_markets_home", "Fetch markets home data and analytics", GET_MARKETS_HOME)
