from __future__ import annotations

from typing import Any, Dict

from .common import enum, graphql_tool, string

REPORT_TYPES = ["sales", "traffic", "customers", "products", "orders"]
GRANULARITIES = ["daily", "weekly", "monthly", "yearly"]

GET_ANALYTICS = """
query GetAnalytics($startDate: DateTime!, $endDate: DateTime!) {
  shop { id name }
}
"""

RUN_SHOPIFYQL = """
query RunShopifyQL($query: String!) {
  shopifyqlQuery(query: $query) {
    results { columns { name dataType } rows }
    parseErrors { message }
  }
}
"""

SHOPIFYQL_NOTE = "Analytics data requires ShopifyQL queries. Use the run_shopifyql_query tool for detailed analytics."


def _report(arguments: Dict[str, Any], data: Any) -> Dict[str, Any]:
    return {
        "reportType": arguments["reportType"],
        "period": {
            "startDate": arguments["startDate"],
            "endDate": arguments["endDate"],
            "granularity": arguments.get("granularity", "daily"),
        },
        "data": data,
        "note": SHOPIFYQL_NOTE,
    }


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_analytics_report", "Fetch analytics reports and metrics from Shopify", GET_ANALYTICS,
        properties={
            "reportType": enum(REPORT_TYPES, "Type of analytics report"),
            "startDate": string("Start date in ISO format (YYYY-MM-DD)"),
            "endDate": string("End date in ISO format (YYYY-MM-DD)"),
            "granularity": enum(GRANULARITIES, "Time granularity for the report"),
        },
        required=["reportType", "startDate", "endDate"],
        variables=lambda args: {"startDate": args["startDate"], "endDate": args["endDate"]},
        shape=_report,
    )
    graphql_tool(
        server, client, "run_shopifyql_query", "Execute a ShopifyQL query for custom analytics and reporting",
        RUN_SHOPIFYQL,
        properties={
            "query": string(
                "ShopifyQL query string (e.g., 'SHOW total_sales, orders_count FROM sales OVER day SINCE -7d')"
            ),
        },
        required=["query"],
    )
