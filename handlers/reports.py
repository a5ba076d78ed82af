from __future__ import annotations

from .common import gid, graphql_tool, integer, string

REPORT_FIELDS = "id name category createdAt updatedAt"

GET_REPORTS = f"""
query GetReports($first: Int!, $after: String) {{
  reports(first: $first, after: $after) {{
    edges {{ node {{ {REPORT_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_REPORT = f"""
query GetReport($id: ID!) {{
  report(id: $id) {{ {REPORT_FIELDS} graphQLDefinition {{ id name }} }}
}}
"""

RUN_REPORT = """
mutation RunReport($id: ID!) {
  reportRun(id: $id) {
    report { id name }
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    report_id = gid("Report", "Report")
    graphql_tool(
        server, client, "get_reports", "Fetch reports from the Shopify store", GET_REPORTS,
        properties={
            "first": integer("Number of reports to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_report", "Fetch a specific report by ID", GET_REPORT,
        properties={"id": report_id},
        required=["id"],
    )
    graphql_tool(
        server, client, "run_report", "Run a report and get its results", RUN_REPORT,
        properties={"id": report_id},
        required=["id"],
    )
