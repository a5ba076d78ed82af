from __future__ import annotations

from .common import enum, graphql_tool, integer, patched_input, string
from .customer_data_erasure import REQUEST_STATUSES

MERGE_FIELDS = "id status sourceCustomerId targetCustomerId createdAt"

GET_MERGE_REQUESTS = f"""
query GetCustomerMergeRequests($first: Int!, $after: String, $status: CustomerMergeRequestStatus) {{
  customerMergeRequests(first: $first, after: $after, status: $status) {{
    edges {{ node {{ {MERGE_FIELDS} completedAt shop {{ id name }} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

REQUEST_MERGE = f"""
mutation CustomerMergeRequestCreate($input: CustomerMergeRequestInput!) {{
  customerMergeRequestCreate(input: $input) {{
    customerMergeRequest {{ {MERGE_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_customer_merge_requests", "Fetch customer merge requests", GET_MERGE_REQUESTS,
        properties={
            "first": integer("Number of requests to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "status": enum(REQUEST_STATUSES, "Filter by status"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "request_customer_merge",
        "Merge one customer into another (combines order history, addresses, etc.)", REQUEST_MERGE,
        properties={
            "sourceCustomerId": string("Customer ID to merge from (will be deleted)"),
            "targetCustomerId": string("Customer ID to merge into (will be kept)"),
            "note": string("Optional note about the merge"),
        },
        required=["sourceCustomerId", "targetCustomerId"],
        variables=patched_input(["sourceCustomerId", "targetCustomerId", "note"], skip_empty=True),
    )
