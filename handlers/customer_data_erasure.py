from __future__ import annotations

from .common import enum, gid, graphql_tool, integer, string

REQUEST_STATUSES = ["PENDING", "IN_PROGRESS", "COMPLETED", "FAILED"]

GET_ERASURE_REQUESTS = """
query GetCustomerDataErasureRequests($first: Int!, $after: String, $status: CustomerDataErasureRequestStatus) {
  customerDataErasureRequests(first: $first, after: $after, status: $status) {
    edges { node { id customerId status requestedAt completedAt shop { id name } } cursor }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

REQUEST_ERASURE = """
mutation CustomerDataErasureRequestCreate($customerId: ID!) {
  customerDataErasureRequestCreate(customerId: $customerId) {
    customerDataErasureRequest { id customerId status requestedAt shop { id name } }
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_customer_data_erasure_requests", "Fetch customer data erasure (GDPR) requests",
        GET_ERASURE_REQUESTS,
        properties={
            "first": integer("Number of requests to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "status": enum(REQUEST_STATUSES, "Filter by status"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "request_customer_data_erasure",
        "Submit a customer data erasure request (GDPR right to be forgotten)", REQUEST_ERASURE,
        properties={"customerId": gid("Customer", "Customer")},
        required=["customerId"],
    )
