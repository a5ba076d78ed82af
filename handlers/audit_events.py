from __future__ import annotations

from .common import boolean, enum, graphql_tool, page, string

SORT_KEYS = ["CREATED_AT", "ID"]

GET_AUDIT_EVENTS = """
query GetAuditEvents($first: Int!, $after: String, $query: String, $sortKey: AuditEventSortKeys, $reverse: Boolean) {
  auditEvents(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
    edges {
      node {
        id createdAt action description category
        author { id firstName lastName email }
        subject { id type title }
        arguments { key value }
        shop { id name }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_CUSTOMER_EVENTS = """
query GetCustomerEvents(
  $first: Int!, $after: String, $query: String, $sortKey: CustomerEventSortKeys, $reverse: Boolean,
  $occurredAtMin: DateTime, $occurredAtMax: DateTime
) {
  customerEvents(
    first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse,
    occurredAtMin: $occurredAtMin, occurredAtMax: $occurredAtMax
  ) {
    edges {
      node {
        id createdAt occurredAt eventType
        customerJourneySummary {
          customerVisit {
            id landingPage landingPageHtml referralCode referralInfoHtml source sourceDescription sourceType
            utmParameters { campaign content medium source term }
          }
        }
        shop { id name }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

# newest first unless the caller says otherwise
LIST_DEFAULTS = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_audit_events",
        "Fetch audit events for the store (staff actions, app installations, etc.)", GET_AUDIT_EVENTS,
        properties={
            **page("events", "Filter query (e.g., 'action:product_create', 'author:user@example.com')"),
            "sortKey": enum(SORT_KEYS, "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults=LIST_DEFAULTS,
    )
    graphql_tool(
        server, client, "get_customer_events",
        "Fetch customer events (page views, product views, searches, etc.)", GET_CUSTOMER_EVENTS,
        properties={
            **page("events", "Filter query (e.g., 'customer_id:123456789', 'event_type:page_view')"),
            "sortKey": enum(SORT_KEYS, "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
            "occurredAtMin": string("Minimum occurrence date (ISO format)"),
            "occurredAtMax": string("Maximum occurrence date (ISO format)"),
        },
        defaults=LIST_DEFAULTS,
    )
