from __future__ import annotations

from .common import enum, gid, graphql_tool, integer, number, patched_input, string

MONEY = "amount currencyCode"

SESSION_FIELDS = f"""
id openingTime closingTime cashTrackingSessionStatus
location {{ id name }}
openingBalance {{ {MONEY} }}
closingBalance {{ {MONEY} }}
"""

GET_SESSIONS = f"""
query GetCashTrackingSessions($first: Int!, $after: String, $locationId: ID, $startDate: DateTime, $endDate: DateTime) {{
  cashTrackingSessions(first: $first, after: $after, locationId: $locationId, startDate: $startDate, endDate: $endDate) {{
    edges {{ node {{ {SESSION_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_SESSION = f"""
query GetCashTrackingSession($id: ID!) {{
  cashTrackingSession(id: $id) {{
    {SESSION_FIELDS}
    openingNote closingNote
    totalDiscrepancy {{ {MONEY} }}
    adjustments(first: 50) {{
      edges {{ node {{ id time note cash {{ {MONEY} }} staffMember {{ id name }} }} }}
    }}
  }}
}}
"""

CREATE_SESSION = f"""
mutation CashTrackingSessionCreate($input: CashTrackingSessionCreateInput!) {{
  cashTrackingSessionCreate(input: $input) {{
    cashTrackingSession {{ {SESSION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

CLOSE_SESSION = f"""
mutation CashTrackingSessionClose($id: ID!, $input: CashTrackingSessionCloseInput!) {{
  cashTrackingSessionClose(id: $id, input: $input) {{
    cashTrackingSession {{ {SESSION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

ADD_TRANSACTION = f"""
mutation CashTrackingTransactionAdd($sessionId: ID!, $input: CashTrackingTransactionInput!) {{
  cashTrackingTransactionAdd(sessionId: $sessionId, input: $input) {{
    transaction {{ id type note createdAt amount {{ {MONEY} }} }}
    userErrors {{ field message }}
  }}
}}
"""

TRANSACTION_TYPES = ["ADD", "REMOVE", "SALE", "REFUND", "PAYOUT"]


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_cash_tracking_sessions", "Fetch cash tracking sessions for POS", GET_SESSIONS,
        properties={
            "first": integer("Number of sessions to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "locationId": string("Filter by location ID"),
            "startDate": string("Start date filter (ISO format)"),
            "endDate": string("End date filter (ISO format)"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_cash_tracking_session", "Fetch a specific cash tracking session by ID", GET_SESSION,
        properties={"id": gid("Cash Tracking Session", "CashTrackingSession")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_cash_tracking_session", "Create a new cash tracking session for a location",
        CREATE_SESSION,
        properties={
            "locationId": string("Location ID"),
            "startingCash": number("Starting cash amount"),
            "note": string("Optional note"),
        },
        required=["locationId", "startingCash"],
        variables=patched_input(["locationId", "startingCash", "note"]),
    )
    graphql_tool(
        server, client, "close_cash_tracking_session", "Close a cash tracking session", CLOSE_SESSION,
        properties={
            "id": string("Cash Tracking Session ID"),
            "endingCash": number("Ending cash amount"),
            "note": string("Optional note"),
        },
        required=["id", "endingCash"],
        variables=patched_input(["endingCash", "note"], keys=["id"]),
    )
    graphql_tool(
        server, client, "add_cash_transaction", "Add a cash transaction to a tracking session", ADD_TRANSACTION,
        properties={
            "sessionId": string("Cash Tracking Session ID"),
            "type": enum(TRANSACTION_TYPES, "Transaction type"),
            "amount": number("Transaction amount"),
            "note": string("Optional note"),
            "paymentMethod": string("Payment method (for non-cash transactions)"),
            "referenceNumber": string("Reference number"),
        },
        required=["sessionId", "type", "amount"],
        variables=patched_input(["type", "amount", "note", "paymentMethod", "referenceNumber"], keys=["sessionId"]),
    )
