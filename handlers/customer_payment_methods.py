from __future__ import annotations

from .common import gid, graphql_tool, integer, string

INSTRUMENT = """
instrument {
  ... on CustomerCreditCard {
    brand lastDigits expiryMonth expiryYear name
    billingAddress { address1 address2 city province country zip phone }
  }
  ... on CustomerPaypalBillingAgreement { paypalAccountEmail inactive }
  ... on CustomerShopPayAgreement { name expiryMonth expiryYear lastDigits brand }
}
"""

GET_CUSTOMER_PAYMENT_METHODS = f"""
query GetCustomerPaymentMethods($customerId: ID!, $first: Int!, $after: String) {{
  customer(id: $customerId) {{
    id firstName lastName email
    paymentMethods(first: $first, after: $after) {{
      edges {{
        node {{ id customer {{ id firstName lastName }} {INSTRUMENT} revokedAt revokedReason }}
        cursor
      }}
      pageInfo {{ hasNextPage hasPreviousPage }}
    }}
  }}
}}
"""

GET_CUSTOMER_PAYMENT_METHOD = f"""
query GetCustomerPaymentMethod($id: ID!) {{
  customerPaymentMethod(id: $id) {{
    id customer {{ id firstName lastName email }} {INSTRUMENT} revokedAt revokedReason
  }}
}}
"""

REVOKE_CUSTOMER_PAYMENT_METHOD = """
mutation CustomerPaymentMethodRevoke($id: ID!, $reason: String) {
  customerPaymentMethodRevoke(id: $id, reason: $reason) {
    revokedCustomerPaymentMethodId
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_customer_payment_methods", "Fetch stored payment methods for a customer",
        GET_CUSTOMER_PAYMENT_METHODS,
        properties={
            "customerId": string("Customer ID"),
            "first": integer("Number of methods to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        required=["customerId"],
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_customer_payment_method", "Fetch a specific payment method by ID",
        GET_CUSTOMER_PAYMENT_METHOD,
        properties={"id": gid("Payment Method", "CustomerPaymentMethod")},
        required=["id"],
    )
    graphql_tool(
        server, client, "revoke_customer_payment_method", "Revoke a customer's stored payment method",
        REVOKE_CUSTOMER_PAYMENT_METHOD,
        properties={"id": string("Payment Method ID"), "reason": string("Reason for revocation")},
        required=["id"],
    )
