from __future__ import annotations

from .common import enum, graphql_tool, integer, number, patched_input, string

PAYMENT_TERMS_TYPES = ["NET_30", "NET_60", "NET_90", "DUE_ON_RECEIPT", "FIXED", "INSTALLMENT"]

TERMS_FIELDS = "id name paymentTermsType dueInDays discountPercentage"

GET_PAYMENT_TERMS = f"""
query GetPaymentTerms($first: Int!, $after: String) {{
  paymentTerms(first: $first, after: $after) {{
    edges {{
      node {{
        {TERMS_FIELDS}
        installments(first: 10) {{ edges {{ node {{ id dueInDays percentage }} }} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

CREATE_PAYMENT_TERMS = f"""
mutation PaymentTermsCreate($input: PaymentTermsInput!) {{
  paymentTermsCreate(input: $input) {{
    paymentTerms {{ {TERMS_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_PAYMENT_TERMS = f"""
mutation PaymentTermsUpdate($id: ID!, $input: PaymentTermsInput!) {{
  paymentTermsUpdate(id: $id, input: $input) {{
    paymentTerms {{ {TERMS_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_PAYMENT_TERMS = """
mutation PaymentTermsDelete($id: ID!) {
  paymentTermsDelete(id: $id) {
    deletedId
    userErrors { field message }
  }
}
"""

GET_PAYMENT_MANDATES = """
query GetPaymentMandates($first: Int!, $after: String, $paymentMethodType: String) {
  paymentMandates(first: $first, after: $after, paymentMethodType: $paymentMethodType) {
    edges {
      node {
        id createdAt status
        paymentMethod { id paymentMethodType }
        customer { id email }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_payment_terms", "Fetch payment terms configured for the store", GET_PAYMENT_TERMS,
        properties={
            "first": integer("Number of payment terms to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "create_payment_terms", "Create new payment terms", CREATE_PAYMENT_TERMS,
        properties={
            "name": string("Payment terms name"),
            "paymentTermsType": enum(PAYMENT_TERMS_TYPES, "Type of payment terms"),
            "dueInDays": integer("Number of days until due (for NET types)"),
            "discountPercentage": number("Discount percentage for early payment"),
        },
        required=["name", "paymentTermsType"],
        variables=patched_input(["name", "paymentTermsType", "dueInDays", "discountPercentage"]),
    )
    graphql_tool(
        server, client, "update_payment_terms", "Update existing payment terms", UPDATE_PAYMENT_TERMS,
        properties={
            "id": string("Payment Terms ID"),
            "name": string("Payment terms name"),
            "dueInDays": integer("Number of days until due"),
            "discountPercentage": number("Discount percentage"),
        },
        required=["id"],
        variables=patched_input(["name", "dueInDays", "discountPercentage"], keys=["id"]),
    )
    graphql_tool(
        server, client, "delete_payment_terms", "Delete payment terms", DELETE_PAYMENT_TERMS,
        properties={"id": string("Payment Terms ID to delete")},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_payment_mandates", "Fetch customer payment mandates", GET_PAYMENT_MANDATES,
        properties={
            "first": integer("Number of mandates to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "paymentMethodType": string("Filter by payment method type"),
        },
        defaults={"first": 50},
    )
