from __future__ import annotations

from .common import array, boolean, enum, gid, graphql_tool, obj, page, patched_input, string

CUSTOMER_FIELDS = "id firstName lastName email phone createdAt updatedAt state verifiedEmail tags"

GET_CUSTOMERS = f"""
query GetCustomers($first: Int!, $after: String, $query: String, $sortKey: CustomerSortKeys, $reverse: Boolean) {{
  customers(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        {CUSTOMER_FIELDS}
        numberOfOrders
        amountSpent {{ amount currencyCode }}
        defaultAddress {{ address1 city province country zip }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_CUSTOMER = f"""
query GetCustomer($id: ID!) {{
  customer(id: $id) {{
    {CUSTOMER_FIELDS}
    note
    numberOfOrders
    amountSpent {{ amount currencyCode }}
    emailMarketingConsent {{ marketingState marketingOptInLevel consentUpdatedAt }}
    addresses {{ id address1 address2 city province country zip phone }}
    orders(first: 10) {{ edges {{ node {{ id name createdAt totalPriceSet {{ shopMoney {{ amount currencyCode }} }} }} }} }}
  }}
}}
"""

CREATE_CUSTOMER = f"""
mutation CustomerCreate($input: CustomerInput!) {{
  customerCreate(input: $input) {{
    customer {{ {CUSTOMER_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_CUSTOMER = f"""
mutation CustomerUpdate($input: CustomerInput!) {{
  customerUpdate(input: $input) {{
    customer {{ {CUSTOMER_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_CUSTOMER = """
mutation CustomerDelete($input: CustomerDeleteInput!) {
  customerDelete(input: $input) {
    deletedCustomerId
    userErrors { field message }
  }
}
"""

EDITABLE_FIELDS = ["email", "firstName", "lastName", "phone", "note", "tags"]

ADDRESS = obj({
    "address1": string(),
    "address2": string(),
    "city": string(),
    "province": string(),
    "country": string(),
    "zip": string(),
    "phone": string(),
}, required=["address1", "city", "country", "zip"])


def register(server, client) -> None:
    editable = {
        "email": string("Customer email"),
        "firstName": string("Customer first name"),
        "lastName": string("Customer last name"),
        "phone": string("Customer phone"),
        "note": string("Internal note about the customer"),
        "tags": array(string(), "Customer tags"),
    }
    graphql_tool(
        server, client, "get_customers",
        "Fetch customers from the Shopify store with optional filtering",
        GET_CUSTOMERS,
        properties={
            **page("customers", "Filter query (e.g., 'email:customer@example.com', 'name:John')"),
            "sortKey": enum(["CREATED_AT", "UPDATED_AT", "LAST_ORDER_DATE", "TOTAL_SPENT", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "CREATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_customer", "Fetch a specific customer by ID", GET_CUSTOMER,
        properties={"id": gid("Customer", "Customer")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_customer", "Create a new customer in the Shopify store", CREATE_CUSTOMER,
        properties={**editable, "addresses": array(ADDRESS, "Customer addresses")},
        required=["email"],
        variables=patched_input(EDITABLE_FIELDS + ["addresses"]),
    )
    graphql_tool(
        server, client, "update_customer", "Update an existing customer", UPDATE_CUSTOMER,
        properties={"id": gid("Customer", "Customer"), **editable},
        required=["id"],
        variables=patched_input(EDITABLE_FIELDS, key_in_input=["id"]),
    )
    graphql_tool(
        server, client, "delete_customer", "Delete a customer from the store", DELETE_CUSTOMER,
        properties={"id": gid("Customer", "Customer")},
        required=["id"],
        variables=lambda args: {"input": {"id": args["id"]}},
    )
