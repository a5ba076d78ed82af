from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, enum, gid, graphql_tool, obj, page, patched_input, string

ADDRESS = "address1 city province country zip"

COMPANY_FIELDS = "id name externalId note createdAt updatedAt"

GET_COMPANIES = f"""
query GetCompanies($first: Int!, $after: String, $query: String, $sortKey: CompanySortKeys, $reverse: Boolean) {{
  companies(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        {COMPANY_FIELDS}
        contactCount
        locations(first: 5) {{ edges {{ node {{ id name }} }} }}
        mainContact {{ id customer {{ id email firstName lastName }} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_COMPANY = f"""
query GetCompany($id: ID!) {{
  company(id: $id) {{
    {COMPANY_FIELDS}
    contactCount
    totalSpent {{ amount currencyCode }}
    mainContact {{ id customer {{ id email firstName lastName }} }}
    contacts(first: 20) {{ edges {{ node {{ id isMainContact customer {{ id email firstName lastName }} }} }} }}
    locations(first: 20) {{
      edges {{
        node {{
          id name externalId phone locale
          billingAddress {{ {ADDRESS} }}
          shippingAddress {{ {ADDRESS} }}
        }}
      }}
    }}
  }}
}}
"""

CREATE_COMPANY = f"""
mutation CompanyCreate($input: CompanyCreateInput!) {{
  companyCreate(input: $input) {{
    company {{
      {COMPANY_FIELDS}
      contacts(first: 5) {{ edges {{ node {{ id isMainContact customer {{ id firstName lastName email }} }} }} }}
    }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_COMPANY = f"""
mutation CompanyUpdate($id: ID!, $input: CompanyUpdateInput!) {{
  companyUpdate(companyId: $id, input: $input) {{
    company {{ {COMPANY_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

CREATE_COMPANY_LOCATION = f"""
mutation CompanyLocationCreate($companyId: ID!, $input: CompanyLocationInput!) {{
  companyLocationCreate(companyId: $companyId, input: $input) {{
    companyLocation {{
      id name externalId phone locale
      billingAddress {{ {ADDRESS} }}
      shippingAddress {{ {ADDRESS} }}
    }}
    userErrors {{ field message }}
  }}
}}
"""


def _update_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["externalId", "note"])
    if arguments.get("name"):
        patch.set("name", arguments["name"])
    return {"id": arguments["id"], "input": patch.as_dict()}


def register(server, client) -> None:
    address = obj({
        "address1": string("Street address"),
        "city": string("City"),
        "province": string("Province/State"),
        "country": string("Country"),
        "zip": string("ZIP/Postal code"),
        "phone": string("Phone number"),
    }, required=["address1", "city", "province", "country", "zip"])

    graphql_tool(
        server, client, "get_companies", "Fetch B2B companies from the store", GET_COMPANIES,
        properties={
            **page("companies", "Filter query (e.g., 'name:Acme')"),
            "sortKey": enum(["NAME", "CREATED_AT", "UPDATED_AT", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "NAME", "reverse": False},
    )
    graphql_tool(
        server, client, "get_company", "Fetch a specific company by ID", GET_COMPANY,
        properties={"id": gid("Company", "Company")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_company", "Create a new B2B company", CREATE_COMPANY,
        properties={
            "name": string("Company name"),
            "externalId": string("External ID for the company"),
            "note": string("Internal notes about the company"),
            "mainContact": obj({
                "firstName": string("Contact first name"),
                "lastName": string("Contact last name"),
                "email": string("Contact email"),
                "phone": string("Contact phone"),
            }, "Main contact for the company", required=["firstName", "lastName", "email"]),
        },
        required=["name"],
        variables=patched_input(["name", "externalId", "note", "mainContact"], skip_empty=True),
    )
    graphql_tool(
        server, client, "update_company", "Update an existing company", UPDATE_COMPANY,
        properties={
            "id": string("Company ID"),
            "name": string("Company name"),
            "externalId": string("External ID for the company"),
            "note": string("Internal notes about the company"),
        },
        required=["id"],
        variables=_update_variables,
    )
    graphql_tool(
        server, client, "create_company_location", "Add a location to a company", CREATE_COMPANY_LOCATION,
        properties={
            "companyId": string("Company ID"),
            "name": string("Location name"),
            "externalId": string("External ID for the location"),
            "phone": string("Location phone number"),
            "locale": string("Location locale (e.g., 'en-US')"),
            "billingAddress": address,
            "shippingAddress": address,
        },
        required=["companyId", "name", "billingAddress"],
        variables=patched_input(
            ["name", "billingAddress", "externalId", "phone", "locale", "shippingAddress"],
            keys=["companyId"], skip_empty=True,
        ),
    )
