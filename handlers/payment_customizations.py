from __future__ import annotations

from .common import array, boolean, gid, graphql_tool, metafields, page, patched_input, string

CUSTOMIZATION_FIELDS = "id title enabled functionId"

GET_CUSTOMIZATIONS = f"""
query GetPaymentCustomizations($first: Int!, $after: String, $query: String, $reverse: Boolean) {{
  paymentCustomizations(first: $first, after: $after, query: $query, reverse: $reverse) {{
    edges {{ node {{ {CUSTOMIZATION_FIELDS} shopifyFunction {{ id title apiType app {{ title }} }} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_CUSTOMIZATION = f"""
query GetPaymentCustomization($id: ID!) {{
  paymentCustomization(id: $id) {{
    {CUSTOMIZATION_FIELDS}
    shopifyFunction {{ id title apiType app {{ title }} }}
    metafields(first: 20) {{ edges {{ node {{ namespace key value type }} }} }}
  }}
}}
"""

CREATE_CUSTOMIZATION = f"""
mutation PaymentCustomizationCreate($paymentCustomization: PaymentCustomizationInput!) {{
  paymentCustomizationCreate(paymentCustomization: $paymentCustomization) {{
    paymentCustomization {{ {CUSTOMIZATION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_CUSTOMIZATION = f"""
mutation PaymentCustomizationUpdate($id: ID!, $paymentCustomization: PaymentCustomizationInput!) {{
  paymentCustomizationUpdate(id: $id, paymentCustomization: $paymentCustomization) {{
    paymentCustomization {{ {CUSTOMIZATION_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_CUSTOMIZATION = """
mutation PaymentCustomizationDelete($id: ID!) {
  paymentCustomizationDelete(id: $id) {
    deletedId
    userErrors { field message }
  }
}
"""

SET_ACTIVATION = """
mutation PaymentCustomizationActivation($ids: [ID!]!, $enabled: Boolean!) {
  paymentCustomizationActivation(ids: $ids, enabled: $enabled) {
    ids
    userErrors { field message }
  }
}
"""

FIELDS = ["title", "functionHandle", "enabled", "metafields"]


def register(server, client) -> None:
    config = metafields("Function configuration metafields")
    create_input = patched_input(FIELDS, wrap="paymentCustomization")

    graphql_tool(
        server, client, "get_payment_customizations", "Fetch payment customizations (Shopify Functions)",
        GET_CUSTOMIZATIONS,
        properties={
            **page("payment customizations", "Filter query for payment customizations"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_payment_customization", "Fetch a specific payment customization by ID",
        GET_CUSTOMIZATION,
        properties={"id": gid("Payment Customization", "PaymentCustomization")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_payment_customization", "Create a payment customization backed by a function",
        CREATE_CUSTOMIZATION,
        properties={
            "title": string("Title of the payment customization"),
            "functionHandle": string("Function handle scoped to your app ID"),
            "enabled": boolean("Whether the customization is enabled (default: true)"),
            "metafields": config,
        },
        required=["title", "functionHandle"],
        variables=lambda args: create_input({"enabled": True, **args}),
    )
    graphql_tool(
        server, client, "update_payment_customization", "Update a payment customization", UPDATE_CUSTOMIZATION,
        properties={
            "id": string("Payment Customization ID"),
            "title": string("New title for the customization"),
            "enabled": boolean("Enable or disable the customization"),
            "functionHandle": string("Function handle scoped to your app ID"),
            "metafields": config,
        },
        required=["id"],
        variables=patched_input(FIELDS, wrap="paymentCustomization", keys=["id"]),
    )
    graphql_tool(
        server, client, "delete_payment_customization", "Delete a payment customization", DELETE_CUSTOMIZATION,
        properties={"id": string("Payment Customization ID to delete")},
        required=["id"],
    )
    graphql_tool(
        server, client, "set_payment_customization_activation", "Activate or deactivate payment customizations",
        SET_ACTIVATION,
        properties={
            "ids": array(string(), "Array of Payment Customization IDs"),
            "enabled": boolean("Set to true to activate, false to deactivate"),
        },
        required=["ids", "enabled"],
    )
