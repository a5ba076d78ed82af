from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import array, boolean, enum, gid, graphql_tool, integer, number, obj, page, string

INTERVALS = ["DAY", "WEEK", "MONTH", "YEAR"]

MONEY = "amount currencyCode"

LINES = f"""
lines(first: 50) {{
  edges {{ node {{ id productId variantId title quantity currentPrice {{ {MONEY} }} }} }}
}}
"""

CONTRACT_FIELDS = """
id status createdAt updatedAt nextBillingDate currencyCode
customer { id firstName lastName email }
billingPolicy { interval intervalCount }
deliveryPolicy { interval intervalCount }
"""

GET_CONTRACTS = f"""
query GetSubscriptionContracts($first: Int!, $after: String, $query: String, $sortKey: SubscriptionContractsSortKeys, $reverse: Boolean) {{
  subscriptionContracts(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{ node {{ {CONTRACT_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_CONTRACT = f"""
query GetSubscriptionContract($id: ID!) {{
  subscriptionContract(id: $id) {{
    {CONTRACT_FIELDS}
    lastPaymentStatus
    deliveryPrice {{ {MONEY} }}
    {LINES}
    orders(first: 10) {{ edges {{ node {{ id name createdAt }} }} }}
  }}
}}
"""

CREATE_CONTRACT = """
mutation SubscriptionContractCreate($input: SubscriptionContractCreateInput!) {
  subscriptionContractCreate(input: $input) {
    draft { id status customer { id firstName lastName } currencyCode nextBillingDate }
    userErrors { field message }
  }
}
"""

CREATE_CONTRACT_ATOMIC = f"""
mutation SubscriptionContractAtomicCreate($input: SubscriptionContractAtomicCreateInput!) {{
  subscriptionContractAtomicCreate(input: $input) {{
    contract {{ {CONTRACT_FIELDS} {LINES} }}
    userErrors {{ field message }}
  }}
}}
"""

STATUS_CHANGE = """
mutation SubscriptionContract{action}($subscriptionContractId: ID!) {{
  subscriptionContract{action}(subscriptionContractId: $subscriptionContractId) {{
    contract {{ id status updatedAt }}
    userErrors {{ field message }}
  }}
}}
"""

SET_NEXT_BILLING_DATE = """
mutation SubscriptionContractSetNextBillingDate($contractId: ID!, $date: DateTime!) {
  subscriptionContractSetNextBillingDate(contractId: $contractId, date: $date) {
    contract { id nextBillingDate updatedAt }
    userErrors { field message }
  }
}
"""

PRODUCT_CHANGE = f"""
mutation SubscriptionContractProductChange($subscriptionContractId: ID!, $lineId: ID!, $input: SubscriptionContractProductChangeInput!) {{
  subscriptionContractProductChange(subscriptionContractId: $subscriptionContractId, lineId: $lineId, input: $input) {{
    contract {{ id {LINES} }}
    lineUpdated {{ id variantId currentPrice {{ {MONEY} }} }}
    userErrors {{ field message }}
  }}
}}
"""

# (tool name, mutation suffix, description)
STATUS_ACTIONS = [
    ("cancel_subscription_contract", "Cancel", "Cancel a subscription contract"),
    ("pause_subscription_contract", "Pause", "Pause a subscription contract"),
    ("activate_subscription_contract", "Activate",
     "Activate a subscription contract (must be active, paused, or failed status)"),
    ("expire_subscription_contract", "Expire", "Expire a subscription contract"),
    ("fail_subscription_contract", "Fail", "Mark a subscription contract as failed"),
]


def _atomic_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {"input": {
        "customerId": arguments["customerId"],
        "currencyCode": arguments["currencyCode"],
        "nextBillingDate": arguments["nextBillingDate"],
        "lines": [
            {
                "productVariantId": line["productVariantId"],
                "quantity": line["quantity"],
                "currentPrice": str(line["currentPrice"]),
            }
            for line in arguments["lineItems"]
        ],
        "billingPolicy": {
            "interval": arguments["billingInterval"],
            "intervalCount": arguments["billingIntervalCount"],
        },
        "deliveryPolicy": {
            "interval": arguments["deliveryInterval"],
            "intervalCount": arguments["deliveryIntervalCount"],
        },
        "deliveryPrice": str(arguments.get("deliveryPrice", 0)),
    }}


def _product_change_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch()
    if arguments.get("productVariantId"):
        patch.set("productVariantId", arguments["productVariantId"])
    if arguments.get("currentPrice") is not None:
        patch.set("currentPrice", str(arguments["currentPrice"]))
    return {
        "subscriptionContractId": arguments["subscriptionContractId"],
        "lineId": arguments["lineId"],
        "input": patch.as_dict(),
    }


def register(server, client) -> None:
    contract_header = {
        "customerId": string("Customer ID to associate with the subscription"),
        "currencyCode": string("Currency code (e.g., 'USD')"),
        "nextBillingDate": string("Next billing date (ISO 8601 format)"),
    }
    graphql_tool(
        server, client, "get_subscription_contracts", "Fetch subscription contracts from the store", GET_CONTRACTS,
        properties={
            **page("contracts", "Filter query for subscription contracts"),
            "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "CREATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_subscription_contract", "Fetch a specific subscription contract by ID", GET_CONTRACT,
        properties={"id": gid("Subscription Contract", "SubscriptionContract")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_subscription_contract", "Create a new subscription contract", CREATE_CONTRACT,
        properties=contract_header,
        required=list(contract_header),
        variables=lambda args: {"input": {**{k: args[k] for k in contract_header}, "contract": {}}},
    )
    graphql_tool(
        server, client, "create_subscription_contract_atomic",
        "Create a complete subscription contract in a single operation", CREATE_CONTRACT_ATOMIC,
        properties={
            **contract_header,
            "lineItems": array(obj({
                "productVariantId": string("Product variant ID"),
                "quantity": integer("Quantity", 1),
                "currentPrice": number("Price per unit"),
            }, required=["productVariantId", "quantity", "currentPrice"]), "Subscription lines"),
            "billingInterval": enum(INTERVALS, "Billing interval"),
            "billingIntervalCount": integer("Number of intervals between billings", 1),
            "deliveryInterval": enum(INTERVALS, "Delivery interval"),
            "deliveryIntervalCount": integer("Number of intervals between deliveries", 1),
            "deliveryPrice": number("Delivery price"),
        },
        required=[
            *contract_header, "lineItems",
            "billingInterval", "billingIntervalCount", "deliveryInterval", "deliveryIntervalCount",
        ],
        variables=_atomic_variables,
    )
    for name, action, description in STATUS_ACTIONS:
        graphql_tool(
            server, client, name, description, STATUS_CHANGE.format(action=action),
            properties={"subscriptionContractId": string(f"Subscription Contract ID to {action.lower()}")},
            required=["subscriptionContractId"],
        )
    graphql_tool(
        server, client, "set_subscription_contract_next_billing_date",
        "Set the next billing date for a subscription contract", SET_NEXT_BILLING_DATE,
        properties={
            "contractId": string("Subscription Contract ID"),
            "date": string("Next billing date (ISO 8601 format)"),
        },
        required=["contractId", "date"],
    )
    graphql_tool(
        server, client, "update_subscription_contract_product",
        "Change a product or product price in a subscription contract", PRODUCT_CHANGE,
        properties={
            "subscriptionContractId": string("Subscription Contract ID"),
            "lineId": string("Subscription Line ID to update"),
            "productVariantId": string("New product variant ID (optional)"),
            "currentPrice": number("New current price (optional)"),
        },
        required=["subscriptionContractId", "lineId"],
        variables=_product_change_variables,
    )
