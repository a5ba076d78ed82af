from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, enum, gid, graphql_tool, integer, number, page, patched_input, string

RANGE = "greaterThanOrEqualTo lessThanOrEqualTo"

PRICE_RULE_FIELDS = f"""
id title status createdAt updatedAt startsAt endsAt
target allocationMethod valueType value oncePerCustomer usageLimit customerSelection
prerequisiteSubtotalRange {{ {RANGE} }}
prerequisiteQuantityRange {{ {RANGE} }}
prerequisiteToEntitlementQuantityRatio {{ prerequisiteQuantity entitledQuantity }}
customerGets {{
  items {{ ... on AllDiscountItems {{ allItems }} }}
  value {{
    ... on DiscountAmount {{ amount appliesOnEachItem }}
    ... on DiscountPercentage {{ percentage }}
  }}
}}
"""

ENTITLEMENTS = """
itemEntitlements(first: {count}) {{
  edges {{ node {{ ... on Collection {{ id title }} ... on Product {{ id title }} }} }}
}}
"""

GET_PRICE_RULES = f"""
query GetPriceRules($first: Int!, $after: String, $query: String, $sortKey: PriceRuleSortKeys, $reverse: Boolean) {{
  priceRules(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{ node {{ {PRICE_RULE_FIELDS} {ENTITLEMENTS.format(count=50)} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_PRICE_RULE = f"""
query GetPriceRule($id: ID!) {{
  priceRule(id: $id) {{
    {PRICE_RULE_FIELDS}
    {ENTITLEMENTS.format(count=100)}
    discountCodes(first: 100) {{ edges {{ node {{ id code usageCount }} }} }}
  }}
}}
"""

CREATE_PRICE_RULE = """
mutation PriceRuleCreate($input: PriceRuleInput!) {
  priceRuleCreate(input: $input) {
    priceRule { id title status createdAt startsAt endsAt target allocationMethod valueType value }
    userErrors { field message }
  }
}
"""

UPDATE_PRICE_RULE = """
mutation PriceRuleUpdate($id: ID!, $input: PriceRuleInput!) {
  priceRuleUpdate(id: $id, input: $input) {
    priceRule { id title status updatedAt startsAt endsAt oncePerCustomer usageLimit }
    userErrors { field message }
  }
}
"""

DELETE_PRICE_RULE = """
mutation PriceRuleDelete($id: ID!) {
  priceRuleDelete(id: $id) {
    deletedPriceRuleId
    userErrors { field message }
  }
}
"""


def _create_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["title", "target", "allocationMethod", "valueType", "value"])
    for key in ("startsAt", "endsAt", "usageLimit"):
        if arguments.get(key):
            patch.set(key, arguments[key])
    if "oncePerCustomer" in arguments:
        patch.set("oncePerCustomer", arguments["oncePerCustomer"])
    if arguments.get("prerequisiteSubtotalMin"):
        patch.set("prerequisiteSubtotalRange", {"greaterThanOrEqualTo": arguments["prerequisiteSubtotalMin"]})
    return {"input": patch.as_dict()}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_price_rules", "Fetch price rules for automatic discounts", GET_PRICE_RULES,
        properties={
            **page("price rules", "Filter query (e.g., 'status:active', 'title:Summer Sale')"),
            "sortKey": enum(["CREATED_AT", "STARTS_AT", "ENDS_AT", "TITLE", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "CREATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_price_rule", "Fetch a specific price rule by ID", GET_PRICE_RULE,
        properties={"id": gid("Price Rule", "PriceRule")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_price_rule", "Create a new price rule for automatic discounts", CREATE_PRICE_RULE,
        properties={
            "title": string("Price rule title"),
            "target": enum(["LINE_ITEM", "SHIPPING_LINE"], "What the discount applies to"),
            "allocationMethod": enum(["ACROSS", "EACH"], "How to allocate the discount"),
            "valueType": enum(["PERCENTAGE", "FIXED_AMOUNT"], "Type of discount value"),
            "value": number("Discount value (percentage or fixed amount)"),
            "startsAt": string("Start date/time (ISO format)"),
            "endsAt": string("End date/time (ISO format)"),
            "oncePerCustomer": boolean("Limit to one use per customer"),
            "usageLimit": integer("Total usage limit"),
            "prerequisiteSubtotalMin": number("Minimum subtotal required"),
        },
        required=["title", "target", "allocationMethod", "valueType", "value"],
        variables=_create_variables,
    )
    graphql_tool(
        server, client, "update_price_rule", "Update an existing price rule", UPDATE_PRICE_RULE,
        properties={
            "id": string("Price Rule ID"),
            "title": string("Price rule title"),
            "startsAt": string("Start date/time (ISO format)"),
            "endsAt": string("End date/time (ISO format)"),
            "oncePerCustomer": boolean("Limit to one use per customer"),
            "usageLimit": integer("Total usage limit"),
        },
        required=["id"],
        variables=patched_input(["title", "startsAt", "endsAt", "oncePerCustomer", "usageLimit"], keys=["id"]),
    )
    graphql_tool(
        server, client, "delete_price_rule", "Delete a price rule", DELETE_PRICE_RULE,
        properties={"id": string("Price Rule ID to delete")},
        required=["id"],
    )
