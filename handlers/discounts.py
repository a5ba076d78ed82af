from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, enum, gid, graphql_tool, integer, page, string

GET_DISCOUNTS = """
query GetDiscounts($first: Int!, $after: String, $query: String, $reverse: Boolean) {
  codeDiscountNodes(first: $first, after: $after, query: $query, reverse: $reverse) {
    edges {
      node {
        id
        codeDiscount {
          __typename
          ... on DiscountCodeBasic {
            title status startsAt endsAt usageLimit asyncUsageCount
            codes(first: 5) { edges { node { code } } }
          }
          ... on DiscountCodeBxgy { title status startsAt endsAt }
          ... on DiscountCodeFreeShipping { title status startsAt endsAt }
        }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_DISCOUNT_CODE = """
query GetDiscountCode($id: ID!) {
  codeDiscountNode(id: $id) {
    id
    codeDiscount {
      __typename
      ... on DiscountCodeBasic {
        title status summary startsAt endsAt usageLimit appliesOncePerCustomer asyncUsageCount
        codes(first: 10) { edges { node { code usageCount } } }
        customerGets {
          value {
            ... on DiscountPercentage { percentage }
            ... on DiscountAmount { amount { amount currencyCode } appliesOnEachItem }
          }
        }
        minimumRequirement {
          ... on DiscountMinimumSubtotal { greaterThanOrEqualToSubtotal { amount currencyCode } }
          ... on DiscountMinimumQuantity { greaterThanOrEqualToQuantity }
        }
      }
    }
  }
}
"""

CREATE_DISCOUNT = """
mutation DiscountCodeBasicCreate($basicCodeDiscount: DiscountCodeBasicInput!) {
  discountCodeBasicCreate(basicCodeDiscount: $basicCodeDiscount) {
    codeDiscountNode { id codeDiscount { ... on DiscountCodeBasic { title status startsAt endsAt } } }
    userErrors { field message code }
  }
}
"""

UPDATE_DISCOUNT_CODE = """
mutation DiscountCodeBasicUpdate($id: ID!, $basicCodeDiscount: DiscountCodeBasicInput!) {
  discountCodeBasicUpdate(id: $id, basicCodeDiscount: $basicCodeDiscount) {
    codeDiscountNode { id codeDiscount { ... on DiscountCodeBasic { title status startsAt endsAt } } }
    userErrors { field message code }
  }
}
"""

DELETE_DISCOUNT = """
mutation DiscountCodeDelete($id: ID!) {
  discountCodeDelete(id: $id) {
    deletedCodeDiscountId
    userErrors { field message code }
  }
}
"""

GET_ALLOCATOR_FUNCTIONS = """
query GetDiscountsAllocatorFunctions($first: Int!, $after: String) {
  shopifyFunctions(first: $first, after: $after, apiType: "discounts_allocator") {
    edges { node { id title apiType app { id title } } cursor }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

REGISTER_ALLOCATOR_FUNCTION = """
mutation DiscountsAllocatorFunctionRegister($functionId: String!) {
  discountsAllocatorFunctionRegister(functionId: $functionId) {
    userErrors { field message }
  }
}
"""


def _basic_code_discount(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["title", "code", "startsAt", "endsAt", "usageLimit", "appliesOncePerCustomer"])
    if "value" in arguments:
        value = arguments["value"]
        if arguments.get("discountType") == "FIXED_AMOUNT":
            gets = {"discountAmount": {"amount": value, "appliesOnEachItem": False}}
        else:
            gets = {"percentage": float(value) / 100.0}
        patch.set("customerGets", {"value": gets, "items": {"all": True}})
        patch.set("customerSelection", {"all": True})
    requirement = arguments.get("minimumRequirement")
    if requirement == "MINIMUM_PURCHASE_AMOUNT" and arguments.get("minimumSubtotal"):
        patch.set("minimumRequirement", {"subtotal": {"greaterThanOrEqualToSubtotal": arguments["minimumSubtotal"]}})
    elif requirement == "MINIMUM_QUANTITY_ITEMS" and arguments.get("minimumQuantity"):
        patch.set("minimumRequirement", {"quantity": {"greaterThanOrEqualToQuantity": str(arguments["minimumQuantity"])}})
    return patch.as_dict()


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_discounts", "Fetch discount codes from the store", GET_DISCOUNTS,
        properties={**page("discounts"), "reverse": boolean("Reverse the sort order")},
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_discount_code", "Fetch a specific code discount by ID", GET_DISCOUNT_CODE,
        properties={"id": gid("Discount", "DiscountCodeNode")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_discount", "Create a new percentage or fixed-amount discount code", CREATE_DISCOUNT,
        properties={
            "title": string("Discount title"),
            "code": string("Discount code (what customers enter)"),
            "discountType": enum(["PERCENTAGE", "FIXED_AMOUNT"], "Type of discount"),
            "value": string("Discount value (e.g., '10' for 10% or $10)"),
            "startsAt": string("Start date (ISO 8601 format)"),
            "endsAt": string("End date (ISO 8601 format)"),
            "minimumRequirement": enum(["NONE", "MINIMUM_PURCHASE_AMOUNT", "MINIMUM_QUANTITY_ITEMS"], "Minimum purchase requirement"),
            "minimumSubtotal": string("Minimum purchase amount (if applicable)"),
            "minimumQuantity": integer("Minimum quantity of items (if applicable)", 1),
            "appliesOncePerCustomer": boolean("Limit to one use per customer"),
            "usageLimit": integer("Total number of times this code can be used"),
        },
        required=["title", "code", "discountType", "value", "startsAt"],
        variables=lambda args: {"basicCodeDiscount": _basic_code_discount(args)},
    )
    graphql_tool(
        server, client, "update_discount_code", "Update an existing code discount", UPDATE_DISCOUNT_CODE,
        properties={
            "id": gid("Discount", "DiscountCodeNode"),
            "title": string("Discount title"),
            "startsAt": string("Start date (ISO 8601 format)"),
            "endsAt": string("End date (ISO 8601 format)"),
            "usageLimit": integer("Total number of times this code can be used"),
            "appliesOncePerCustomer": boolean("Limit to one use per customer"),
        },
        required=["id"],
        variables=lambda args: {"id": args["id"], "basicCodeDiscount": _basic_code_discount(args)},
    )
    graphql_tool(
        server, client, "delete_discount", "Delete a discount code", DELETE_DISCOUNT,
        properties={"id": gid("Discount", "DiscountCodeNode")},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_discounts_allocator_functions",
        "List Shopify Functions that can allocate discounts", GET_ALLOCATOR_FUNCTIONS,
        properties={
            "first": integer("Number of functions to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "create_discounts_allocator_function",
        "Register a discounts allocator function for the shop", REGISTER_ALLOCATOR_FUNCTION,
        properties={"functionId": string("ID of the discounts allocator function to use")},
        required=["functionId"],
    )
