from __future__ import annotations

import json
from typing import Any, Dict

from .common import boolean, enum, gid, graphql_tool, page, string

MONEY = "shopMoney { amount currencyCode }"
ADDRESS = "address1 address2 city province country zip phone"

CHECKOUT_FIELDS = f"""
id createdAt updatedAt completedAt email phone
subtotalPriceSet {{ {MONEY} }}
totalPriceSet {{ {MONEY} }}
"""

GET_CHECKOUTS = f"""
query GetCheckouts($first: Int!, $after: String, $query: String, $sortKey: CheckoutSortKeys, $reverse: Boolean) {{
  checkouts(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        {CHECKOUT_FIELDS}
        lineItems(first: 20) {{
          edges {{ node {{ id title quantity variant {{ id title sku product {{ id title }} }} }} }}
        }}
        shippingAddress {{ {ADDRESS} }}
        billingAddress {{ {ADDRESS} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_CHECKOUT = f"""
query GetCheckout($id: ID!) {{
  node(id: $id) {{
    ... on Checkout {{
      {CHECKOUT_FIELDS}
      note
      webUrl
      totalTaxSet {{ {MONEY} }}
      lineItems(first: 50) {{
        edges {{ node {{ id title quantity variant {{ id title sku price product {{ id title }} }} }} }}
      }}
      shippingAddress {{ {ADDRESS} }}
      billingAddress {{ {ADDRESS} }}
      customer {{ id email firstName lastName }}
    }}
  }}
}}
"""

GET_BRANDING = """
query GetCheckoutBranding {
  checkoutBranding {
    customizations {
      colors { schemes { default { base { text background accent } } } }
      typography { size { base } primary { name } secondary { name } }
      control { border { width color radius } }
      favicon { image { url } }
    }
  }
}
"""

UPSERT_BRANDING = """
mutation CheckoutBrandingUpsert($checkoutBrandingInput: CheckoutBrandingInput!) {
  checkoutBrandingUpsert(checkoutBrandingInput: $checkoutBrandingInput) {
    checkoutBranding {
      customizations {
        colors { schemes { default { base { text background accent } } } }
        typography { primary { name } }
        control { border { radius } }
      }
    }
    userErrors { field message }
  }
}
"""

RECOVERY_STEPS = [
    "1. Get the checkout details using get_checkout",
    "2. Create a draft order using create_draft_order with the checkout's line items",
    "3. Send a recovery email to the customer with the draft order link",
    "4. Or use Shopify's native abandoned checkout recovery email settings",
]


def _branding_input(arguments: Dict[str, Any]) -> Dict[str, Any]:
    branding: Dict[str, Any] = {}
    base = {}
    accent = arguments.get("accentColor") or arguments.get("primaryColor")
    if arguments.get("textColor"):
        base["text"] = arguments["textColor"]
    if arguments.get("backgroundColor"):
        base["background"] = arguments["backgroundColor"]
    if accent:
        base["accent"] = accent
    if base:
        branding["colors"] = {"schemes": {"default": {"base": base}}}
    if arguments.get("fontFamily"):
        branding["typography"] = {"primary": {"name": arguments["fontFamily"]}}
    if arguments.get("borderRadius"):
        branding["control"] = {"border": {"radius": arguments["borderRadius"]}}
    if arguments.get("faviconUrl"):
        branding["favicon"] = {"image": {"url": arguments["faviconUrl"]}}
    return {"checkoutBrandingInput": branding}


def _complete_checkout(arguments: Dict[str, Any]) -> str:
    # The Admin API has no checkout completion; answer with recovery guidance.
    return json.dumps({
        "note": "Checkouts cannot be directly 'completed' through the Admin API. "
                "To recover an abandoned checkout, you should:",
        "steps": RECOVERY_STEPS,
        "checkoutId": arguments["checkoutId"],
        "recommendation": "Use Shopify's built-in abandoned checkout recovery feature in "
                          "Settings > Notifications > Abandoned checkouts",
    }, indent=2)


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_checkouts", "Fetch abandoned or active checkouts from the store", GET_CHECKOUTS,
        properties={
            **page("checkouts", "Filter query (e.g., 'abandoned:true', 'email:customer@example.com')"),
            "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "CREATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_checkout", "Fetch a specific checkout by ID", GET_CHECKOUT,
        properties={"id": gid("Checkout", "Checkout")},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_checkout_branding_settings", "Fetch checkout branding settings for the store",
        GET_BRANDING,
    )
    graphql_tool(
        server, client, "update_checkout_branding_settings", "Update checkout branding settings", UPSERT_BRANDING,
        properties={
            "primaryColor": string("Primary brand color (hex code), used as the accent when accentColor is not given"),
            "accentColor": string("Accent color for buttons/links (hex code)"),
            "backgroundColor": string("Background color (hex code)"),
            "textColor": string("Text color (hex code)"),
            "fontFamily": string("Font family name"),
            "borderRadius": enum(["NONE", "SMALL", "BASE", "LARGE"], "Border radius for controls"),
            "faviconUrl": string("URL to favicon image"),
        },
        variables=_branding_input,
    )
    server.register_tool(
        "complete_checkout",
        _complete_checkout,
        description="Convert an abandoned checkout to a draft order (for recovery)",
        input_schema={
            "type": "object",
            "properties": {"checkoutId": string("Checkout ID to complete")},
            "required": ["checkoutId"],
        },
    )
