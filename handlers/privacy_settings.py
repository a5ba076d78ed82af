from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, graphql_tool, string

PRIVACY_SECTION = "gdprApplies legalPrivacyName"

GET_PRIVACY_SETTINGS = f"""
query GetPrivacySettings {{
  privacy {{
    checkout {{ {PRIVACY_SECTION} }}
    customerAccounts {{ {PRIVACY_SECTION} }}
    marketing {{ {PRIVACY_SECTION} }}
    preferences {{ {PRIVACY_SECTION} }}
  }}
}}
"""

UPDATE_PRIVACY_SETTINGS = f"""
mutation UpdatePrivacySettings($input: PrivacySettingsInput!) {{
  privacySettingsUpdate(input: $input) {{
    privacy {{
      checkout {{ {PRIVACY_SECTION} }}
      customerAccounts {{ {PRIVACY_SECTION} }}
      marketing {{ {PRIVACY_SECTION} }}
    }}
    userErrors {{ field message }}
  }}
}}
"""

GET_VISITOR_CONSENT = """
query GetVisitorPrivacyConsent($visitorId: ID!) {
  visitor(id: $visitorId) {
    id
    privacy {
      gdprApplies
      marketingConsent { grantedAt marketingMethod }
      preferencesConsent { grantedAt }
    }
  }
}
"""

PRIVACY_MESSAGES = ["checkoutPrivacyMessage", "customerAccountsPrivacyMessage", "marketingPrivacyMessage"]


def _update_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    # the three messages travel nested under privacyOptions
    patch = Patch.from_arguments(arguments, ["legalPrivacyName"], skip_empty=True)
    if arguments.get("gdprApplies") is not None:
        patch.set("gdprApplies", arguments["gdprApplies"])
    options = Patch.from_arguments(arguments, PRIVACY_MESSAGES, skip_empty=True)
    if not options.is_empty():
        patch.set("privacyOptions", options.as_dict())
    return {"input": patch.as_dict()}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_privacy_settings", "Fetch privacy settings from the Shopify store",
        GET_PRIVACY_SETTINGS,
    )
    graphql_tool(
        server, client, "update_privacy_settings", "Update privacy settings", UPDATE_PRIVACY_SETTINGS,
        properties={
            "gdprApplies": boolean("Whether GDPR applies"),
            "legalPrivacyName": string("Legal privacy name"),
            "checkoutPrivacyMessage": string("Checkout privacy message"),
            "customerAccountsPrivacyMessage": string("Customer accounts privacy message"),
            "marketingPrivacyMessage": string("Marketing privacy message"),
        },
        variables=_update_variables,
    )
    graphql_tool(
        server, client, "get_visitor_privacy_consent", "Get visitor privacy consent status", GET_VISITOR_CONSENT,
        properties={"visitorId": string("Visitor ID")},
        required=["visitorId"],
    )
