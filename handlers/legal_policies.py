from __future__ import annotations

from .common import enum, graphql_tool, string

POLICY_HANDLES = [
    "refund-policy", "privacy-policy", "terms-of-service", "terms-of-sale", "legal-notice", "shipping-policy",
]

POLICY_FIELDS = "id title handle body createdAt updatedAt"

GET_LEGAL_POLICIES = f"""
query GetLegalPolicies {{
  shop {{ id name legalPolicies {{ {POLICY_FIELDS} }} }}
}}
"""

GET_LEGAL_POLICY = f"""
query GetLegalPolicy($handle: String!) {{
  legalPolicy(handle: $handle) {{ {POLICY_FIELDS} }}
}}
"""

UPDATE_LEGAL_POLICY = """
mutation LegalPolicyUpdate($handle: LegalPolicyHandle!, $body: String!) {
  legalPolicyUpdate(handle: $handle, body: $body) {
    legalPolicy { id title handle body updatedAt }
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    handle = enum(POLICY_HANDLES, "Legal policy handle")
    graphql_tool(server, client, "get_legal_policies", "Fetch legal policies for the store", GET_LEGAL_POLICIES)
    graphql_tool(
        server, client, "get_legal_policy", "Fetch a specific legal policy by handle", GET_LEGAL_POLICY,
        properties={"handle": handle},
        required=["handle"],
    )
    graphql_tool(
        server, client, "update_legal_policy", "Update a legal policy", UPDATE_LEGAL_POLICY,
        properties={"handle": handle, "body": string("Policy body content (HTML or plain text)")},
        required=["handle", "body"],
    )
