from __future__ import annotations

from typing import Any, Dict

from .common import boolean, gid, graphql_tool, integer, money, number, page, string

MONEY = "amount currencyCode"

ACCOUNT_FIELDS = f"""
id
balance {{ {MONEY} }}
owner {{
  ... on Customer {{ id email firstName lastName }}
  ... on CompanyLocation {{ id name }}
}}
"""

TRANSACTION_FIELDS = f"""
createdAt
amount {{ {MONEY} }}
balanceAfterTransaction {{ {MONEY} }}
... on StoreCreditAccountCreditTransaction {{ expiresAt remainingAmount {{ {MONEY} }} }}
"""

GET_ACCOUNT = f"""
query GetStoreCreditAccount($id: ID!, $first: Int!, $after: String) {{
  storeCreditAccount(id: $id) {{
    {ACCOUNT_FIELDS}
    transactions(first: $first, after: $after) {{
      edges {{ node {{ {TRANSACTION_FIELDS} }} cursor }}
      pageInfo {{ hasNextPage hasPreviousPage }}
    }}
  }}
}}
"""

GET_ACCOUNTS_BY_OWNER = f"""
query GetStoreCreditAccountsByOwner($ownerId: ID!, $first: Int!, $after: String, $query: String) {{
  node(id: $ownerId) {{
    ... on HasStoreCreditAccounts {{
      storeCreditAccounts(first: $first, after: $after, query: $query) {{
        edges {{ node {{ id balance {{ {MONEY} }} }} cursor }}
        pageInfo {{ hasNextPage hasPreviousPage }}
      }}
    }}
  }}
}}
"""

CREDIT_ACCOUNT = f"""
mutation StoreCreditAccountCredit($id: ID!, $creditInput: StoreCreditAccountCreditInput!) {{
  storeCreditAccountCredit(id: $id, creditInput: $creditInput) {{
    storeCreditAccountTransaction {{ amount {{ {MONEY} }} account {{ id balance {{ {MONEY} }} }} }}
    userErrors {{ field message code }}
  }}
}}
"""

DEBIT_ACCOUNT = f"""
mutation StoreCreditAccountDebit($id: ID!, $debitInput: StoreCreditAccountDebitInput!) {{
  storeCreditAccountDebit(id: $id, debitInput: $debitInput) {{
    storeCreditAccountTransaction {{ amount {{ {MONEY} }} account {{ id balance {{ {MONEY} }} }} }}
    userErrors {{ field message code }}
  }}
}}
"""


def _credit_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    credit = {
        "creditAmount": money(arguments["creditAmount"], arguments["currencyCode"]),
        "notify": arguments.get("notify", False),
    }
    if arguments.get("expiresAt"):
        credit["expiresAt"] = arguments["expiresAt"]
    return {"id": arguments["id"], "creditInput": credit}


def _debit_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": arguments["id"],
        "debitInput": {"debitAmount": money(arguments["debitAmount"], arguments["currencyCode"])},
    }


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_store_credit_account", "Fetch a store credit account by ID", GET_ACCOUNT,
        properties={
            "id": gid("Store Credit Account", "StoreCreditAccount"),
            "first": integer("Number of transactions to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination of transactions"),
        },
        required=["id"],
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_store_credit_accounts_by_owner",
        "Fetch all store credit accounts for a customer or company location", GET_ACCOUNTS_BY_OWNER,
        properties={
            "ownerId": string("Owner ID - either Customer ID or CompanyLocation ID"),
            **page("accounts", "Filter query for accounts"),
        },
        required=["ownerId"],
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "credit_store_credit_account",
        "Add funds to a store credit account. Creates the account automatically if it doesn't exist.",
        CREDIT_ACCOUNT,
        properties={
            "id": string("Store Credit Account ID, Customer ID, or CompanyLocation ID"),
            "creditAmount": number("Amount to credit"),
            "currencyCode": string("Currency code (e.g., 'USD')"),
            "expiresAt": string("Optional expiration date (ISO 8601 format)"),
            "notify": boolean("Send notification to account owner (default: false)"),
        },
        required=["id", "creditAmount", "currencyCode"],
        variables=_credit_variables,
    )
    graphql_tool(
        server, client, "debit_store_credit_account", "Debit funds from a store credit account", DEBIT_ACCOUNT,
        properties={
            "id": string("Store Credit Account ID"),
            "debitAmount": number("Amount to debit"),
            "currencyCode": string("Currency code (e.g., 'USD')"),
        },
        required=["id", "debitAmount", "currencyCode"],
        variables=_debit_variables,
    )
