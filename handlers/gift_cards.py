from __future__ import annotations

from .common import boolean, enum, gid, graphql_tool, integer, number, page, patched_input, string

MONEY = "amount currencyCode"

GIFT_CARD_FIELDS = f"""
id maskedCode lastCharacters enabled expiresOn createdAt updatedAt note
initialValue {{ {MONEY} }}
balance {{ {MONEY} }}
customer {{ id email }}
"""

GET_GIFT_CARDS = f"""
query GetGiftCards($first: Int!, $after: String, $query: String, $sortKey: GiftCardSortKeys, $reverse: Boolean) {{
  giftCards(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{ node {{ {GIFT_CARD_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_GIFT_CARD = f"""
query GetGiftCard($id: ID!) {{
  giftCard(id: $id) {{
    {GIFT_CARD_FIELDS}
    disabledAt
    order {{ id name }}
  }}
}}
"""

CREATE_GIFT_CARD = f"""
mutation GiftCardCreate($input: GiftCardCreateInput!) {{
  giftCardCreate(input: $input) {{
    giftCard {{ {GIFT_CARD_FIELDS} }}
    giftCardCode
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_GIFT_CARD = f"""
mutation GiftCardUpdate($id: ID!, $input: GiftCardUpdateInput!) {{
  giftCardUpdate(id: $id, input: $input) {{
    giftCard {{ {GIFT_CARD_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DISABLE_GIFT_CARD = """
mutation GiftCardDisable($id: ID!) {
  giftCardDisable(id: $id) {
    giftCard { id enabled disabledAt }
    userErrors { field message }
  }
}
"""

GET_TRANSACTIONS = f"""
query GetGiftCardTransactions($first: Int!, $after: String, $giftCardId: ID) {{
  giftCardTransactions(first: $first, after: $after, giftCardId: $giftCardId) {{
    edges {{
      node {{
        id createdAt event
        amountV2 {{ {MONEY} }}
        balanceV2 {{ {MONEY} }}
        giftCard {{ id code }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_gift_cards", "Fetch gift cards from the store", GET_GIFT_CARDS,
        properties={
            **page("gift cards", "Filter query (e.g., 'status:active', 'code:MYGIFT')"),
            "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID", "BALANCE"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_gift_card", "Fetch a specific gift card by ID", GET_GIFT_CARD,
        properties={"id": gid("Gift Card", "GiftCard")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_gift_card", "Issue a new gift card", CREATE_GIFT_CARD,
        properties={
            "initialValue": number("Initial value of the gift card"),
            "code": string("Custom code (optional, auto-generated if not provided)"),
            "note": string("Internal note"),
            "expiresAt": string("Expiration date (ISO 8601 format)"),
            "customerId": string("Associate with a customer"),
        },
        required=["initialValue"],
        variables=patched_input(["initialValue", "code", "note", "expiresAt", "customerId"], rename={"expiresAt": "expiresOn"}),
    )
    graphql_tool(
        server, client, "update_gift_card", "Update a gift card's note or expiration", UPDATE_GIFT_CARD,
        properties={
            "id": string("Gift Card ID"),
            "note": string("Internal note"),
            "expiresAt": string("Expiration date (ISO 8601 format)"),
        },
        required=["id"],
        variables=patched_input(["note", "expiresAt"], keys=["id"], rename={"expiresAt": "expiresOn"}),
    )
    graphql_tool(
        server, client, "disable_gift_card", "Permanently disable a gift card", DISABLE_GIFT_CARD,
        properties={"id": string("Gift Card ID to disable")},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_gift_card_transactions", "Fetch gift card transactions", GET_TRANSACTIONS,
        properties={
            "first": integer("Number of transactions to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "giftCardId": string("Filter by gift card ID"),
        },
        defaults={"first": 50},
    )
