from __future__ import annotations

from .common import boolean, enum, graphql_tool, integer, page, string

MONEY = "amount currencyCode"

GET_ACCOUNT = f"""
query GetShopifyPaymentsAccount {{
  shopifyPaymentsAccount {{
    id activated onboardable accountOpenerName country defaultCurrency
    balance {{ {MONEY} }}
    payoutSchedule {{ interval monthlyAnchor weeklyAnchor }}
    chargeStatementDescriptors {{ default prefix }}
    payoutStatementDescriptor
    bankAccounts(first: 10) {{
      edges {{ node {{ id accountNumberLastDigits bankName country currency status createdAt }} }}
    }}
  }}
}}
"""

GET_BALANCE_TRANSACTIONS = f"""
query GetBalanceTransactions($first: Int!, $after: String, $query: String, $sortKey: BalanceTransactionSortKeys, $reverse: Boolean, $hideTransfers: Boolean) {{
  shopifyPaymentsAccount {{
    id
    balanceTransactions(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse, hideTransfers: $hideTransfers) {{
      edges {{
        node {{
          id type test transactionDate sourceType sourceId sourceOrderTransactionId
          amount {{ {MONEY} }}
          fee {{ {MONEY} }}
          net {{ {MONEY} }}
          associatedOrder {{ id name }}
          associatedPayout {{ id status }}
        }}
        cursor
      }}
      pageInfo {{ hasNextPage hasPreviousPage }}
    }}
  }}
}}
"""

GET_PAYOUTS = f"""
query GetPayouts($first: Int!, $after: String, $query: String, $sortKey: PayoutSortKeys, $reverse: Boolean, $transactionType: ShopifyPaymentsPayoutTransactionType) {{
  shopifyPaymentsAccount {{
    id
    payouts(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse, transactionType: $transactionType) {{
      edges {{
        node {{
          id legacyResourceId issuedAt status transactionType externalTraceId
          net {{ {MONEY} }}
          summary {{
            adjustmentsFee {{ {MONEY} }}
            adjustmentsGross {{ {MONEY} }}
            chargesFee {{ {MONEY} }}
            chargesGross {{ {MONEY} }}
            refundsFee {{ {MONEY} }}
            refundsFeeGross {{ {MONEY} }}
            reservedFundsFee {{ {MONEY} }}
            reservedFundsGross {{ {MONEY} }}
          }}
        }}
        cursor
      }}
      pageInfo {{ hasNextPage hasPreviousPage }}
    }}
  }}
}}
"""

GET_DISPUTES = f"""
query GetDisputes($first: Int!, $after: String, $query: String, $reverse: Boolean) {{
  shopifyPaymentsAccount {{
    id
    disputes(first: $first, after: $after, query: $query, reverse: $reverse) {{
      edges {{
        node {{
          id legacyResourceId status type initiatedAt evidenceDueBy evidenceSentOn finalizedOn
          amount {{ {MONEY} }}
          reasonDetails {{ reason networkReasonCode }}
          order {{ id name }}
        }}
        cursor
      }}
      pageInfo {{ hasNextPage hasPreviousPage }}
    }}
  }}
}}
"""

GET_BANK_ACCOUNTS = """
query GetBankAccounts($first: Int!, $after: String, $reverse: Boolean) {
  shopifyPaymentsAccount {
    id
    bankAccounts(first: $first, after: $after, reverse: $reverse) {
      edges { node { id accountNumberLastDigits bankName country currency status createdAt } cursor }
      pageInfo { hasNextPage hasPreviousPage }
    }
  }
}
"""

CREATE_ALTERNATE_CURRENCY_PAYOUT = f"""
mutation CreateAlternateCurrencyPayout($currency: CurrencyCode!, $accountId: ID) {{
  shopifyPaymentsPayoutAlternateCurrencyCreate(currency: $currency, accountId: $accountId) {{
    payout {{ amount {{ {MONEY} }} currency arrivalDate createdAt remoteId }}
    success
    userErrors {{ field message }}
  }}
}}
"""

PAYOUT_TRANSACTION_TYPES = ["PAYOUT", "REFUND", "ADJUSTMENT", "CHARGEBACK", "CHARGEBACK_REVERSAL"]


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_shopify_payments_account",
        "Fetch Shopify Payments account information including balances and configuration", GET_ACCOUNT,
    )
    graphql_tool(
        server, client, "get_shopify_payments_balance_transactions", "Fetch Shopify Payments balance transactions",
        GET_BALANCE_TRANSACTIONS,
        properties={
            **page("transactions", "Filter query for balance transactions"),
            "sortKey": enum(["PROCESSED_AT", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
            "hideTransfers": boolean("Hide transfer transactions"),
        },
        defaults={"first": 50, "sortKey": "PROCESSED_AT", "reverse": True, "hideTransfers": False},
    )
    graphql_tool(
        server, client, "get_shopify_payments_payouts", "Fetch Shopify Payments payouts", GET_PAYOUTS,
        properties={
            **page("payouts", "Filter query for payouts"),
            "sortKey": enum(["ISSUED_AT", "ID", "AMOUNT"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
            "transactionType": enum(PAYOUT_TRANSACTION_TYPES, "Filter by transaction type"),
        },
        defaults={"first": 50, "sortKey": "ISSUED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_shopify_payments_disputes", "Fetch Shopify Payments disputes (chargebacks)",
        GET_DISPUTES,
        properties={
            **page("disputes", "Filter query for disputes"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "reverse": True},
    )
    graphql_tool(
        server, client, "get_shopify_payments_bank_accounts", "Fetch bank accounts linked to Shopify Payments",
        GET_BANK_ACCOUNTS,
        properties={
            "first": integer("Number of bank accounts to fetch (1-250, default: 10)", 1, 250),
            "after": string("Cursor for pagination"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 10, "reverse": False},
    )
    graphql_tool(
        server, client, "create_shopify_payments_alternate_currency_payout",
        "Create a payout in an alternate currency", CREATE_ALTERNATE_CURRENCY_PAYOUT,
        properties={
            "currency": string("Currency code for the payout (e.g., 'USD', 'EUR')"),
            "accountId": string("Optional Shopify Payments account ID (if not using default)"),
        },
        required=["currency"],
    )
