from __future__ import annotations

from .common import boolean, enum, gid, graphql_tool, integer, patched_input, string

SORT_KEYS = ["TITLE", "INSTALL_DATE", "ID"]
PROXY_PREFIXES = ["apps", "a", "community", "tools"]

PLAN = "shopPricingPlan { name price { amount currencyCode } }"
PROXY_FIELDS = "id url subPath subPathPrefix"

GET_APPS = f"""
query GetApps($first: Int!, $after: String, $sortKey: AppSortKeys, $reverse: Boolean) {{
  apps(first: $first, after: $after, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        id title handle developerName developerType installedAt uninstallMessage pricingDetails
        {PLAN}
        appStoreAppUrl
        webhookSubscriptions(first: 10) {{ edges {{ node {{ id topic includeFields filter }} }} }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_APP = f"""
query GetApp($id: ID!) {{
  app(id: $id) {{
    id title handle developerName developerType installedAt updatedAt description
    appStoreAppUrl privacyPolicyUrl termsOfServiceUrl supportEmail supportUrl features pricingDetails
    {PLAN}
    webhookSubscriptions(first: 50) {{ edges {{ node {{ id topic includeFields filter callbackUrl }} }} }}
    appProxy {{ url subPath subPathPrefix }}
  }}
}}
"""

GET_APP_PROXIES = f"""
query GetAppProxies {{
  shop {{
    id name
    appProxies(first: 50) {{ edges {{ node {{ {PROXY_FIELDS} app {{ id title handle }} }} }} }}
  }}
}}
"""

CREATE_APP_PROXY = f"""
mutation AppProxyCreate($appId: ID!, $input: AppProxyInput!) {{
  appProxyCreate(appId: $appId, input: $input) {{
    appProxy {{ {PROXY_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_APP_PROXY = f"""
mutation AppProxyUpdate($id: ID!, $input: AppProxyInput!) {{
  appProxyUpdate(id: $id, input: $input) {{
    appProxy {{ {PROXY_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_APP_PROXY = """
mutation AppProxyDelete($id: ID!) {
  appProxyDelete(id: $id) {
    deletedAppProxyId
    userErrors { field message }
  }
}
"""

PROXY_INPUT = ["url", "subPath", "subPathPrefix"]


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_apps", "Fetch installed apps for the store", GET_APPS,
        properties={
            "first": integer("Number of apps to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "sortKey": enum(SORT_KEYS, "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "INSTALL_DATE", "reverse": True},
    )
    graphql_tool(
        server, client, "get_app", "Fetch a specific installed app by ID", GET_APP,
        properties={"id": gid("App", "App")},
        required=["id"],
    )
    graphql_tool(server, client, "get_app_proxy", "Fetch app proxy configuration for the store", GET_APP_PROXIES)
    graphql_tool(
        server, client, "create_app_proxy", "Create an app proxy for an app (requires app management permissions)",
        CREATE_APP_PROXY,
        properties={
            "appId": string("App ID"),
            "url": string("Proxy URL"),
            "subPath": string("Sub-path for the proxy"),
            "subPathPrefix": enum(PROXY_PREFIXES, "Sub-path prefix"),
        },
        required=["appId", "url", "subPath", "subPathPrefix"],
        variables=patched_input(PROXY_INPUT, keys=["appId"]),
    )
    graphql_tool(
        server, client, "update_app_proxy", "Update an app proxy configuration", UPDATE_APP_PROXY,
        properties={
            "id": string("App Proxy ID"),
            "url": string("Proxy URL"),
            "subPath": string("Sub-path for the proxy"),
            "subPathPrefix": enum(PROXY_PREFIXES, "Sub-path prefix"),
        },
        required=["id"],
        variables=patched_input(PROXY_INPUT, keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_app_proxy", "Delete an app proxy", DELETE_APP_PROXY,
        properties={"id": string("App Proxy ID to delete")},
        required=["id"],
    )
