from __future__ import annotations

from typing import Any, Dict

from .common import array, enum, gid, graphql_tool, integer, string

RESOURCE_TYPES = ["PRODUCT", "COLLECTION", "ARTICLE", "PAGE", "BRAND", "SHOP", "METAFIELD_DEFINITION"]

CONTENT = "resourceId resourceType translatableContent { key value digest }"

GET_TRANSLATABLE_RESOURCES = f"""
query GetTranslatableResources($resourceType: TranslatableResourceType, $first: Int!, $after: String) {{
  translatableResources(resourceType: $resourceType, first: $first, after: $after) {{
    edges {{ node {{ {CONTENT} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

REGISTER_TRANSLATION = """
mutation RegisterTranslation($resourceId: ID!, $translations: [TranslationInput!]!) {
  translationsRegister(resourceId: $resourceId, translations: $translations) {
    translations { key locale value outdated }
    userErrors { field message }
  }
}
"""

REMOVE_TRANSLATIONS = """
mutation RemoveTranslations($resourceId: ID!, $translationKeys: [String!]!, $locales: [String!]!, $marketIds: [ID!]) {
  translationsRemove(resourceId: $resourceId, translationKeys: $translationKeys, locales: $locales, marketIds: $marketIds) {
    translations { key locale }
    userErrors { field message }
  }
}
"""

GET_RESOURCE_TRANSLATIONS = f"""
query GetTranslations($id: ID!) {{
  translatableResource(id: $id) {{
    {CONTENT}
    translations {{ key locale value outdated market {{ id name }} }}
  }}
}}
"""


def _register_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    translation = {
        "locale": arguments["locale"],
        "key": arguments["key"],
        "value": arguments["value"],
        "translatableContentDigest": arguments.get("translatableContentDigest") or "auto",
    }
    if arguments.get("marketId"):
        translation["marketId"] = arguments["marketId"]
    return {"resourceId": arguments["resourceId"], "translations": [translation]}


def register(server, client) -> None:
    resource_id = gid("Resource", "Product")
    graphql_tool(
        server, client, "get_translatable_resources", "Fetch translatable resources from the store",
        GET_TRANSLATABLE_RESOURCES,
        properties={
            "resourceType": enum(RESOURCE_TYPES, "Filter by resource type"),
            "first": integer("Number of resources to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "register_translation", "Create or update a translation for a resource",
        REGISTER_TRANSLATION,
        properties={
            "resourceId": string("Resource ID to translate (e.g., 'gid://shopify/Product/123456789')"),
            "locale": string("ISO code of the locale (e.g., 'fr', 'es', 'de')"),
            "key": string("Translatable content key"),
            "value": string("Translated value"),
            "translatableContentDigest": string(
                "Digest of the source content, from get_translations_for_resource"
            ),
            "marketId": string("Market ID for market-specific translation"),
        },
        required=["resourceId", "locale", "key", "value"],
        variables=_register_variables,
    )
    graphql_tool(
        server, client, "remove_translations", "Remove translations from a resource", REMOVE_TRANSLATIONS,
        properties={
            "resourceId": resource_id,
            "translationKeys": array(string(), "Translation keys to remove"),
            "locales": array(string(), "Locale codes to remove (e.g., ['fr', 'es'])"),
            "marketIds": array(string(), "Market IDs for market-specific translations"),
        },
        required=["resourceId", "translationKeys", "locales"],
    )
    graphql_tool(
        server, client, "get_translations_for_resource", "Get translations for a specific resource",
        GET_RESOURCE_TRANSLATIONS,
        properties={"resourceId": resource_id},
        required=["resourceId"],
        variables=lambda args: {"id": args["resourceId"]},
    )
