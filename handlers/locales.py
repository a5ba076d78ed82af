from __future__ import annotations

from .common import boolean, graphql_tool, string

LOCALE_FIELDS = "locale name nativeName enabled published"

GET_LOCALES = f"""
query GetLocales($publishable: Boolean) {{
  shop {{ id name locales(publishable: $publishable) {{ {LOCALE_FIELDS} }} }}
}}
"""

GET_TRANSLATIONS = """
query GetTranslations($locale: String!, $namespace: String) {
  translations(locale: $locale, namespace: $namespace) { key value locale namespace }
}
"""

LOCALE_TOGGLE = f"""
mutation Locale{{action}}($locale: String!) {{{{
  locale{{action}}(locale: $locale) {{{{
    shop {{{{ id locales {{{{ {LOCALE_FIELDS} }}}} }}}}
    userErrors {{{{ field message }}}}
  }}}}
}}}}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_locales", "Fetch available locales for the store", GET_LOCALES,
        properties={"publishable": boolean("Filter to only published locales")},
        defaults={"publishable": False},
    )
    graphql_tool(
        server, client, "get_translations", "Fetch translations for a locale", GET_TRANSLATIONS,
        properties={
            "locale": string("Locale code (e.g., 'en', 'fr', 'es')"),
            "namespace": string("Filter by translation namespace"),
        },
        required=["locale"],
    )
    graphql_tool(
        server, client, "publish_locale", "Publish a locale to make it available on the storefront",
        LOCALE_TOGGLE.format(action="Publish"),
        properties={"locale": string("Locale code to publish")},
        required=["locale"],
    )
    graphql_tool(
        server, client, "unpublish_locale", "Unpublish a locale", LOCALE_TOGGLE.format(action="Unpublish"),
        properties={"locale": string("Locale code to unpublish")},
        required=["locale"],
    )
