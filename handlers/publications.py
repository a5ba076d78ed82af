from __future__ import annotations

from .common import enum, gid, graphql_tool, integer, string

PUBLICATION_FIELDS = "id name autoPublish supportsFuturePublishing catalog { id title }"

GET_PUBLICATIONS = f"""
query GetPublications($first: Int!, $after: String, $catalogType: CatalogType) {{
  publications(first: $first, after: $after, catalogType: $catalogType) {{
    edges {{ node {{ {PUBLICATION_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_PUBLICATION = f"""
query GetPublication($id: ID!) {{
  publication(id: $id) {{ {PUBLICATION_FIELDS} }}
}}
"""

GET_PUBLICATION_PRODUCTS = """
query GetPublicationProducts($id: ID!, $first: Int!, $after: String) {
  publication(id: $id) {
    id name
    products(first: $first, after: $after) {
      edges { node { id title handle createdAt productType vendor } cursor }
      pageInfo { hasNextPage hasPreviousPage }
    }
  }
}
"""

GET_PUBLICATION_COLLECTIONS = """
query GetPublicationCollections($id: ID!, $first: Int!, $after: String) {
  publication(id: $id) {
    id name
    collections(first: $first, after: $after) {
      edges { node { id title handle updatedAt } cursor }
      pageInfo { hasNextPage hasPreviousPage }
    }
  }
}
"""


def _published(noun: str):
    def build(arguments):
        variables = {"id": arguments["publicationId"], "first": arguments.get("first", 50)}
        if arguments.get("after"):
            variables["after"] = arguments["after"]
        return variables

    properties = {
        "publicationId": string("Publication ID"),
        "first": integer(f"Number of {noun} to fetch (1-250, default: 50)", 1, 250),
        "after": string("Cursor for pagination"),
    }
    return properties, build


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_publications", "Fetch publications from the Shopify store", GET_PUBLICATIONS,
        properties={
            "first": integer("Number of publications to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "catalogType": enum(["APP", "INDIVIDUAL", "CROSS_BORDER", "EXTERNAL"], "Filter by catalog type"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_publication", "Fetch a specific publication by ID", GET_PUBLICATION,
        properties={"id": gid("Publication", "Publication")},
        required=["id"],
    )
    for name, description, query, noun in (
        ("get_publication_products", "Fetch products published to a publication", GET_PUBLICATION_PRODUCTS, "products"),
        ("get_publication_collections", "Fetch collections published to a publication",
         GET_PUBLICATION_COLLECTIONS, "collections"),
    ):
        properties, build = _published(noun)
        graphql_tool(
            server, client, name, description, query,
            properties=properties,
            required=["publicationId"],
            variables=build,
        )
