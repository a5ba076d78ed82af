from __future__ import annotations

from .common import array, graphql_tool, integer, obj, string

METAOBJECT_FIELDS = "id type handle displayName fields { key value type } updatedAt"

GET_DEFINITIONS = """
query GetMetaobjectDefinitions($first: Int!, $after: String) {
  metaobjectDefinitions(first: $first, after: $after) {
    edges {
      node {
        id name type description displayNameKey
        fieldDefinitions { key name description type { name } required }
        access { admin storefront }
        capabilities { publishable { enabled } }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

GET_METAOBJECTS = f"""
query GetMetaobjects($type: String!, $first: Int!, $after: String) {{
  metaobjects(type: $type, first: $first, after: $after) {{
    edges {{ node {{ {METAOBJECT_FIELDS} createdAt }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

CREATE_METAOBJECT = f"""
mutation MetaobjectCreate($input: MetaobjectCreateInput!) {{
  metaobjectCreate(input: $input) {{
    metaobject {{ {METAOBJECT_FIELDS} createdAt }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_METAOBJECT = f"""
mutation MetaobjectUpdate($id: ID!, $input: MetaobjectUpdateInput!) {{
  metaobjectUpdate(id: $id, input: $input) {{
    metaobject {{ {METAOBJECT_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_METAOBJECT = """
mutation MetaobjectDelete($id: ID!) {
  metaobjectDelete(id: $id) {
    deletedId
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    fields = array(obj({
        "key": string("Field key"),
        "value": string("Field value"),
    }, required=["key", "value"]), "Metaobject fields")
    page_size = integer("Number of definitions to fetch (default: 50)", 1, 250)

    graphql_tool(
        server, client, "get_metaobject_definitions", "Fetch metaobject definitions", GET_DEFINITIONS,
        properties={"first": page_size, "after": string("Cursor for pagination")},
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_metaobjects", "Fetch metaobjects of a specific type", GET_METAOBJECTS,
        properties={
            "type": string("Metaobject type"),
            "first": integer("Number of metaobjects to fetch (default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        required=["type"],
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "create_metaobject", "Create a new metaobject", CREATE_METAOBJECT,
        properties={
            "type": string("Metaobject type"),
            "handle": string("Unique handle for the metaobject"),
            "fields": fields,
        },
        required=["type", "handle", "fields"],
        variables=lambda args: {"input": {"type": args["type"], "handle": args["handle"], "fields": args["fields"]}},
    )
    graphql_tool(
        server, client, "update_metaobject", "Update an existing metaobject", UPDATE_METAOBJECT,
        properties={"id": string("Metaobject ID"), "fields": fields},
        required=["id", "fields"],
        variables=lambda args: {"id": args["id"], "input": {"fields": args["fields"]}},
    )
    graphql_tool(
        server, client, "delete_metaobject", "Delete a metaobject", DELETE_METAOBJECT,
        properties={"id": string("Metaobject ID")},
        required=["id"],
    )
