from __future__ import annotations

from .common import graphql_tool, integer, patched_input, string

TEMPLATE_FIELDS = "id name subject body"

GET_TEMPLATES = f"""
query GetPackingSlipTemplates($first: Int!, $after: String) {{
  packingSlipTemplates(first: $first, after: $after) {{
    edges {{ node {{ {TEMPLATE_FIELDS} createdAt updatedAt }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

CREATE_TEMPLATE = f"""
mutation PackingSlipTemplateCreate($input: PackingSlipTemplateInput!) {{
  packingSlipTemplateCreate(input: $input) {{
    packingSlipTemplate {{ {TEMPLATE_FIELDS} createdAt }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_TEMPLATE = f"""
mutation PackingSlipTemplateUpdate($id: ID!, $input: PackingSlipTemplateInput!) {{
  packingSlipTemplateUpdate(id: $id, input: $input) {{
    packingSlipTemplate {{ {TEMPLATE_FIELDS} updatedAt }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_TEMPLATE = """
mutation PackingSlipTemplateDelete($id: ID!) {
  packingSlipTemplateDelete(id: $id) {
    deletedPackingSlipTemplateId
    userErrors { field message }
  }
}
"""

FIELDS = ["name", "subject", "body"]


def register(server, client) -> None:
    template = {
        "name": string("Template name"),
        "subject": string("Email subject"),
        "body": string("Template body (Liquid)"),
    }
    graphql_tool(
        server, client, "get_packing_slip_templates", "Fetch packing slip templates", GET_TEMPLATES,
        properties={
            "first": integer("Number of templates to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "create_packing_slip_template", "Create a new packing slip template", CREATE_TEMPLATE,
        properties=template,
        required=FIELDS,
        variables=patched_input(FIELDS),
    )
    graphql_tool(
        server, client, "update_packing_slip_template", "Update an existing packing slip template",
        UPDATE_TEMPLATE,
        properties={"id": string("Template ID"), **template},
        required=["id"],
        variables=patched_input(FIELDS, keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_packing_slip_template", "Delete a packing slip template", DELETE_TEMPLATE,
        properties={"id": string("Template ID to delete")},
        required=["id"],
    )
