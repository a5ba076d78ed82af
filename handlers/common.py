from __future__ import annotations

import json
from typing import Any, Callable, Dict, Iterable, List, Optional

from shopify_mcp.errors import TransportError
from shopify_mcp.patch import Patch

VariablesBuilder = Callable[[Dict[str, Any]], Dict[str, Any]]


# --- JSON-Schema fragments ---
def string(description: str = "") -> Dict[str, Any]:
    return {"type": "string", "description": description}


def integer(description: str = "", minimum: Optional[int] = None, maximum: Optional[int] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "integer", "description": description}
    if minimum is not None:
        schema["minimum"] = minimum
    if maximum is not None:
        schema["maximum"] = maximum
    return schema


def number(description: str = "") -> Dict[str, Any]:
    return {"type": "number", "description": description}


def boolean(description: str = "") -> Dict[str, Any]:
    return {"type": "boolean", "description": description}


def enum(values: Iterable[str], description: str = "") -> Dict[str, Any]:
    return {"type": "string", "enum": list(values), "description": description}


def array(items: Dict[str, Any], description: str = "") -> Dict[str, Any]:
    return {"type": "array", "items": items, "description": description}


def obj(properties: Optional[Dict[str, Any]] = None, description: str = "", required: Optional[List[str]] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "description": description}
    if properties is not None:
        schema["properties"] = properties
    if required:
        schema["required"] = list(required)
    return schema


def page(noun: str, query_hint: str = "Filter query") -> Dict[str, Any]:
    """The first/after/query trio most list operations accept."""
    return {
        "first": integer(f"Number of {noun} to fetch (1-250, default: 50)", 1, 250),
        "after": string("Cursor for pagination"),
        "query": string(query_hint),
    }


def gid(noun: str, resource: str) -> Dict[str, Any]:
    return string(f"{noun} ID (e.g., 'gid://shopify/{resource}/123456789')")


def metafields(description: str = "Metafields") -> Dict[str, Any]:
    return array(obj({
        "namespace": string("Metafield namespace"),
        "key": string("Metafield key"),
        "value": string("Metafield value"),
        "type": string("Metafield type (e.g., 'json', 'string')"),
    }, required=["namespace", "key", "value", "type"]), description)


def money(amount: Any, currency_code: str) -> Dict[str, Any]:
    """MoneyInput; Shopify takes decimal amounts as strings."""
    return {"amount": str(amount), "currencyCode": currency_code}


# --- Execution and result formatting ---
def format_result(result: Dict[str, Any]) -> str:
    if "errors" in result:
        return f"GraphQL Errors: {json.dumps(result['errors'], indent=2)}"
    return json.dumps(result.get("data"), indent=2)


def run_graphql(
    client,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    shape: Optional[Callable[[Any], Any]] = None,
) -> str:
    """Execute and format; a transport failure becomes an error string.

    ``shape`` rewrites the data of a successful response before it is rendered.
    """
    try:
        result = client.execute(query, variables)
    except TransportError as e:
        return f"Error: {e}"
    if shape is None or "errors" in result:
        return format_result(result)
    return json.dumps(shape(result.get("data")), indent=2)


def pass_through(properties: Dict[str, Any], defaults: Optional[Dict[str, Any]] = None) -> VariablesBuilder:
    """Variables are the declared arguments that were supplied, over the defaults."""
    defaults = dict(defaults or {})

    def build(arguments: Dict[str, Any]) -> Dict[str, Any]:
        variables = dict(defaults)
        for key in properties:
            if key in arguments and arguments[key] is not None:
                variables[key] = arguments[key]
        return variables

    return build


def patched_input(
    fields: Iterable[str],
    *,
    wrap: str = "input",
    keys: Iterable[str] = (),
    key_in_input: Iterable[str] = (),
    rename: Optional[Dict[str, str]] = None,
    skip_empty: bool = False,
) -> VariablesBuilder:
    """Build ``{wrap: <patch of supplied fields>}`` plus top-level key variables.

    ``keys`` are copied as top-level variables (``$id`` style), ``key_in_input``
    are copied into the input object itself (``input.id`` style). ``skip_empty``
    leaves blank values out, see ``Patch.from_arguments``.
    """
    fields = list(fields)
    keys = list(keys)
    key_in_input = list(key_in_input)

    def build(arguments: Dict[str, Any]) -> Dict[str, Any]:
        patch = Patch.from_arguments(arguments, key_in_input + fields, rename=rename, skip_empty=skip_empty)
        variables = {key: arguments.get(key) for key in keys}
        variables[wrap] = patch.as_dict()
        return variables

    return build


def graphql_tool(
    server,
    client,
    name: str,
    description: str,
    query: str,
    *,
    properties: Optional[Dict[str, Any]] = None,
    required: Optional[List[str]] = None,
    defaults: Optional[Dict[str, Any]] = None,
    variables: Optional[VariablesBuilder] = None,
    shape: Optional[Callable[[Dict[str, Any], Any], Any]] = None,
) -> None:
    """Mount one GraphQL-backed tool on the server handle.

    ``shape(arguments, data)`` post-processes successful responses.
    """
    properties = properties or {}
    build = variables or pass_through(properties, defaults)
    schema: Dict[str, Any] = {"type": "object", "properties": properties}
    if required:
        schema["required"] = list(required)

    def handler(arguments: Dict[str, Any]) -> str:
        if shape is None:
            return run_graphql(client, query, build(arguments))
        return run_graphql(client, query, build(arguments), lambda data: shape(arguments, data))

    handler.__name__ = f"handle_{name}"
    server.register_tool(name, handler, description=description, input_schema=schema)


def function_rule_tools(server, client, *, noun: str, label: str, queries: Dict[str, str], wrap: str = "input") -> None:
    """get/create/update/delete tools for a Shopify Function backed rule.

    ``noun`` names the tools (``get_<noun>s``, ``create_<noun>``...), ``queries``
    maps ``list``/``create``/``update``/``delete`` to their documents.
    """
    graphql_tool(
        server, client, f"get_{noun}s", f"Fetch {label}s for the store", queries["list"],
        properties={
            "first": integer(f"Number of {label}s to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, f"create_{noun}", f"Create a new {label} using a Shopify Function", queries["create"],
        properties={
            "functionId": string(f"ID of the {label} function to use"),
            "metafields": metafields("Function configuration metafields"),
        },
        required=["functionId"],
        variables=_function_input(wrap, with_function=True),
    )
    graphql_tool(
        server, client, f"update_{noun}", f"Update an existing {label}", queries["update"],
        properties={
            "id": string(f"{label[0].upper()}{label[1:]} ID"),
            "metafields": metafields("Function configuration metafields"),
        },
        required=["id"],
        variables=_function_input(wrap, with_function=False),
    )
    graphql_tool(
        server, client, f"delete_{noun}", f"Delete a {label}", queries["delete"],
        properties={"id": string(f"{label[0].upper()}{label[1:]} ID to delete")},
        required=["id"],
    )


def _function_input(wrap: str, *, with_function: bool) -> VariablesBuilder:
    # empty metafield lists are left out of the input
    def build(arguments: Dict[str, Any]) -> Dict[str, Any]:
        patch = Patch()
        if with_function:
            patch.set("functionId", arguments["functionId"])
        if arguments.get("metafields"):
            patch.set("metafields", arguments["metafields"])
        variables = {} if with_function else {"id": arguments["id"]}
        variables[wrap] = patch.as_dict()
        return variables

    return build


def function_rule_queries(type_name: str, input_type: str) -> Dict[str, str]:
    """Documents for a function-backed resource, e.g. ``DeliveryCustomization``."""
    field = type_name[0].lower() + type_name[1:]
    node = "id functionId metafields(first: 10) { edges { node { id namespace key value type } } }"
    payload = f"{field} {{ {node} }}\n    userErrors {{ field message }}"
    return {
        "list": f"""
query Get{type_name}s($first: Int!, $after: String) {{
  {field}s(first: $first, after: $after) {{
    edges {{ node {{ {node} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
""",
        "create": f"""
mutation {type_name}Create($input: {input_type}!) {{
  {field}Create(input: $input) {{
    {payload}
  }}
}}
""",
        "update": f"""
mutation {type_name}Update($id: ID!, $input: {input_type}!) {{
  {field}Update(id: $id, input: $input) {{
    {payload}
  }}
}}
""",
        "delete": f"""
mutation {type_name}Delete($id: ID!) {{
  {field}Delete(id: $id) {{
    deleted{type_name}Id
    userErrors {{ field message }}
  }}
}}
""",
    }
