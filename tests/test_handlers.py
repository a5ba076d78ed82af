import json
import logging

import pytest

import handlers
from handlers import (
    analytics,
    checkouts,
    custom_pixels,
    delivery_customizations,
    files,
    gift_cards,
    inventory_transfers,
    privacy_settings,
    products,
    subscriptions,
    themes,
    translations,
)
from handlers.common import (
    format_result,
    function_rule_queries,
    graphql_tool,
    money,
    pass_through,
    patched_input,
    run_graphql,
)
from shopify_mcp.errors import TransportError


def _mount(module, registry, client):
    module.register(registry, client)
    return registry


# --- shared helpers ---
def test_format_result_errors_and_data():
    assert format_result({"errors": [{"message": "bad"}]}) == 'GraphQL Errors: [\n  {\n    "message": "bad"\n  }\n]'
    assert format_result({"data": {"a": 1}}) == '{\n  "a": 1\n}'
    assert format_result({}) == "null"
    assert format_result({"data": {"a": 1}, "errors": []}) == "GraphQL Errors: []"


def test_run_graphql_transport_error_becomes_text(make_client):
    client = make_client(error=TransportError("GraphQL request failed: refused"))
    assert run_graphql(client, "query { shop { name } }") == "Error: GraphQL request failed: refused"


def test_run_graphql_shape_skipped_on_errors(make_client):
    client = make_client({"errors": [{"message": "nope"}]})
    out = run_graphql(client, "q", shape=lambda data: pytest.fail("shape must not run"))
    assert out.startswith("GraphQL Errors: ")


def test_pass_through_applies_defaults_and_drops_undeclared():
    build = pass_through({"first": {}, "after": {}, "query": {}}, {"first": 50})
    assert build({"after": "c1", "query": None, "extra": 1}) == {"first": 50, "after": "c1"}
    assert build({"first": 5}) == {"first": 5}


def test_patched_input_keys_and_wrap():
    build = patched_input(["title", "tags"], wrap="product", keys=["id"], key_in_input=["handle"])
    assert build({"id": "gid://1", "handle": "h", "title": "T"}) == {
        "id": "gid://1",
        "product": {"handle": "h", "title": "T"},
    }


def test_money_stringifies_amount():
    assert money(12.5, "USD") == {"amount": "12.5", "currencyCode": "USD"}


def test_graphql_tool_schema_and_variables(registry, make_client):
    client = make_client()
    graphql_tool(
        registry, client, "get_things", "Fetch things", "query Things { things }",
        properties={"first": {"type": "integer"}}, required=["first"], defaults={"first": 50},
    )
    schema = registry.get_tool("get_things").schema()
    assert schema["inputSchema"] == {
        "type": "object", "properties": {"first": {"type": "integer"}}, "required": ["first"],
    }
    registry.call_tool("get_things", {"first": 3})
    assert client.calls == [("query Things { things }", {"first": 3})]


# --- every module ---
def test_all_modules_register_without_collisions(registry, make_client, caplog):
    client = make_client()
    with caplog.at_level(logging.WARNING, logger="shopify_mcp.registry"):
        for register in handlers.MODULE_REGISTRARS.values():
            register(registry, client)
    assert "registered more than once" not in caplog.text
    assert len(registry) > 250
    for schema in registry.get_all_tool_schemas():
        assert schema["inputSchema"]["type"] == "object"
        assert schema["description"]
    assert client.calls == []


# --- individual modules ---
def test_get_products_defaults(registry, make_client):
    client = make_client({"data": {"products": {"edges": []}}})
    out = _mount(products, registry, client).call_tool("get_products", {"query": "title:shirt"})
    assert json.loads(out) == {"products": {"edges": []}}
    assert client.last_variables == {"first": 50, "sortKey": "CREATED_AT", "reverse": True, "query": "title:shirt"}


def test_update_product_sends_only_supplied_fields(registry, make_client):
    client = make_client()
    _mount(products, registry, client).call_tool(
        "update_product", {"id": "gid://shopify/Product/1", "title": "New", "tags": []}
    )
    assert client.last_variables == {"input": {"id": "gid://shopify/Product/1", "title": "New", "tags": []}}


def test_graphql_errors_are_returned_as_text(registry, make_client):
    client = make_client({"errors": [{"message": "Access denied"}]})
    out = _mount(products, registry, client).call_tool("get_product", {"id": "gid://shopify/Product/1"})
    assert out.startswith("GraphQL Errors: ")
    assert "Access denied" in out


def test_gift_card_expiry_is_renamed(registry, make_client):
    client = make_client()
    _mount(gift_cards, registry, client).call_tool(
        "update_gift_card", {"id": "gid://shopify/GiftCard/1", "expiresAt": "2027-01-01"}
    )
    assert client.last_variables == {"id": "gid://shopify/GiftCard/1", "input": {"expiresOn": "2027-01-01"}}


def test_analytics_report_is_wrapped(registry, make_client):
    client = make_client({"data": {"shop": {"name": "Test"}}})
    out = json.loads(_mount(analytics, registry, client).call_tool(
        "get_analytics_report", {"reportType": "sales", "startDate": "2026-01-01", "endDate": "2026-01-31"}
    ))
    assert out["reportType"] == "sales"
    assert out["period"] == {"startDate": "2026-01-01", "endDate": "2026-01-31", "granularity": "daily"}
    assert out["data"] == {"shop": {"name": "Test"}}
    assert "run_shopifyql_query" in out["note"]
    assert client.last_variables == {"startDate": "2026-01-01", "endDate": "2026-01-31"}


def test_complete_checkout_makes_no_request(registry, make_client):
    client = make_client()
    out = json.loads(_mount(checkouts, registry, client).call_tool("complete_checkout", {"checkoutId": "c1"}))
    assert out["checkoutId"] == "c1"
    assert out["steps"]
    assert client.calls == []


def test_staged_upload_shape(registry, make_client):
    client = make_client({"data": {"stagedUploadsCreate": {"stagedTargets": [{"url": "u"}], "userErrors": []}}})
    out = json.loads(_mount(files, registry, client).call_tool(
        "create_staged_upload",
        {"filename": "a.png", "mimeType": "image/png", "resource": "IMAGE", "fileSize": 10},
    ))
    assert out["stagedTargets"] == [{"url": "u"}]
    assert out["userErrors"] == []
    assert "note" in out


def test_theme_list_filters_become_lists(registry, make_client):
    client = make_client()
    _mount(themes, registry, client).call_tool("get_themes", {"role": "MAIN", "name": "Dawn"})
    assert client.last_variables == {"first": 50, "roles": ["MAIN"], "names": ["Dawn"]}


def test_subscription_status_changes(registry, make_client):
    client = make_client()
    _mount(subscriptions, registry, client).call_tool(
        "pause_subscription_contract", {"subscriptionContractId": "gid://shopify/SubscriptionContract/1"}
    )
    query, variables = client.calls[-1]
    assert "subscriptionContractPause" in query
    assert variables == {"subscriptionContractId": "gid://shopify/SubscriptionContract/1"}


def test_register_translation_builds_single_translation(registry, make_client):
    client = make_client()
    _mount(translations, registry, client).call_tool("register_translation", {
        "resourceId": "gid://shopify/Product/1", "locale": "fr", "key": "title", "value": "Chemise",
        "marketId": "gid://shopify/Market/2",
    })
    assert client.last_variables == {
        "resourceId": "gid://shopify/Product/1",
        "translations": [{
            "locale": "fr", "key": "title", "value": "Chemise",
            "translatableContentDigest": "auto", "marketId": "gid://shopify/Market/2",
        }],
    }


def test_function_rule_tools(registry, make_client):
    client = make_client()
    _mount(delivery_customizations, registry, client)
    for name in ("get_delivery_customizations", "create_delivery_customization",
                 "update_delivery_customization", "delete_delivery_customization"):
        assert name in registry

    registry.call_tool("create_delivery_customization", {"functionId": "fn-1", "metafields": []})
    assert client.last_variables == {"input": {"functionId": "fn-1"}}

    field = {"namespace": "n", "key": "k", "value": "v", "type": "json"}
    registry.call_tool("update_delivery_customization", {"id": "d1", "metafields": [field]})
    assert client.last_variables == {"id": "d1", "input": {"metafields": [field]}}


def test_function_rule_queries_names():
    queries = function_rule_queries("CartTransform", "CartTransformInput")
    assert "cartTransforms(first: $first, after: $after)" in queries["list"]
    assert "mutation CartTransformCreate($input: CartTransformInput!)" in queries["create"]
    assert "deletedCartTransformId" in queries["delete"]


def test_toggle_custom_pixel_picks_mutation(registry, make_client):
    client = make_client()
    _mount(custom_pixels, registry, client)
    registry.call_tool("toggle_custom_pixel", {"id": "p1", "enabled": False})
    assert "customPixelDisable" in client.calls[-1][0]
    registry.call_tool("toggle_custom_pixel", {"id": "p1", "enabled": True})
    assert "customPixelEnable" in client.calls[-1][0]
    assert client.last_variables == {"id": "p1"}


def test_privacy_messages_are_nested(registry, make_client):
    client = make_client()
    _mount(privacy_settings, registry, client).call_tool(
        "update_privacy_settings", {"gdprApplies": False, "marketingPrivacyMessage": "We email", "legalPrivacyName": ""}
    )
    assert client.last_variables == {
        "input": {"gdprApplies": False, "privacyOptions": {"marketingPrivacyMessage": "We email"}},
    }


def test_receive_transfer_variables(registry, make_client):
    client = make_client()
    items = [{"inventoryItemId": "i1", "quantity": 2}]
    _mount(inventory_transfers, registry, client).call_tool(
        "receive_inventory_transfer", {"transferId": "t1", "lineItems": items}
    )
    assert client.last_variables == {"id": "t1", "input": {"lineItems": items}}


def test_empty_errors_list_skips_shape(make_client):
    client = make_client({"data": {"shop": {"name": "x"}}, "errors": []})
    out = run_graphql(client, "q", shape=lambda data: pytest.fail("shape must not run"))
    assert out == "GraphQL Errors: []"


def test_privacy_options_left_out_without_messages(registry, make_client):
    client = make_client()
    _mount(privacy_settings, registry, client).call_tool("update_privacy_settings", {"gdprApplies": True})
    assert client.last_variables == {"input": {"gdprApplies": True}}
