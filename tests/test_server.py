import io
import json
import logging

import pytest

import server as entrypoint
from observability import metrics
from shopify_mcp.errors import ConfigurationError
from shopify_mcp.server import SERVER_NAME, build_server


def _fake_registrars(calls):
    def shop(server, client):
        calls.append("shop")
        server.register_tool(
            "get_shop_info",
            lambda args: json.dumps({"shop": {"name": "Test"}}),
            description="Fetch general shop information",
            input_schema={"type": "object", "properties": {}},
        )

    def boom(server, client):
        def handler(args):
            raise RuntimeError("kaput")
        server.register_tool(
            "explode",
            handler,
            input_schema={"type": "object", "properties": {"id": {"type": "string"}}, "required": ["id"]},
        )

    return {"shop": shop, "products": boom}


@pytest.fixture
def mcp(credentials, make_transport):
    env = dict(credentials, ENABLED_TOOL_CATEGORIES="essential")
    return build_server(env, transport=make_transport(), registrars=_fake_registrars([]))


def _call(mcp, name, arguments=None, msg_id=7):
    return mcp.handle_message({
        "jsonrpc": "2.0", "id": msg_id, "method": "tools/call",
        "params": {"name": name, "arguments": arguments or {}},
    })


def test_build_server_mounts_builtins_and_enabled_modules(credentials, make_transport):
    calls = []
    env = dict(credentials, ENABLE_ESSENTIAL="true", ENABLE_COMMERCE="false")
    srv = build_server(env, transport=make_transport(), registrars=_fake_registrars(calls))
    assert calls == ["shop"]
    assert srv.enabled_categories == ["essential"]
    for name in ("health_check", "get_enabled_categories", "get_shop_info", "explode"):
        assert name in srv.registry


def test_build_server_fails_fast_without_credentials(make_transport):
    transport = make_transport()
    with pytest.raises(ConfigurationError):
        build_server({"ENABLED_TOOL_CATEGORIES": "all"}, transport=transport, registrars={})
    assert transport.requests == []


def test_initialize(mcp):
    resp = mcp.handle_message({"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}})
    assert resp["id"] == 1
    assert resp["result"]["serverInfo"]["name"] == SERVER_NAME
    assert "tools" in resp["result"]["capabilities"]


def test_notifications_get_no_response(mcp):
    assert mcp.handle_message({"jsonrpc": "2.0", "method": "notifications/initialized"}) is None


def test_ping_and_unknown_method(mcp):
    assert mcp.handle_message({"jsonrpc": "2.0", "id": 2, "method": "ping"})["result"] == {}
    resp = mcp.handle_message({"jsonrpc": "2.0", "id": 3, "method": "resources/list"})
    assert resp["error"]["code"] == -32601


def test_tools_list(mcp):
    resp = mcp.handle_message({"jsonrpc": "2.0", "id": 4, "method": "tools/list"})
    names = [tool["name"] for tool in resp["result"]["tools"]]
    assert "get_shop_info" in names
    assert all("inputSchema" in tool for tool in resp["result"]["tools"])


def test_tools_call_returns_text_content(mcp):
    resp = _call(mcp, "get_shop_info")
    content = resp["result"]["content"]
    assert content[0]["type"] == "text"
    assert json.loads(content[0]["text"]) == {"shop": {"name": "Test"}}
    assert "isError" not in resp["result"]


def test_tool_failure_becomes_error_text(mcp):
    resp = _call(mcp, "explode", {"id": "1"})
    assert resp["result"]["isError"] is True
    assert resp["result"]["content"][0]["text"] == "Error: kaput"


def test_argument_problems_become_error_text(mcp):
    resp = _call(mcp, "explode", {})
    assert resp["result"]["isError"] is True
    assert "Missing required: id" in resp["result"]["content"][0]["text"]


def test_unknown_tool_and_missing_name(mcp):
    assert _call(mcp, "nope")["error"]["code"] == -32601
    resp = mcp.handle_message({"jsonrpc": "2.0", "id": 9, "method": "tools/call", "params": {}})
    assert resp["error"]["code"] == -32602


def test_health_check_and_category_report(mcp):
    health = json.loads(_call(mcp, "health_check")["result"]["content"][0]["text"])
    assert health["status"] == "healthy"
    assert health["transport"] == "fake"

    report = json.loads(_call(mcp, "get_enabled_categories")["result"]["content"][0]["text"])
    assert report["enabled"] == ["essential"]
    assert report["declared_tool_count"] == 35
    assert len(report["available"]) == 7
    assert report["required_scopes"] == ["read_analytics"]


def _sample(name, labels):
    return metrics.get_registry().get_sample_value(name, labels) or 0.0


def test_tool_calls_are_counted():
    metrics.init_metrics()
    tool_labels = {"tool": "get_shop_info", "outcome": "success"}
    graphql_labels = {"outcome": "graphql_error"}
    calls_before = _sample("mcp_tool_calls_total", tool_labels)
    errors_before = _sample("shopify_graphql_requests_total", graphql_labels)
    metrics.record_tool_call("get_shop_info", True, 0.01)
    metrics.record_graphql_result("graphql_error", 0.02)
    assert _sample("mcp_tool_calls_total", tool_labels) == calls_before + 1
    assert _sample("shopify_graphql_requests_total", graphql_labels) == errors_before + 1


# --- stdio loop ---
def test_channel_reads_newline_delimited_messages():
    stdin = io.BytesIO(b'\n{"id": 1, "method": "ping"}\nnot json\n{"id": 2, "method": "ping"}\n')
    channel = entrypoint.StdioChannel(stdin, io.BytesIO())
    assert channel.read_message()["id"] == 1
    assert channel.read_message()["id"] == 2
    assert channel.read_message() is None


def test_channel_content_length_framing_is_echoed():
    body = b'{"id": 5, "method": "ping"}'
    stdin = io.BytesIO(b"Content-Length: %d\r\n\r\n" % len(body) + body)
    stdout = io.BytesIO()
    channel = entrypoint.StdioChannel(stdin, stdout)
    assert channel.read_message() == {"id": 5, "method": "ping"}
    channel.send({"id": 5, "result": {}})
    out = stdout.getvalue()
    assert out.startswith(b"Content-Length: ")
    assert out.endswith(b'{"id": 5, "result": {}}')


def test_serve_answers_every_request(mcp):
    lines = [
        {"jsonrpc": "2.0", "id": 1, "method": "initialize", "params": {}},
        {"jsonrpc": "2.0", "method": "notifications/initialized"},
        {"jsonrpc": "2.0", "id": 2, "method": "tools/call", "params": {"name": "get_shop_info", "arguments": {}}},
        {"jsonrpc": "2.0", "id": 3, "method": "tools/call", "params": {"name": "explode", "arguments": {"id": "x"}}},
        ["not", "an", "object"],
    ]
    stdin = io.BytesIO(b"".join(json.dumps(line).encode("utf-8") + b"\n" for line in lines))
    stdout = io.BytesIO()
    entrypoint.serve(mcp, entrypoint.StdioChannel(stdin, stdout), max_workers=2)

    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert sorted(r["id"] for r in responses) == [1, 2, 3]
    by_id = {r["id"]: r for r in responses}
    assert by_id[3]["result"]["isError"] is True


def test_main_exits_when_credentials_missing(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    for var in ("SHOPIFY_ACCESS_TOKEN", "SHOPIFY_STORE_URL", "SHOPIFY_STORE_API_URL"):
        monkeypatch.delenv(var, raising=False)
    with pytest.raises(SystemExit) as exc:
        entrypoint.main()
    assert exc.value.code == 1



def test_unknown_log_level_keeps_info(caplog):
    root = logging.getLogger()
    previous = root.level
    try:
        with caplog.at_level(logging.WARNING, logger="server"):
            assert entrypoint.apply_log_level("VERBOSE") == logging.INFO
        assert root.level == logging.INFO
        assert "Unknown LOG_LEVEL 'VERBOSE'" in caplog.text
        assert entrypoint.apply_log_level("DEBUG") == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_main_survives_bad_log_level(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    for var in ("SHOPIFY_ACCESS_TOKEN", "SHOPIFY_STORE_URL", "SHOPIFY_STORE_API_URL"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    previous = root.level
    try:
        with pytest.raises(SystemExit) as exc:
            entrypoint.main()
    finally:
        root.setLevel(previous)
    assert exc.value.code == 1
