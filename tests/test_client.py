import json
import shlex
import subprocess

import pytest
import requests

from shopify_mcp.client import (
    CurlTransport,
    RequestsTransport,
    ShopifyGraphQLClient,
    make_transport,
    shell_quote,
)
from shopify_mcp.config import ClientConfig
from shopify_mcp.errors import ConfigurationError, TransportError

QUERY = "query GetShop { shop { name } }"


def _client(credentials, transport):
    return ShopifyGraphQLClient(ClientConfig.from_env(credentials), transport=transport)


def test_success_returns_full_envelope(credentials, make_transport):
    transport = make_transport('{"data": {"shop": {"name": "Test"}}, "extensions": {"cost": 1}}')
    result = _client(credentials, transport).execute(QUERY)
    assert result == {"data": {"shop": {"name": "Test"}}, "extensions": {"cost": 1}}


def test_errors_win_over_data(credentials, make_transport):
    body = json.dumps({"data": {"shop": None}, "errors": [{"message": "Throttled"}]})
    result = _client(credentials, make_transport(body)).execute(QUERY)
    assert result == {"errors": [{"message": "Throttled"}]}


def test_empty_errors_list_still_returns_errors_only(credentials, make_transport):
    body = json.dumps({"data": {"shop": {"name": "x"}}, "errors": []})
    assert _client(credentials, make_transport(body)).execute(QUERY) == {"errors": []}


def test_null_errors_field_is_absent(credentials, make_transport):
    body = json.dumps({"data": {"shop": {"name": "x"}}, "errors": None})
    result = _client(credentials, make_transport(body)).execute(QUERY)
    assert result["data"] == {"shop": {"name": "x"}}


def test_request_shape(credentials, make_transport):
    transport = make_transport()
    _client(credentials, transport).execute(QUERY, {"first": 5})
    url, headers, body = transport.requests[0]
    assert url == credentials["SHOPIFY_STORE_API_URL"]
    assert headers == {"Content-Type": "application/json", "X-Shopify-Access-Token": "shpat_test"}
    assert json.loads(body) == {"query": QUERY, "variables": {"first": 5}}


def test_missing_variables_become_empty_object(credentials, make_transport):
    transport = make_transport()
    _client(credentials, transport).execute(QUERY)
    assert json.loads(transport.requests[0][2])["variables"] == {}


@pytest.mark.parametrize("body", ["<html>Bad Gateway</html>", "[1, 2]", ""])
def test_unparseable_body_raises_transport_error(credentials, make_transport, body):
    with pytest.raises(TransportError):
        _client(credentials, make_transport(body)).execute(QUERY)


def test_blank_operation_text_rejected(credentials, make_transport):
    with pytest.raises(ValueError):
        _client(credentials, make_transport()).execute("   ")


@pytest.mark.parametrize("missing", ["SHOPIFY_ACCESS_TOKEN", "SHOPIFY_STORE_URL", "SHOPIFY_STORE_API_URL"])
def test_missing_credential_raises_before_any_request(credentials, make_transport, missing):
    transport = make_transport()
    env = dict(credentials)
    del env[missing]
    with pytest.raises(ConfigurationError, match=missing):
        ShopifyGraphQLClient(env=env, transport=transport)
    assert transport.requests == []


def test_empty_credential_counts_as_missing(credentials):
    credentials["SHOPIFY_ACCESS_TOKEN"] = ""
    with pytest.raises(ConfigurationError):
        ShopifyGraphQLClient(env=credentials)


def test_get_config_is_frozen(credentials, make_transport):
    config = _client(credentials, make_transport()).get_config()
    assert config.store_url == "test-shop.myshopify.com"
    with pytest.raises(Exception):
        config.access_token = "other"


@pytest.mark.parametrize("value", [
    "plain",
    "it's",
    "'''",
    'back\\slash "double" $HOME `cmd`',
    "unicodé ☃ 日本",
    "new\nline",
])
def test_shell_quote_round_trips(value):
    assert shlex.split(shell_quote(value)) == [value]


def test_curl_command_reconstructs_payload(credentials):
    variables = {"title": "O'Brien's \"best\" shirt \\ ☃"}
    payload = ShopifyGraphQLClient.build_payload(QUERY, variables)
    headers = {"Content-Type": "application/json", "X-Shopify-Access-Token": "tok'en"}
    command = CurlTransport().build_command("https://x.test/graphql.json", headers, payload)

    argv = shlex.split(command)
    assert argv[:5] == ["curl", "-s", "-X", "POST", "https://x.test/graphql.json"]
    assert argv[argv.index("--data-binary") + 1] == payload
    assert "X-Shopify-Access-Token: tok'en" in argv
    assert json.loads(argv[-1])["variables"] == variables


class _Completed:
    def __init__(self, returncode=0, stdout=b"", stderr=b""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def test_curl_transport_runs_through_shell(monkeypatch):
    seen = {}

    def fake_run(command, shell, capture_output):
        seen.update(command=command, shell=shell)
        return _Completed(stdout=b'{"data": {}}')

    monkeypatch.setattr(subprocess, "run", fake_run)
    out = CurlTransport().send("https://x.test", {"A": "b"}, '{"query": "q"}')
    assert out == '{"data": {}}'
    assert seen["shell"] is True
    assert seen["command"].startswith("curl -s -X POST 'https://x.test'")


def test_curl_stderr_is_logged_and_nonzero_exit_raises(monkeypatch, caplog):
    monkeypatch.setattr(subprocess, "run", lambda *a, **k: _Completed(returncode=6, stderr=b"Could not resolve host"))
    with pytest.raises(TransportError, match="status 6"):
        CurlTransport().send("https://x.test", {}, "{}")
    assert "Could not resolve host" in caplog.text


def test_requests_transport_wraps_connection_errors(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(requests, "post", boom)
    with pytest.raises(TransportError, match="refused"):
        RequestsTransport().send("https://x.test", {}, "{}")


def test_requests_transport_returns_body_even_on_http_error(monkeypatch):
    class Response:
        status_code = 401
        text = '{"errors": "[API] Invalid API key or access token"}'

    monkeypatch.setattr(requests, "post", lambda *a, **k: Response())
    assert RequestsTransport().send("https://x.test", {}, "{}") == Response.text


def test_http_error_body_surfaces_as_errors(credentials, make_transport):
    transport = make_transport('{"errors": "[API] Invalid API key or access token"}')
    assert _client(credentials, transport).execute(QUERY) == {"errors": "[API] Invalid API key or access token"}


def test_make_transport():
    assert isinstance(make_transport("curl"), CurlTransport)
    assert isinstance(make_transport("requests"), RequestsTransport)
    with pytest.raises(ValueError):
        make_transport("carrier-pigeon")
