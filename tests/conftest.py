import sys
import pathlib

# Ensure project root is importable in tests
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from shopify_mcp.registry import ToolRegistry

CREDENTIALS = {
    "SHOPIFY_ACCESS_TOKEN": "shpat_test",
    "SHOPIFY_STORE_URL": "test-shop.myshopify.com",
    "SHOPIFY_STORE_API_URL": "https://test-shop.myshopify.com/admin/api/2025-01/graphql.json",
}


class FakeClient:
    """Records execute() calls and answers with a canned result."""

    def __init__(self, result=None, error=None):
        self.result = result if result is not None else {"data": {"ok": True}}
        self.error = error
        self.calls = []

    def execute(self, query, variables=None):
        self.calls.append((query, variables))
        if self.error is not None:
            raise self.error
        return self.result

    @property
    def last_variables(self):
        return self.calls[-1][1]


class FakeTransport:
    name = "fake"

    def __init__(self, body='{"data": {"shop": {"name": "Test"}}}'):
        self.body = body
        self.requests = []

    def send(self, url, headers, body):
        self.requests.append((url, headers, body))
        return self.body


@pytest.fixture
def credentials():
    return dict(CREDENTIALS)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def registry():
    return ToolRegistry()


@pytest.fixture
def make_client():
    return FakeClient


@pytest.fixture
def make_transport():
    return FakeTransport
