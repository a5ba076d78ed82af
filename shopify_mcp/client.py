from __future__ import annotations

import json
import logging
import subprocess
import time
from typing import Any, Dict, Mapping, Optional

import requests

from observability.metrics import record_graphql_result

from .config import ClientConfig
from .errors import TransportError

logger = logging.getLogger(__name__)


def shell_quote(value: str) -> str:
    """Wrap ``value`` in single quotes for a POSIX shell.

    Embedded single quotes close the quoted run, emit a double-quoted quote and
    reopen it, so the shell hands the receiving process the original bytes.
    """
    return "'" + value.replace("'", "'\"'\"'") + "'"


class RequestsTransport:
    """Native HTTP transport. One call, one POST; no session, retry or timeout."""

    name = "requests"

    def send(self, url: str, headers: Dict[str, str], body: str) -> str:
        try:
            response = requests.post(url, data=body.encode("utf-8"), headers=headers)
        except requests.RequestException as e:
            raise TransportError(f"GraphQL request failed: {e}") from e
        if response.status_code >= 400:
            logger.warning("GraphQL endpoint answered HTTP %s", response.status_code)
        return response.text


class CurlTransport:
    """Shell out to curl, the way the reference deployment talks to the API."""

    name = "curl"

    def __init__(self, executable: str = "curl") -> None:
        self.executable = executable

    def build_command(self, url: str, headers: Dict[str, str], body: str) -> str:
        parts = [self.executable, "-s", "-X", "POST", shell_quote(url)]
        for key, value in headers.items():
            parts.extend(["-H", shell_quote(f"{key}: {value}")])
        parts.extend(["--data-binary", shell_quote(body)])
        return " ".join(parts)

    def send(self, url: str, headers: Dict[str, str], body: str) -> str:
        command = self.build_command(url, headers, body)
        try:
            proc = subprocess.run(command, shell=True, capture_output=True)
        except OSError as e:
            raise TransportError(f"GraphQL request failed: {e}") from e
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        if stderr:
            logger.error("cURL stderr: %s", stderr)
        if proc.returncode != 0:
            raise TransportError(f"GraphQL request failed: curl exited with status {proc.returncode}")
        return proc.stdout.decode("utf-8", errors="replace")


TRANSPORTS = {
    RequestsTransport.name: RequestsTransport,
    CurlTransport.name: CurlTransport,
}


def make_transport(name: str):
    try:
        return TRANSPORTS[name]()
    except KeyError:
        raise ValueError(f"Unknown transport {name!r}; expected one of {sorted(TRANSPORTS)}") from None


class ShopifyGraphQLClient:
    """Executes GraphQL operations against the Admin API.

    The configuration is resolved once here; a missing credential raises
    ConfigurationError before any request can be made. The instance holds no
    mutable state, so concurrent ``execute`` calls need no locking.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        env: Optional[Mapping[str, str]] = None,
        transport=None,
    ) -> None:
        self._config = config if config is not None else ClientConfig.from_env(env)
        self._transport = transport if transport is not None else RequestsTransport()

    @property
    def transport(self):
        return self._transport

    def get_config(self) -> ClientConfig:
        return self._config

    def build_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self._config.access_token,
        }

    @staticmethod
    def build_payload(query: str, variables: Optional[Mapping[str, Any]] = None) -> str:
        if not isinstance(query, str) or not query.strip():
            raise ValueError("GraphQL operation text must be a non-empty string")
        return json.dumps(
            {"query": query.strip(), "variables": dict(variables) if variables else {}},
            ensure_ascii=False,
        )

    def execute(self, query: str, variables: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Run one operation and return ``{"errors": [...]}`` or the parsed envelope.

        Transport failures and unparseable bodies raise TransportError.
        """
        payload = self.build_payload(query, variables)
        start = time.time()
        try:
            raw = self._transport.send(self._config.api_url, self.build_headers(), payload)
            try:
                response = json.loads(raw)
            except (TypeError, ValueError) as e:
                raise TransportError(f"GraphQL request failed: unparseable response body: {e}") from e
            if not isinstance(response, dict):
                raise TransportError("GraphQL request failed: response body is not a JSON object")
        except TransportError:
            record_graphql_result("transport_error", time.time() - start)
            logger.exception("GraphQL request failed")
            raise

        if response.get("errors") is not None:
            record_graphql_result("graphql_error", time.time() - start)
            return {"errors": response["errors"]}

        record_graphql_result("success", time.time() - start)
        return response
