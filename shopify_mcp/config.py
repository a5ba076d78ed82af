from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_VAR = "SHOPIFY_ACCESS_TOKEN"
STORE_URL_VAR = "SHOPIFY_STORE_URL"
API_URL_VAR = "SHOPIFY_STORE_API_URL"

REQUIRED_CLIENT_VARS = (ACCESS_TOKEN_VAR, STORE_URL_VAR, API_URL_VAR)

_DEF_SECRETS_PATH = Path(".secrets/.env.local")


def _truthy(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for the Admin GraphQL API."""

    access_token: str
    store_url: str
    api_url: str

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Resolve all three credentials or raise before anything is built."""
        env = os.environ if env is None else env
        values = {}
        for var in REQUIRED_CLIENT_VARS:
            value = env.get(var)
            if not value:
                raise ConfigurationError(f"Missing required environment variable: {var}")
            values[var] = value
        return cls(
            access_token=values[ACCESS_TOKEN_VAR],
            store_url=values[STORE_URL_VAR],
            api_url=values[API_URL_VAR],
        )

    def is_configured(self) -> bool:
        return bool(self.access_token and self.store_url and self.api_url)


@dataclass(frozen=True)
class Settings:
    """Process-wide settings read once at the composition root."""

    log_level: str = "INFO"
    transport: str = "requests"
    max_workers: int = 8
    protocol_version: str = "2024-11-05"
    metrics_enabled: bool = True
    metrics_port: Optional[int] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        port = (env.get("METRICS_PORT") or "").strip()
        try:
            max_workers = max(1, int(env.get("MCP_MAX_WORKERS", "8")))
        except ValueError:
            logger.warning("Ignoring non-integer MCP_MAX_WORKERS=%r", env.get("MCP_MAX_WORKERS"))
            max_workers = 8
        return cls(
            log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
            transport=(env.get("SHOPIFY_TRANSPORT") or "requests").strip().lower(),
            max_workers=max_workers,
            protocol_version=env.get("PROTOCOL_VERSION", "2024-11-05"),
            metrics_enabled=_truthy(env.get("METRICS_ENABLED"), default=True),
            metrics_port=int(port) if port.isdigit() else None,
        )


def load_local_secrets(path: Path = _DEF_SECRETS_PATH, env: Optional[dict] = None) -> int:
    """Load KEY=VALUE lines from a local secrets file without overriding set variables.

    Returns the number of variables that were added.
    """
    env = os.environ if env is None else env
    if not path.exists():
        return 0
    logger.info("Loading local secrets from %s", path)
    added = 0
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        k = k.strip()
        v = v.strip()
        if k and not env.get(k):
            env[k] = v
            added += 1
    return added
