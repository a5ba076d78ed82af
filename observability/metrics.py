"""
Prometheus metrics for tool calls and GraphQL round trips.
All metrics live on a private registry so tests and embedders do not collide
with the process-global default registry.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from prometheus_client import CollectorRegistry, Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

# Single registry for the process
_REGISTRY: Optional[CollectorRegistry] = None

# Metrics objects
TOOL_CALLS_TOTAL = None
TOOL_LATENCY = None
GRAPHQL_REQUESTS_TOTAL = None
GRAPHQL_LATENCY = None


def get_registry() -> CollectorRegistry:
    global _REGISTRY
    if _REGISTRY is None:
        _REGISTRY = CollectorRegistry()
    return _REGISTRY


def init_metrics():
    global TOOL_CALLS_TOTAL, TOOL_LATENCY, GRAPHQL_REQUESTS_TOTAL, GRAPHQL_LATENCY
    if TOOL_CALLS_TOTAL is not None:
        return
    reg = get_registry()
    TOOL_CALLS_TOTAL = Counter("mcp_tool_calls_total", "Tool invocations by tool and outcome", ["tool", "outcome"], registry=reg)
    TOOL_LATENCY = Histogram("mcp_tool_latency_seconds", "Tool invocation latency", ["tool"], registry=reg)
    GRAPHQL_REQUESTS_TOTAL = Counter("shopify_graphql_requests_total", "GraphQL requests by outcome", ["outcome"], registry=reg)
    GRAPHQL_LATENCY = Histogram("shopify_graphql_latency_seconds", "GraphQL round-trip latency", registry=reg)


# Initialize eagerly if enabled
if os.getenv("METRICS_ENABLED", "1").lower() in {"1", "true", "yes", "on"}:
    init_metrics()


def record_tool_call(tool: str, success: bool, latency_s: float) -> None:
    if TOOL_CALLS_TOTAL is None or TOOL_LATENCY is None:
        return
    TOOL_CALLS_TOTAL.labels(tool=tool, outcome="success" if success else "failure").inc()
    TOOL_LATENCY.labels(tool=tool).observe(max(0.0, latency_s))


def record_graphql_result(outcome: str, latency_s: float) -> None:
    """Outcome is one of success, graphql_error, transport_error."""
    if GRAPHQL_REQUESTS_TOTAL is None or GRAPHQL_LATENCY is None:
        return
    GRAPHQL_REQUESTS_TOTAL.labels(outcome=outcome).inc()
    GRAPHQL_LATENCY.observe(max(0.0, latency_s))


def start_exporter(port: int, addr: str = "127.0.0.1") -> None:
    """Serve /metrics from a daemon thread."""
    init_metrics()
    start_http_server(port, addr=addr, registry=get_registry())
    logger.info("/metrics exporter on http://%s:%s/metrics", addr, port)
