from __future__ import annotations

from .common import function_rule_queries, function_rule_tools

QUERIES = function_rule_queries("Validation", "ValidationInput")


def register(server, client) -> None:
    function_rule_tools(server, client, noun="validation", label="validation rule", queries=QUERIES)
