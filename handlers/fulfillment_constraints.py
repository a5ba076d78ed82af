from __future__ import annotations

from .common import function_rule_queries, function_rule_tools

QUERIES = function_rule_queries("FulfillmentConstraintRule", "FulfillmentConstraintRuleInput")


def register(server, client) -> None:
    function_rule_tools(server, client, noun="fulfillment_constraint_rule", label="fulfillment constraint rule", queries=QUERIES)
