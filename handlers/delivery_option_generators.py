from __future__ import annotations

from .common import function_rule_queries, function_rule_tools

QUERIES = function_rule_queries("DeliveryOptionGenerator", "DeliveryOptionGeneratorInput")


def register(server, client) -> None:
    function_rule_tools(server, client, noun="delivery_option_generator", label="delivery option generator", queries=QUERIES)
