from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, enum, gid, graphql_tool, integer, number, page, string

BUDGET_TYPES = ["daily", "monthly", "total"]

EVENT_FIELDS = """
id type remoteId startedAt endedAt scheduledToEndAt
manageUrl previewUrl utmCampaign utmMedium utmSource
description marketingChannelType sourceAndMedium
app { id title }
"""

GET_EVENTS = f"""
query GetMarketingEvents($first: Int!, $after: String, $query: String, $sortKey: MarketingEventSortKeys, $reverse: Boolean) {{
  marketingEvents(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{ node {{ {EVENT_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_EVENT = f"""
query GetMarketingEvent($id: ID!) {{
  marketingEvent(id: $id) {{ {EVENT_FIELDS} }}
}}
"""

CREATE_EVENT = f"""
mutation MarketingEventCreate($input: MarketingEventInput!) {{
  marketingEventCreate(input: $input) {{
    marketingEvent {{ {EVENT_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

UPDATE_EVENT = f"""
mutation MarketingEventUpdate($id: ID!, $input: MarketingEventInput!) {{
  marketingEventUpdate(id: $id, input: $input) {{
    marketingEvent {{ {EVENT_FIELDS} }}
    userErrors {{ field message }}
  }}
}}
"""

DELETE_EVENT = """
mutation MarketingEventDelete($id: ID!) {
  marketingEventDelete(id: $id) {
    deletedMarketingEventId
    userErrors { field message }
  }
}
"""

GET_INTEGRATED_CAMPAIGNS = """
query GetMarketingIntegratedCampaigns($first: Int!, $after: String) {
  marketingActivities(first: $first, after: $after) {
    edges {
      node {
        id title status createdAt updatedAt
        marketingChannelType tactic sourceAndMedium
        marketingEvent { id type }
        app { id title }
      }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""


def _create_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch().set("name", arguments["name"]).set("eventType", arguments["eventType"])
    patch.set("startDate", arguments["startDate"])
    for key in ("description", "endDate", "channelId", "budget", "budgetType"):
        if arguments.get(key):
            patch.set(key, arguments[key])
    return {"input": patch.as_dict()}


def _update_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    # name/startDate/status/budgetType are dropped when empty, the rest on presence
    patch = Patch.from_arguments(arguments, ["description", "endDate", "budget"])
    for key in ("name", "startDate", "status", "budgetType"):
        if arguments.get(key):
            patch.set(key, arguments[key])
    return {"id": arguments["id"], "input": patch.as_dict()}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_marketing_events", "Fetch marketing events for the store", GET_EVENTS,
        properties={
            **page("events"),
            "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID", "START_DATE"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "CREATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_marketing_event", "Fetch a specific marketing event by ID", GET_EVENT,
        properties={"id": gid("Marketing Event", "MarketingEvent")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_marketing_event", "Create a new marketing event", CREATE_EVENT,
        properties={
            "name": string("Event name"),
            "eventType": string("Event type (e.g., 'email', 'social', 'display')"),
            "description": string("Event description"),
            "startDate": string("Start date (ISO 8601 format)"),
            "endDate": string("End date (ISO 8601 format)"),
            "channelId": string("Channel ID"),
            "budget": number("Budget amount"),
            "budgetType": enum(BUDGET_TYPES, "Budget type"),
        },
        required=["name", "eventType", "startDate"],
        variables=_create_variables,
    )
    graphql_tool(
        server, client, "update_marketing_event", "Update an existing marketing event", UPDATE_EVENT,
        properties={
            "id": string("Marketing Event ID"),
            "name": string("Event name"),
            "description": string("Event description"),
            "startDate": string("Start date"),
            "endDate": string("End date"),
            "status": enum(["active", "scheduled", "completed", "draft"], "Event status"),
            "budget": number("Budget amount"),
            "budgetType": enum(BUDGET_TYPES, "Budget type"),
        },
        required=["id"],
        variables=_update_variables,
    )
    graphql_tool(
        server, client, "delete_marketing_event", "Delete a marketing event", DELETE_EVENT,
        properties={"id": string("Marketing Event ID to delete")},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_marketing_integrated_campaigns", "Fetch marketing integrated campaigns",
        GET_INTEGRATED_CAMPAIGNS,
        properties={
            "first": integer("Number to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
