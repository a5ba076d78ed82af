from __future__ import annotations

from .common import array, enum, gid, graphql_tool, integer, string

RESOURCE_TYPES = ["PRODUCT", "COLLECTION"]
FEEDBACK_STATES = ["success", "warning", "error"]

GET_RESOURCE_FEEDBACKS = """
query GetResourceFeedbacks($first: Int!, $after: String, $resourceType: ResourceType) {
  resourceFeedbacks(first: $first, after: $after, resourceType: $resourceType) {
    edges {
      node { id resourceId resourceType state feedbackGeneratedAt messages createdAt updatedAt }
      cursor
    }
    pageInfo { hasNextPage hasPreviousPage }
  }
}
"""

CREATE_RESOURCE_FEEDBACK = """
mutation CreateResourceFeedback($input: ResourceFeedbackInput!) {
  resourceFeedbackCreate(input: $input) {
    resourceFeedback { id resourceId resourceType state messages feedbackGeneratedAt }
    userErrors { field message }
  }
}
"""

FEEDBACK_FIELDS = ["resourceId", "resourceType", "state", "messages"]


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_resource_feedbacks", "Fetch resource feedbacks from the Shopify store",
        GET_RESOURCE_FEEDBACKS,
        properties={
            "first": integer("Number of feedbacks to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "resourceType": enum(RESOURCE_TYPES, "Filter by resource type"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "create_resource_feedback", "Create a resource feedback", CREATE_RESOURCE_FEEDBACK,
        properties={
            "resourceId": gid("Resource", "Product"),
            "resourceType": enum(RESOURCE_TYPES, "Resource type"),
            "state": enum(FEEDBACK_STATES, "Feedback state"),
            "messages": array(string(), "Feedback messages"),
        },
        required=FEEDBACK_FIELDS,
        variables=lambda args: {"input": {key: args[key] for key in FEEDBACK_FIELDS}},
    )
