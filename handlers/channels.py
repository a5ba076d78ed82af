from __future__ import annotations

from .common import boolean, gid, graphql_tool, integer, patched_input, string

NAVIGATION = """
navigationItems(first: {outer}) {{
  edges {{ node {{ id title url items(first: {inner}) {{ edges {{ node {{ id title url }} }} }} }} }}
}}
"""

CHANNEL_FIELDS = "id name handle app { id title handle } currencyCode published"

GET_CHANNELS = f"""
query GetChannels($first: Int!, $after: String) {{
  channels(first: $first, after: $after) {{
    edges {{ node {{ {CHANNEL_FIELDS} {NAVIGATION.format(outer=10, inner=5)} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_CHANNEL = f"""
query GetChannel($id: ID!) {{
  channel(id: $id) {{ {CHANNEL_FIELDS} {NAVIGATION.format(outer=20, inner=10)} }}
}}
"""

CREATE_CHANNEL = """
mutation ChannelCreate($input: ChannelInput!) {
  channelCreate(input: $input) {
    channel { id name handle currencyCode published createdAt }
    userErrors { field message }
  }
}
"""

UPDATE_CHANNEL = """
mutation ChannelUpdate($id: ID!, $input: ChannelInput!) {
  channelUpdate(id: $id, input: $input) {
    channel { id name handle currencyCode published updatedAt }
    userErrors { field message }
  }
}
"""

DELETE_CHANNEL = """
mutation ChannelDelete($id: ID!) {
  channelDelete(id: $id) {
    deletedChannelId
    userErrors { field message }
  }
}
"""


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_channels", "Fetch sales channels for the store", GET_CHANNELS,
        properties={
            "first": integer("Number of channels to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_channel", "Fetch a specific sales channel by ID", GET_CHANNEL,
        properties={"id": gid("Channel", "Channel")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_channel", "Create a new sales channel (requires app installation)", CREATE_CHANNEL,
        properties={
            "name": string("Channel name"),
            "handle": string("Unique handle for the channel"),
            "currencyCode": string("Currency code (e.g., 'USD')"),
        },
        required=["name", "handle"],
        variables=patched_input(["name", "handle", "currencyCode"], skip_empty=True),
    )
    graphql_tool(
        server, client, "update_channel", "Update an existing sales channel", UPDATE_CHANNEL,
        properties={
            "id": string("Channel ID"),
            "name": string("Channel name"),
            "handle": string("Unique handle for the channel"),
            "currencyCode": string("Currency code (e.g., 'USD')"),
            "published": boolean("Whether the channel is published"),
        },
        required=["id"],
        variables=patched_input(["name", "handle", "currencyCode", "published"], keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "delete_channel", "Delete a sales channel", DELETE_CHANNEL,
        properties={"id": string("Channel ID to delete")},
        required=["id"],
    )
