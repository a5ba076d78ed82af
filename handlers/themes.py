from __future__ import annotations

from typing import Any, Dict

from .common import array, enum, gid, graphql_tool, integer, patched_input, string

THEME_ROLES = ["MAIN", "UNPUBLISHED", "DEMO", "DEVELOPMENT"]
CONTENT_TYPES = ["JSON", "TEXT", "CSS", "LIQUID", "SVG", "JPG", "PNG", "WEBP", "ICO"]

THEME_FIELDS = "id name role createdAt updatedAt processing processingFailed prefix"

GET_THEMES = f"""
query GetThemes($first: Int!, $after: String, $roles: [ThemeRole!], $names: [String!]) {{
  themes(first: $first, after: $after, roles: $roles, names: $names) {{
    edges {{ node {{ {THEME_FIELDS} }} cursor }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_THEME = f"""
query GetTheme($id: ID!) {{
  theme(id: $id) {{ {THEME_FIELDS} themeStoreId }}
}}
"""

CREATE_THEME = """
mutation CreateTheme($source: URL!, $name: String, $role: ThemeRole) {
  themeCreate(source: $source, name: $name, role: $role) {
    theme { id name role createdAt processing }
    userErrors { field message }
  }
}
"""

UPDATE_THEME = """
mutation UpdateTheme($id: ID!, $input: OnlineStoreThemeInput!) {
  themeUpdate(id: $id, input: $input) {
    theme { id name role updatedAt }
    userErrors { field message }
  }
}
"""

PUBLISH_THEME = """
mutation PublishTheme($id: ID!) {
  themePublish(id: $id) {
    theme { id name role }
    userErrors { field message }
  }
}
"""

DELETE_THEME = """
mutation DeleteTheme($id: ID!) {
  themeDelete(id: $id) {
    deletedThemeId
    userErrors { field message }
  }
}
"""

GET_THEME_FILES = """
query GetThemeFiles($themeId: ID!, $filenames: [String!], $first: Int!, $after: String) {
  theme(id: $themeId) {
    id name
    files(filenames: $filenames, first: $first, after: $after) {
      edges { node { id filename contentType createdAt updatedAt size } cursor }
      pageInfo { hasNextPage hasPreviousPage }
    }
  }
}
"""

GET_THEME_FILE = """
query GetThemeFile($themeId: ID!, $filename: String!) {
  theme(id: $themeId) {
    id name
    files(filenames: [$filename], first: 1) {
      edges {
        node {
          id filename contentType createdAt updatedAt size
          body {
            ... on OnlineStoreThemeFileBodyText { value }
            ... on OnlineStoreThemeFileBodyJson { value }
          }
        }
      }
    }
  }
}
"""

UPSERT_THEME_FILES = """
mutation UpsertThemeFiles($themeId: ID!, $files: [OnlineStoreThemeFilesUpsertFileInput!]!) {
  themeFilesUpsert(themeId: $themeId, files: $files) {
    job { id done }
    upsertedThemeFiles { filename valid }
    userErrors { field message }
  }
}
"""


def _list_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    # the API filters on lists; the tool takes one role and one name
    variables: Dict[str, Any] = {"first": arguments.get("first", 50)}
    if arguments.get("after"):
        variables["after"] = arguments["after"]
    if arguments.get("role"):
        variables["roles"] = [arguments["role"]]
    if arguments.get("name"):
        variables["names"] = [arguments["name"]]
    return variables


def _upsert_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "themeId": arguments["themeId"],
        "files": [{
            "filename": arguments["filename"],
            "body": {"type": arguments["contentType"], "value": arguments["content"]},
        }],
    }


def register(server, client) -> None:
    theme_id = gid("Theme", "OnlineStoreTheme")
    graphql_tool(
        server, client, "get_themes", "Fetch themes from the Shopify store", GET_THEMES,
        properties={
            "first": integer("Number of themes to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
            "role": enum(THEME_ROLES, "Filter by theme role"),
            "name": string("Filter by theme name"),
        },
        variables=_list_variables,
    )
    graphql_tool(
        server, client, "get_theme", "Fetch a specific theme by ID", GET_THEME,
        properties={"id": theme_id},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_theme", "Create a new theme", CREATE_THEME,
        properties={
            "source": string("URL to the theme ZIP file"),
            "name": string("Theme name"),
            "role": enum(THEME_ROLES, "Theme role"),
        },
        required=["source"],
        defaults={"role": "UNPUBLISHED"},
    )
    graphql_tool(
        server, client, "update_theme", "Update an existing theme", UPDATE_THEME,
        properties={"id": theme_id, "name": string("Theme name"), "role": enum(THEME_ROLES, "Theme role")},
        required=["id"],
        variables=patched_input(["name", "role"], keys=["id"], skip_empty=True),
    )
    graphql_tool(
        server, client, "publish_theme", "Publish a theme (make it the main theme)", PUBLISH_THEME,
        properties={"id": theme_id},
        required=["id"],
    )
    graphql_tool(
        server, client, "delete_theme", "Delete a theme", DELETE_THEME,
        properties={"id": theme_id},
        required=["id"],
    )
    graphql_tool(
        server, client, "get_theme_files", "Fetch files from a theme", GET_THEME_FILES,
        properties={
            "themeId": theme_id,
            "filenames": array(string(), "Specific files to fetch"),
            "first": integer("Number of files to fetch (1-250, default: 50)", 1, 250),
            "after": string("Cursor for pagination"),
        },
        required=["themeId"],
        defaults={"first": 50},
    )
    graphql_tool(
        server, client, "get_theme_file", "Fetch a specific file from a theme", GET_THEME_FILE,
        properties={
            "themeId": theme_id,
            "filename": string("Filename of the theme file (e.g., 'sections/header.liquid')"),
        },
        required=["themeId", "filename"],
    )
    graphql_tool(
        server, client, "upsert_theme_file", "Create or update a theme file", UPSERT_THEME_FILES,
        properties={
            "themeId": theme_id,
            "filename": string("Filename (e.g., 'sections/header.liquid')"),
            "content": string("File content"),
            "contentType": enum(CONTENT_TYPES, "Content type"),
        },
        required=["themeId", "filename", "content", "contentType"],
        variables=_upsert_variables,
    )
