from __future__ import annotations

from typing import Any, Dict

from shopify_mcp.patch import Patch

from .common import boolean, enum, gid, graphql_tool, integer, page, string

RESOURCE_TYPES = ["IMAGE", "VIDEO", "MODEL_3D", "FILE"]

IMAGE = "id url altText width height"
SOURCE = "url mimeType width height"
FILE_META = "alt createdAt updatedAt filename mimeType originalFileSize fileStatus"
PREVIEW = f"preview {{ image {{ {IMAGE} }} }}"

GET_FILES = f"""
query GetFiles($first: Int!, $after: String, $query: String, $sortKey: FileSortKeys, $reverse: Boolean) {{
  files(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {{
    edges {{
      node {{
        id {FILE_META} {PREVIEW}
        ... on MediaImage {{ image {{ {IMAGE} }} }}
        ... on Video {{ sources {{ {SOURCE} }} originalSource {{ {SOURCE} }} }}
        ... on GenericFile {{ url }}
      }}
      cursor
    }}
    pageInfo {{ hasNextPage hasPreviousPage }}
  }}
}}
"""

GET_FILE = f"""
query GetFile($id: ID!) {{
  node(id: $id) {{
    id
    ... on MediaImage {{ {FILE_META} image {{ {IMAGE} }} {PREVIEW} }}
    ... on Video {{ {FILE_META} sources {{ {SOURCE} }} originalSource {{ {SOURCE} }} {PREVIEW} }}
    ... on GenericFile {{ {FILE_META} url {PREVIEW} }}
  }}
}}
"""

STAGED_UPLOADS_CREATE = """
mutation StagedUploadsCreate($input: [StagedUploadInput!]!) {
  stagedUploadsCreate(input: $input) {
    stagedTargets { url resourceUrl parameters { name value } }
    userErrors { field message }
  }
}
"""

FILE_CREATE = """
mutation FileCreate($files: [FileCreateInput!]!) {
  fileCreate(files: $files) {
    files {
      id alt createdAt filename mimeType fileStatus
      ... on MediaImage { image { id url altText } }
      ... on Video { sources { url mimeType } }
    }
    userErrors { field message }
  }
}
"""

FILE_UPDATE = """
mutation FileUpdate($input: FileInput!) {
  fileUpdate(input: $input) {
    file { id alt updatedAt }
    userErrors { field message }
  }
}
"""

FILE_DELETE = """
mutation FileDelete($input: FileDeleteInput!) {
  fileDelete(input: $input) {
    deletedFileIds
    userErrors { field message }
  }
}
"""

UPLOAD_NOTE = (
    "Use the stagedTargets.url and parameters to upload your file via HTTP POST, "
    "then use the returned URL with create_file."
)


def _staged_targets(arguments: Dict[str, Any], data: Any) -> Dict[str, Any]:
    payload = (data or {}).get("stagedUploadsCreate") or {}
    return {
        "stagedTargets": payload.get("stagedTargets"),
        "userErrors": payload.get("userErrors"),
        "note": UPLOAD_NOTE,
    }


def _create_file_variables(arguments: Dict[str, Any]) -> Dict[str, Any]:
    patch = Patch.from_arguments(arguments, ["originalSource", "filename", "mimeType", "contentType", "alt"])
    return {"files": [patch.as_dict()]}


def register(server, client) -> None:
    graphql_tool(
        server, client, "get_files", "Fetch files uploaded to the store (images, videos, PDFs, etc.)", GET_FILES,
        properties={
            **page("files", "Filter query (e.g., 'filename:image', 'mimeType:image/*')"),
            "sortKey": enum(["CREATED_AT", "FILENAME", "ID"], "Field to sort by"),
            "reverse": boolean("Reverse the sort order"),
        },
        defaults={"first": 50, "sortKey": "CREATED_AT", "reverse": True},
    )
    graphql_tool(
        server, client, "get_file", "Fetch a specific file by ID", GET_FILE,
        properties={"id": gid("File", "MediaImage")},
        required=["id"],
    )
    graphql_tool(
        server, client, "create_staged_upload", "Create a staged upload target for file upload",
        STAGED_UPLOADS_CREATE,
        properties={
            "filename": string("Name of the file to upload"),
            "mimeType": string("MIME type of the file (e.g., 'image/jpeg', 'video/mp4')"),
            "resource": enum(RESOURCE_TYPES, "Type of resource"),
            "fileSize": integer("Size of the file in bytes", 0),
        },
        required=["filename", "mimeType", "resource", "fileSize"],
        variables=lambda args: {"input": [{
            "filename": args["filename"],
            "mimeType": args["mimeType"],
            "resource": args["resource"],
            "fileSize": str(args["fileSize"]),
        }]},
        shape=_staged_targets,
    )
    graphql_tool(
        server, client, "create_file", "Create a file from a URL (after staged upload or external URL)",
        FILE_CREATE,
        properties={
            "originalSource": string("URL of the uploaded file"),
            "filename": string("Filename"),
            "mimeType": string("MIME type"),
            "contentType": enum(RESOURCE_TYPES, "Content type"),
            "alt": string("Alt text for accessibility"),
        },
        required=["originalSource", "filename", "mimeType", "contentType"],
        variables=_create_file_variables,
    )
    graphql_tool(
        server, client, "update_file", "Update file metadata (alt text)", FILE_UPDATE,
        properties={"id": string("File ID"), "alt": string("New alt text")},
        required=["id", "alt"],
        variables=lambda args: {"input": {"id": args["id"], "alt": args["alt"]}},
    )
    graphql_tool(
        server, client, "delete_file", "Delete a file", FILE_DELETE,
        properties={"id": string("File ID to delete")},
        required=["id"],
        variables=lambda args: {"input": {"id": args["id"]}},
    )
