"""Shopify GraphQL MCP server package.

This package houses the primary components:
- categories: tool category catalog, resolver and lookup helpers
- client: GraphQL execution client and its transports
- dispatch: mounts module registrars for the enabled categories
- registry: tool registration and metadata store (the server handle)
- server: MCP message handling and the composition root
"""

__version__ = "1.0.0"
