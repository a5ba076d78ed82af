from __future__ import annotations


class ShopifyMCPError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(ShopifyMCPError):
    """A required configuration value is missing. Fatal at startup."""


class TransportError(ShopifyMCPError):
    """The outbound GraphQL call failed or returned an unparseable body."""


class ToolArgumentError(ShopifyMCPError):
    """Raised for tool arguments that do not satisfy the tool's input schema."""

    def __init__(self, tool_name: str, problems: list[str]):
        self.tool_name = tool_name
        self.problems = list(problems)
        super().__init__(f"Invalid arguments for {tool_name}: {'; '.join(self.problems)}")
