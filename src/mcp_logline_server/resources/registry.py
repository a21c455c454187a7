"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_logline_server.core.logline import MAX_ATTRIBUTES
from mcp_logline_server.core.logline.classifier import KEY_MAX_LENGTH, VALUE_MAX_LENGTH
from mcp_logline_server.core.models import ParsedLine

SAMPLE_LOG = (
    "service started version=1.4.2 region=eu-west-1\n"
    'request handled path=/api/v1/items status=200 duration=12ms msg="GET /api/v1/items"\n'
    'retrying upstream attempt=2 error="connection reset"\n'
    "cache warm items=1200\n"
)


def help_text() -> str:
    """Describe the parsing rules applied to each line."""
    return (
        "Resources:\n"
        "- app://logline/help\n"
        "- app://logline/schemas/parsed-line\n"
        "- app://logline/examples/sample-log\n"
        "\nParsing rules:\n"
        "- Tokens are split on whitespace; whitespace inside double quotes is kept.\n"
        "- key=value tokens become attributes; everything else joins the message.\n"
        f"- Keys: up to {KEY_MAX_LENGTH} chars of letters, digits, '.', '_', '-'.\n"
        f"- Values: up to {VALUE_MAX_LENGTH} chars; quotes are kept in the value.\n"
        f"- At most {MAX_ATTRIBUTES} attributes; later pairs are appended to the message.\n"
        "- msg/message attributes replace the message (last one wins).\n"
        "- A quote left open at the end of the line is an error (unclosed_string).\n"
    )


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://logline/help")
    def help_resource() -> str:
        """Return the resource list and parsing rules."""
        return help_text()

    @mcp.resource("app://logline/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny sample log for demos and tests."""
        return SAMPLE_LOG

    @mcp.resource("app://logline/schemas/parsed-line")
    def parsed_line_schema() -> dict[str, Any]:
        """Return the JSON schema for parsed line records."""
        return ParsedLine.model_json_schema()
