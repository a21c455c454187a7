"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: callable actions (parse one line, parse a log file)
- Resources: addressable data blobs (help text, record schema, sample log)

Run locally (stdio):
    python -m mcp_logline_server.server.log_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_logline_server.core.config import resolve_service_config
from mcp_logline_server.resources.registry import register_resources
from mcp_logline_server.tools.parse import parse_log_file_impl, parse_log_line_impl

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = resolve_service_config().log_level
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("logline", json_response=True)

register_resources(mcp)


@mcp.tool()
def parse_log_line(line: str, include_raw: bool = False) -> dict[str, Any]:
    """Split one logfmt-style line into a message and key=value attributes.

    Parameters
    ----------
    line:
        A single log line, e.g. ``request done path=/api status=200``.
    include_raw:
        Whether to echo the original line back in the entry.

    Returns
    -------
    dict:
        {"ok": true, "entry": {...}} or {"ok": false, "error": "unclosed_string", "offset": int}
    """
    return parse_log_line_impl(line=line, include_raw=include_raw)


@mcp.tool()
async def parse_log_file(
    log_path: str,
    contains: str | None = None,
    limit: int | None = None,
    include_raw: bool = False,
    skip_invalid: bool = False,
) -> dict[str, Any]:
    """Parse every non-blank line of a log file.

    Parameters
    ----------
    log_path:
        Path to a local log file. Supports plain text and .gz.
    contains:
        Substring filter applied to the raw line before parsing.
    limit:
        Maximum number of records returned (hard-capped in the implementation).
    include_raw:
        Whether to include the original raw log line in each record.
    skip_invalid:
        Drop lines with an unclosed quote instead of reporting them.

    Returns
    -------
    dict:
        {"count": int, "invalid": int, "entries": list[dict]}
    """
    return await parse_log_file_impl(
        log_path=log_path,
        contains=contains,
        limit=limit,
        include_raw=include_raw,
        skip_invalid=skip_invalid,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
