"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from mcp_logline_server.core.config import ServiceConfig, resolve_service_config
from mcp_logline_server.core.log_service import get_parsed, parse_line
from mcp_logline_server.core.models import ParsedLine


def _record_to_dict(record: ParsedLine, *, include_raw: bool) -> dict[str, Any]:
    """Convert a ParsedLine into a JSON-serializable dict."""
    d = record.model_dump(exclude_none=True, exclude={"raw"})
    if include_raw and record.raw is not None:
        d["raw"] = record.raw
    return d


def _resolve_limit(limit: int | None, cfg: ServiceConfig) -> int:
    if limit is None:
        return cfg.default_limit
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, cfg.hard_limit)


def parse_log_line_impl(*, line: str, include_raw: bool = False) -> dict[str, Any]:
    """Implementation for the `parse_log_line` MCP tool."""
    if "\n" in line.rstrip("\r\n"):
        raise ValueError("line must not contain embedded newlines")

    record = parse_line(1, line.rstrip("\r\n"), include_raw=include_raw)
    if not record.ok:
        return {"ok": False, "error": record.error, "offset": record.error_offset}
    return {"ok": True, "entry": _record_to_dict(record, include_raw=include_raw)}


async def parse_log_file_impl(
    *,
    log_path: str,
    contains: str | None = None,
    limit: int | None = None,
    include_raw: bool = False,
    skip_invalid: bool = False,
    config: ServiceConfig | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_log_file` MCP tool.

    Notes
    -----
    - limit defaults to LOGLINE_DEFAULT_LIMIT and is hard-capped.
    - Lines with an unclosed quote are reported with an ``error`` field
      unless skip_invalid is set.
    """
    cfg = config or resolve_service_config()
    limit_eff = _resolve_limit(limit, cfg)

    records = await get_parsed(
        log_path,
        contains=contains,
        limit=limit_eff,
        skip_invalid=skip_invalid,
        include_raw=include_raw,
        encoding=cfg.encoding,
        decode_errors=cfg.decode_errors,
    )
    return {
        "count": len(records),
        "invalid": sum(1 for r in records if not r.ok),
        "entries": [_record_to_dict(r, include_raw=include_raw) for r in records],
    }
