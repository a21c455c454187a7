from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from mcp_logline_server.core.config import resolve_service_config
from mcp_logline_server.core.log_service import get_parsed, parse_lines
from mcp_logline_server.core.models import ParsedLine


def _positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be an integer") from e
    if value < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return value


def _format_record(record: ParsedLine) -> str:
    if not record.ok:
        return f"{record.line_no} !{record.error}@{record.error_offset} {record.message}"
    attrs = " ".join(f"{a.key}={a.value}" for a in record.attributes)
    return f"{record.line_no} {record.message}" + (f" | {attrs}" if attrs else "")


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Split logfmt-style lines into message and attributes.")
    p.add_argument("log_path", help="Log file (plain or .gz), or '-' for stdin")
    p.add_argument("--contains", default=None, help="Only parse lines containing this substring")
    p.add_argument("--max", dest="max_results", type=_positive_int, default=None, help="Max records (default: no cap)")
    p.add_argument("--skip-invalid", action="store_true", help="Drop lines with an unclosed quote")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print one JSON object per record")
    p.add_argument("--raw", dest="include_raw", action="store_true", help="Include raw line in results")
    p.add_argument("--no-raw", dest="include_raw", action="store_false", help="Exclude raw line from results")
    p.set_defaults(include_raw=False)
    return p


def main(argv: Sequence[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    options = {
        "contains": args.contains,
        "limit": args.max_results,
        "skip_invalid": args.skip_invalid,
        "include_raw": args.include_raw,
    }

    try:
        if args.log_path == "-":
            records = list(parse_lines(sys.stdin, **options))
        else:
            cfg = resolve_service_config()
            records = asyncio.run(
                get_parsed(
                    Path(args.log_path),
                    encoding=cfg.encoding,
                    decode_errors=cfg.decode_errors,
                    **options,
                )
            )
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    for record in records:
        if args.as_json:
            print(json.dumps(record.model_dump(exclude_none=True)))
        else:
            print(_format_record(record))

    invalid = sum(1 for r in records if not r.ok)
    print(f"\nParsed {len(records)} lines ({invalid} invalid).", file=sys.stderr)


if __name__ == "__main__":
    main()
