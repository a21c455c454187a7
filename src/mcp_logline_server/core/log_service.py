"""Log loading and line parsing utilities.

This module is the main integration point that reads log files and returns parsed records.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .logline import UnclosedString, parse
from .models import ParsedLine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a log file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


def parse_line(line_no: int, line: str, *, include_raw: bool = True) -> ParsedLine:
    """Parse one line; an unclosed quote becomes an error record."""
    try:
        log = parse(line)
    except UnclosedString as exc:
        logger.warning("Line %s: unclosed string at offset %s", line_no, exc.offset)
        return ParsedLine.from_error(line_no, line, exc, include_raw=include_raw)
    return ParsedLine.from_log(line_no, line, log, include_raw=include_raw)


def _check_limit(limit: int | None) -> None:
    if limit is not None and limit < 1:
        raise ValueError("limit must be >= 1")


def parse_lines(
    lines: Iterable[str],
    *,
    contains: str | None = None,
    limit: int | None = None,
    skip_invalid: bool = False,
    include_raw: bool = True,
) -> Iterator[ParsedLine]:
    """Synchronous counterpart of iter_parsed for in-memory lines (e.g. stdin)."""
    _check_limit(limit)
    count = 0
    for line_no, line in enumerate(lines, start=1):
        record = _process(
            line_no,
            line,
            contains=contains,
            skip_invalid=skip_invalid,
            include_raw=include_raw,
        )
        if record is None:
            continue
        yield record
        count += 1
        if limit is not None and count >= limit:
            return


def _process(
    line_no: int,
    line: str,
    *,
    contains: str | None,
    skip_invalid: bool,
    include_raw: bool,
) -> ParsedLine | None:
    line = line.rstrip("\r\n")
    if not line.strip():
        return None
    if contains is not None and contains not in line:
        return None
    record = parse_line(line_no, line, include_raw=include_raw)
    if skip_invalid and not record.ok:
        return None
    return record


async def iter_parsed(
    log_path: str | Path,
    *,
    contains: str | None = None,
    limit: int | None = None,
    skip_invalid: bool = False,
    include_raw: bool = True,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
) -> AsyncIterator[ParsedLine]:
    """Yield a ParsedLine for every non-blank line of a log file."""
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"Log file not found: {path}")
    _check_limit(limit)

    logger.debug("Parsing %s (encoding=%s)", path, encoding)
    count = 0
    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        async for line_no, line in _enumerate_async(f, start=1):
            record = _process(
                line_no,
                line,
                contains=contains,
                skip_invalid=skip_invalid,
                include_raw=include_raw,
            )
            if record is None:
                continue
            yield record
            count += 1
            if limit is not None and count >= limit:
                return


async def get_parsed(
    log_path: str | Path,
    **iter_kwargs,
) -> list[ParsedLine]:
    """Collect iter_parsed into a list."""
    return [record async for record in iter_parsed(log_path, **iter_kwargs)]


async def _enumerate_async(iterable, start: int = 0):
    """Async enumerate helper for async iterators."""
    index = start
    async for item in iterable:
        yield index, item
        index += 1
