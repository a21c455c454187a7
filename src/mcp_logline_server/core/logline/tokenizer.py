"""Whitespace tokenizer that keeps quoted spans together."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .chars import is_space
from .errors import UnclosedString

QUOTE = '"'


@dataclass(frozen=True, slots=True)
class Span:
    """One token: ``text == line[start:end]``."""

    start: int
    end: int
    text: str


def iter_tokens(line: str) -> Iterator[Span]:
    """Yield whitespace-delimited tokens of ``line`` left to right.

    Every ``"`` toggles the in-quote state, so whitespace between a pair of
    quotes does not end a token. Quote characters stay in the token text.
    Raises UnclosedString as soon as the line ends inside a quoted span.
    """
    pos = 0
    n = len(line)
    while True:
        while pos < n and is_space(line[pos]):
            pos += 1
        if pos >= n:
            return

        start = pos
        in_quote = False
        while pos < n:
            ch = line[pos]
            if ch == QUOTE:
                in_quote = not in_quote
            elif not in_quote and is_space(ch):
                break
            pos += 1

        if in_quote:
            raise UnclosedString(line, start)
        yield Span(start=start, end=pos, text=line[start:pos])


def tokenize(line: str) -> list[Span]:
    """Return all tokens of ``line`` (raises UnclosedString)."""
    return list(iter_tokens(line))
