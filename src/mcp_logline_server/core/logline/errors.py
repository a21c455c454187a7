"""Parse errors for logfmt-style lines."""

from __future__ import annotations


class UnclosedString(ValueError):
    """A quoted span was opened and never closed before the end of the line.

    ``offset`` is the code-point index where the offending token starts.
    """

    def __init__(self, line: str, offset: int) -> None:
        self.line = line
        self.offset = offset
        super().__init__(f"unclosed string in token starting at offset {offset}")
