"""Unicode character classes shared by the tokenizer and classifier.

Whitespace is the Unicode White_Space property and key characters are
Alphabetic or Numeric; ``str.isspace``/``str.isalnum`` disagree with both.
"""

from __future__ import annotations

import regex

_WHITESPACE_RE = regex.compile(r"\p{White_Space}")
_TRIM_RE = regex.compile(r"^\p{White_Space}+|\p{White_Space}+$")
_KEY_RE = regex.compile(r'[\p{Alphabetic}\p{N}._\-"]*')


def is_space(ch: str) -> bool:
    return _WHITESPACE_RE.match(ch) is not None


def trim(text: str) -> str:
    """Strip leading and trailing White_Space characters."""
    return _TRIM_RE.sub("", text)


def valid_key_chars(key: str) -> bool:
    return _KEY_RE.fullmatch(key) is not None
