"""Decide whether a token is a plain word or a ``key=value`` attribute."""

from __future__ import annotations

from dataclasses import dataclass

from .chars import trim, valid_key_chars
from .tokenizer import QUOTE

KEY_MAX_LENGTH = 50
VALUE_MAX_LENGTH = 100
# Room for the wrapping quote pair.
QUOTED_ALLOWANCE = 2


@dataclass(frozen=True, slots=True)
class Word:
    """Token text that is not a valid attribute."""

    text: str


@dataclass(frozen=True, slots=True)
class Attribute:
    """A validated key/value pair, both sides trimmed."""

    key: str
    value: str


Token = Word | Attribute


def _valid_side(text: str, max_length: int) -> bool:
    """Check length and quote placement shared by keys and values."""
    quoted = text.startswith(QUOTE)
    limit = max_length + QUOTED_ALLOWANCE if quoted else max_length
    if len(text) > limit:
        return False
    if QUOTE in text[1:-1]:
        return False
    return quoted == text.endswith(QUOTE)


def valid_key(key: str) -> bool:
    if not _valid_side(key, KEY_MAX_LENGTH):
        return False
    return valid_key_chars(key)


def valid_value(value: str) -> bool:
    return _valid_side(value, VALUE_MAX_LENGTH)


def classify(token: str) -> Token:
    """Classify a single token.

    The token is split on its first ``=``. Malformed attribute-shaped text is
    returned as a Word holding the original, unsplit token.
    """
    key, sep, value = token.partition("=")
    if not sep:
        return Word(token)

    key = trim(key)
    value = trim(value)
    if not (valid_key(key) and valid_value(value)):
        return Word(token)
    return Attribute(key=key, value=value)
