"""Logfmt-style line parsing.

Splits a line into a human message and ``key=value`` attributes.
"""

from __future__ import annotations

from .assembler import MAX_ATTRIBUTES, MESSAGE_KEYS, LogAssembler
from .classifier import Attribute, Token, Word, classify
from .errors import UnclosedString
from .log import Borrowed, Log, Owned, Text, parse
from .tokenizer import Span, iter_tokens, tokenize

__all__ = [
    "MAX_ATTRIBUTES",
    "MESSAGE_KEYS",
    "Attribute",
    "Borrowed",
    "Log",
    "LogAssembler",
    "Owned",
    "Span",
    "Text",
    "Token",
    "UnclosedString",
    "Word",
    "classify",
    "iter_tokens",
    "parse",
    "tokenize",
]
