"""Build the message and attribute list from a token stream."""

from __future__ import annotations

from .classifier import Token, Word

MAX_ATTRIBUTES = 25
MESSAGE_KEYS = frozenset({"msg", "message", '"msg"', '"message"'})


class LogAssembler:
    """Accumulate tokens of one line.

    Attributes live in a dict so that updating an existing key keeps its
    position. Once a message key has been seen, plain words are dropped.
    """

    __slots__ = ("_parts", "_attributes", "_overridden")

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._attributes: dict[str, str] = {}
        self._overridden = False

    @property
    def overridden(self) -> bool:
        return self._overridden

    def add(self, token: Token, raw: str) -> None:
        """Feed one classified token; ``raw`` is its original text."""
        # Capacity is checked on length alone, even for keys already present.
        if isinstance(token, Word) or len(self._attributes) >= MAX_ATTRIBUTES:
            if not self._overridden:
                self._parts.append(raw)
            return

        if token.key in MESSAGE_KEYS:
            self._parts = [token.value]
            self._overridden = True
            return
        self._attributes[token.key] = token.value

    def message_text(self) -> str:
        return " ".join(self._parts)

    def attributes(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._attributes.items())
