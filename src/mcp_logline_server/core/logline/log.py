"""Parsed log line record and the ``parse`` entry point."""

from __future__ import annotations

from dataclasses import dataclass

from .assembler import LogAssembler
from .classifier import classify
from .tokenizer import iter_tokens


@dataclass(frozen=True, slots=True)
class Borrowed:
    """Message reused as-is from the input line."""

    source: str

    def __str__(self) -> str:
        return self.source


@dataclass(frozen=True, slots=True)
class Owned:
    """Message assembled from words or set by a message attribute."""

    value: str

    def __str__(self) -> str:
        return self.value


Text = Borrowed | Owned


@dataclass(frozen=True, slots=True)
class Log:
    """Structured form of one line: a message plus ordered attributes."""

    text: Text
    pairs: tuple[tuple[str, str], ...]
    message_overridden: bool = False

    def message(self) -> str:
        return str(self.text)

    def attributes(self) -> tuple[tuple[str, str], ...]:
        return self.pairs

    @property
    def borrowed(self) -> bool:
        return isinstance(self.text, Borrowed)

    @classmethod
    def parse(cls, line: str) -> Log:
        return parse(line)


def parse(line: str) -> Log:
    """Parse one logfmt-style line.

    Raises UnclosedString when a quote is left open; nothing else is an error.
    When no word or message attribute contributed text, the message is the
    input line itself.
    """
    assembler = LogAssembler()
    for span in iter_tokens(line):
        assembler.add(classify(span.text), span.text)

    built = assembler.message_text()
    text: Text = Owned(built) if built else Borrowed(line)
    return Log(
        text=text,
        pairs=assembler.attributes(),
        message_overridden=assembler.overridden,
    )
