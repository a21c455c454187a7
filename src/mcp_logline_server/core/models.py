"""Service-level data models for parsed log lines."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .logline import Log, UnclosedString

UNCLOSED_STRING = "unclosed_string"


class KeyValue(BaseModel):
    key: str
    value: str = Field(description="Raw attribute text; quotes are kept.")


class ParsedLine(BaseModel):
    """Normalized record for one input line (or the reason it was rejected)."""

    line_no: int
    message: str
    attributes: list[KeyValue] = Field(default_factory=list)
    message_overridden: bool = False
    raw: str | None = None  # original line, only when requested
    error: str | None = None
    error_offset: int | None = None

    @classmethod
    def from_log(cls, line_no: int, line: str, log: Log, *, include_raw: bool) -> ParsedLine:
        return cls(
            line_no=line_no,
            message=log.message(),
            attributes=[KeyValue(key=k, value=v) for k, v in log.attributes()],
            message_overridden=log.message_overridden,
            raw=line if include_raw else None,
        )

    @classmethod
    def from_error(
        cls, line_no: int, line: str, exc: UnclosedString, *, include_raw: bool
    ) -> ParsedLine:
        return cls(
            line_no=line_no,
            message=line.strip(),
            raw=line if include_raw else None,
            error=UNCLOSED_STRING,
            error_offset=exc.offset,
        )

    @property
    def ok(self) -> bool:
        return self.error is None

    def attribute_map(self) -> dict[str, str]:
        """Return attributes as a dict (insertion order kept)."""
        return {a.key: a.value for a in self.attributes}
