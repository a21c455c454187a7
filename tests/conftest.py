from __future__ import annotations

import gzip
from collections.abc import Callable
from pathlib import Path

import pytest

LOGFMT_LINES = [
    "service started version=1.4.2",
    'request handled path=/api status=200 msg="GET /api"',
    'broken value="oops',
    "",
    "cache warm items=1200",
]


@pytest.fixture
def write_logfmt_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text("\n".join(LOGFMT_LINES) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def write_gz_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        with gzip.open(path, mode="wt", encoding="utf-8") as f:
            f.write("\n".join(LOGFMT_LINES) + "\n")

    return _write


@pytest.fixture
def many_attributes() -> Callable[[int], str]:
    def _build(n: int) -> str:
        return " ".join(f"k{i}=v{i}" for i in range(n))

    return _build
