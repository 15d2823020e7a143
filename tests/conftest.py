from __future__ import annotations

import logging
import random
from pathlib import Path
from textwrap import dedent
from typing import Callable, Iterator

import pytest

from ganzhi.cycles import Branch, Stem


@pytest.fixture(scope="session")
def valid_pairs() -> list[tuple[Stem, Branch]]:
    return [(s, b) for s in Stem for b in Branch if s.ordinal % 2 == b.ordinal % 2]


@pytest.fixture(scope="session")
def invalid_pairs() -> list[tuple[Stem, Branch]]:
    return [(s, b) for s in Stem for b in Branch if s.ordinal % 2 != b.ordinal % 2]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240101)


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo configure_logging so handlers and propagation do not leak between tests."""

    yield
    logger = logging.getLogger("ganzhi")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
