"""Error hierarchy shared by the cycle types.

Every failure in this package is a direct function of the caller's input, so
the classes below only describe *what* was wrong. They double as the matching
builtin exception (``ValueError``/``TypeError``) so callers that do not know
about :class:`GanzhiError` still catch them in the usual way.
"""
from __future__ import annotations

from typing import Any


class GanzhiError(Exception):
    """Base class for all custom exceptions in the package."""


class InvalidCombinationError(GanzhiError, ValueError):
    """Raised when a stem and a branch of different yinyang are paired."""

    def __init__(self, stem: Any, branch: Any) -> None:
        self.stem = stem
        self.branch = branch
        super().__init__(
            f"The yinyangs of the stem {stem} and the branch {branch} do not match."
        )


class InvalidCastError(GanzhiError, TypeError):
    """Raised when a stem-or-branch value is narrowed to the kind it does not hold."""


class UnsupportedFormatError(GanzhiError, ValueError):
    """Raised for text format codes other than ``"G"`` and ``"C"``."""

    def __init__(self, fmt: Any) -> None:
        self.fmt = fmt
        super().__init__(f"The format {fmt!r} is not supported, use 'G' or 'C'.")


class ConfigurationError(GanzhiError):
    """Raised when configuration files are missing or invalid."""


__all__ = [
    "ConfigurationError",
    "GanzhiError",
    "InvalidCastError",
    "InvalidCombinationError",
    "UnsupportedFormatError",
]
