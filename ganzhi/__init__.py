"""Sexagenary (Ganzhi) cycle arithmetic.

The package exposes the leaf cycles (:class:`Stem`, :class:`Branch`), their
60-element combination (:class:`Ganzhi`) and a tagged union over the two
leaf cycles (:class:`StemOrBranch`). Configuration, logging and the command
line entry point live in their own subpackages.
"""

from .combinations import Ganzhi, StemOrBranch
from .core.enums import TextFormat, Yinyang
from .core.errors import (
    ConfigurationError,
    GanzhiError,
    InvalidCastError,
    InvalidCombinationError,
    UnsupportedFormatError,
)
from .cycles import Branch, Stem

__all__ = [
    "Branch",
    "ConfigurationError",
    "Ganzhi",
    "GanzhiError",
    "InvalidCastError",
    "InvalidCombinationError",
    "Stem",
    "StemOrBranch",
    "TextFormat",
    "UnsupportedFormatError",
    "Yinyang",
]
