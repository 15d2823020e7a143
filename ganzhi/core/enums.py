"""Enumerations shared across the cycle types.

They live in the core package so that the leaf cycles, the combinations and
the configuration models can import them without circular dependencies.
"""
from __future__ import annotations

from enum import Enum

from .errors import UnsupportedFormatError


class TextFormat(str, Enum):
    """Text renderings supported by every cycle value."""

    PINYIN = "G"  # e.g. "Jiazi"
    CHINESE = "C"  # e.g. "甲子"

    @classmethod
    def parse(cls, fmt: "TextFormat | str | None") -> "TextFormat":
        """Resolve a format code, ``None`` and ``""`` meaning :attr:`PINYIN`."""

        if fmt is None or fmt == "":
            return cls.PINYIN
        if isinstance(fmt, cls):
            return fmt
        try:
            return cls(fmt)
        except ValueError:
            raise UnsupportedFormatError(fmt) from None


class Yinyang(str, Enum):
    """Parity of a cycle value: even ordinals are yang, odd ones are yin."""

    YANG = "yang"
    YIN = "yin"

    @classmethod
    def of_ordinal(cls, ordinal: int) -> "Yinyang":
        return cls.YANG if ordinal % 2 == 0 else cls.YIN
