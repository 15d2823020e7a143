"""Shared behaviour of the fixed cyclic enumerations.

A :class:`CyclicMember` subclass is an ``Enum`` whose values are the
zero-based ordinals ``0..len(cls) - 1``. Stepping wraps around with the size
of the enumeration as modulus, so ``member.next(n)`` is defined for every
integer ``n``. Members of different subclasses never compare equal and cannot
be ordered against each other.
"""
from __future__ import annotations

from enum import Enum
from typing import TypeVar

from ganzhi.core.enums import TextFormat, Yinyang
from ganzhi.core.types import Index, Ordinal

_C = TypeVar("_C", bound="CyclicMember")


class CyclicMember(Enum):
    """Base class of :class:`~ganzhi.cycles.Stem` and :class:`~ganzhi.cycles.Branch`."""

    @classmethod
    def _chinese_names(cls) -> str:
        """One native-script character per member, in ordinal order."""

        raise NotImplementedError

    # ------------------------------------------------------------------
    # Integer views
    # ------------------------------------------------------------------
    @property
    def ordinal(self) -> Ordinal:
        """Zero-based position in the cycle."""

        return Ordinal(self.value)

    @property
    def index(self) -> Index:
        """One-based position in the cycle (the first member has index 1)."""

        return Index(self.value + 1)

    @classmethod
    def from_index(cls: type[_C], index: int) -> _C:
        """Return the member with the given one-based index, wrapping any integer."""

        return cls((index - 1) % len(cls))

    @classmethod
    def from_ordinal(cls: type[_C], ordinal: int) -> _C:
        """Return the member with the given zero-based ordinal.

        Unlike :meth:`from_index` this does not wrap: ordinals outside
        ``0..len(cls) - 1`` raise ``ValueError``.
        """

        return cls(ordinal)

    @property
    def yinyang(self) -> Yinyang:
        return Yinyang.of_ordinal(self.value)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def next(self: _C, n: int = 1) -> _C:
        """Return the member ``n`` steps ahead; negative ``n`` steps backwards."""

        return type(self)((self.value + n) % len(type(self)))

    def __add__(self: _C, other: int) -> _C:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.next(other)

    def __sub__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return self.next(-other)
        if type(other) is type(self):
            return (self.value - other.value) % len(type(self))
        return NotImplemented

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------
    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def format(self, fmt: TextFormat | str | None = None) -> str:
        """Render as pinyin (``"G"``, default) or Chinese (``"C"``)."""

        if TextFormat.parse(fmt) is TextFormat.CHINESE:
            return self._chinese_names()[self.value]
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.format()
