"""A value holding either a stem or a branch.

:class:`StemOrBranch` lets stepping and formatting work on whichever leaf
cycle is held without ever mixing the two. Internally the held value is
packed into one integer key: a stem keeps its ordinal, a branch has the tag
bit ``0x10`` OR-ed into its ordinal. Equality, ordering and hashing use that
key, which gives the ordering convention:

* every stem sorts before every branch;
* within a kind, values sort by ordinal;
* a stem and a branch with the same raw ordinal are never equal.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from ganzhi.core.enums import TextFormat
from ganzhi.core.errors import InvalidCastError
from ganzhi.cycles import Branch, Stem

logger = logging.getLogger("ganzhi.combinations")

_BRANCH_TAG = 0x10


@dataclass(frozen=True, slots=True, order=True, init=False, repr=False)
class StemOrBranch:
    """Immutable tagged union over :class:`Stem` and :class:`Branch`."""

    _key: int = field(init=False)

    def __init__(self, value: Union[Stem, Branch]) -> None:
        match value:
            case Stem():
                key = value.ordinal
            case Branch():
                key = value.ordinal | _BRANCH_TAG
            case _:
                raise TypeError(
                    f"StemOrBranch holds a Stem or a Branch, got {type(value).__name__}"
                )
        object.__setattr__(self, "_key", key)

    def __reduce__(self):
        return type(self), (self.value,)

    @classmethod
    def of(cls, value: Union["StemOrBranch", Stem, Branch]) -> "StemOrBranch":
        """Wrap ``value`` unless it already is a :class:`StemOrBranch`."""

        if isinstance(value, cls):
            return value
        return cls(value)

    # ------------------------------------------------------------------
    # Narrowing
    # ------------------------------------------------------------------
    @property
    def is_stem(self) -> bool:
        return not self._key & _BRANCH_TAG

    @property
    def is_branch(self) -> bool:
        return bool(self._key & _BRANCH_TAG)

    @property
    def value(self) -> Union[Stem, Branch]:
        """The held stem or branch."""

        if self.is_branch:
            return Branch(self._key & ~_BRANCH_TAG)
        return Stem(self._key)

    def try_as_stem(self) -> Tuple[bool, Optional[Stem]]:
        """Return ``(True, stem)`` when a stem is held, otherwise ``(False, None)``."""

        if self.is_stem:
            return True, Stem(self._key)
        return False, None

    def try_as_branch(self) -> Tuple[bool, Optional[Branch]]:
        """Return ``(True, branch)`` when a branch is held, otherwise ``(False, None)``."""

        if self.is_branch:
            return True, Branch(self._key & ~_BRANCH_TAG)
        return False, None

    def try_as_stem_or_branch(self) -> Tuple[bool, Optional[Stem], Optional[Branch]]:
        """Decode in a single dispatch.

        Returns ``(True, stem, None)`` when a stem is held and
        ``(False, None, branch)`` when a branch is held: the stem slot is
        filled if and only if the flag is ``True``, the branch slot if and
        only if it is ``False``.
        """

        match self.value:
            case Stem() as stem:
                return True, stem, None
            case branch:
                return False, None, branch

    def as_stem(self) -> Stem:
        """Return the held stem.

        Raises:
            InvalidCastError: a branch is held.
        """

        ok, stem = self.try_as_stem()
        if not ok:
            logger.debug("Rejected narrowing to Stem", extra={"held": repr(self)})
            raise InvalidCastError(
                f"{self!r} holds a Branch, so it cannot be converted to a Stem."
            )
        return stem

    def as_branch(self) -> Branch:
        """Return the held branch.

        Raises:
            InvalidCastError: a stem is held.
        """

        ok, branch = self.try_as_branch()
        if not ok:
            logger.debug("Rejected narrowing to Branch", extra={"held": repr(self)})
            raise InvalidCastError(
                f"{self!r} holds a Stem, so it cannot be converted to a Branch."
            )
        return branch

    # ------------------------------------------------------------------
    # Arithmetic, re-wrapped in the same kind
    # ------------------------------------------------------------------
    def next(self, n: int = 1) -> "StemOrBranch":
        return StemOrBranch(self.value.next(n))

    def add(self, n: int) -> "StemOrBranch":
        return StemOrBranch(self.value + n)

    def subtract(self, n: int) -> "StemOrBranch":
        return StemOrBranch(self.value - n)

    def __add__(self, other: int) -> "StemOrBranch":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: int) -> "StemOrBranch":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.subtract(other)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def format(self, fmt: TextFormat | str | None = None) -> str:
        return self.value.format(fmt)

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        value = self.value
        return f"StemOrBranch({type(value).__name__}.{value.name})"


__all__ = ["StemOrBranch"]
