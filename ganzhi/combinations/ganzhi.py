"""The sexagenary cycle: a validated pairing of a stem and a branch.

A :class:`Ganzhi` is stored as a single zero-based ordinal ``g`` in
``[0, 60)``. Its stem is ``Stem(g % 10)`` and its branch is
``Branch(g % 12)``. Because 10 and 12 share the factor 2, a stem and a branch
can only be paired when their ordinals have the same parity (the same
yinyang); of the 120 possible pairs exactly 60 are valid, one per element of
the cycle.

Pairing solves ``g ≡ s (mod 10)`` and ``g ≡ b (mod 12)`` with the closed form
``g = (6s - 5b) mod 60``. Writing it as ``s + 5(s - b)`` and ``b + 6(s - b)``
shows why it holds: ``s - b`` is even, so the correction terms vanish mod 10
and mod 12 respectively.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from ganzhi.core.enums import TextFormat
from ganzhi.core.errors import InvalidCombinationError
from ganzhi.core.types import BRANCH_COUNT, GANZHI_COUNT, STEM_COUNT, Index
from ganzhi.cycles import Branch, Stem

logger = logging.getLogger("ganzhi.combinations")


@dataclass(frozen=True, slots=True, order=True)
class Ganzhi:
    """An element of the 60-element cycle, ordered and compared by ordinal.

    Prefer the factories :meth:`from_index` and :meth:`from_pair`; the
    constructor takes the raw zero-based ordinal and rejects anything outside
    ``[0, 60)``.
    """

    ordinal: int

    def __post_init__(self) -> None:
        if not 0 <= self.ordinal < GANZHI_COUNT:
            raise ValueError(f"ordinal must be in [0, {GANZHI_COUNT}), got {self.ordinal}")

    # ------------------------------------------------------------------
    # Integer views
    # ------------------------------------------------------------------
    @property
    def index(self) -> Index:
        """One-based position in the cycle, e.g. ``1`` for Jiazi and ``60`` for Guihai."""

        return Index(self.ordinal + 1)

    @classmethod
    def from_index(cls, index: int) -> "Ganzhi":
        """Return the element with the given one-based index.

        Every integer is accepted: ``0`` is the 60th element, ``61`` the first,
        ``-2`` the 58th.
        """

        return cls((index - 1) % GANZHI_COUNT)

    @classmethod
    def cycle(cls) -> Tuple["Ganzhi", ...]:
        """All 60 elements in order, starting with Jiazi."""

        return _CYCLE

    # ------------------------------------------------------------------
    # Stem/branch views
    # ------------------------------------------------------------------
    @classmethod
    def from_pair(cls, stem: Stem, branch: Branch) -> "Ganzhi":
        """Combine a stem and a branch.

        Raises:
            InvalidCombinationError: the yinyangs of ``stem`` and ``branch``
                differ, e.g. Jia (yang) with Chou (yin).
            TypeError: ``stem`` is not a :class:`Stem` or ``branch`` is not a
                :class:`Branch`.
        """

        if not isinstance(stem, Stem) or not isinstance(branch, Branch):
            raise TypeError(
                f"from_pair takes a Stem and a Branch, got "
                f"{type(stem).__name__} and {type(branch).__name__}"
            )
        if stem.yinyang is not branch.yinyang:
            logger.debug(
                "Rejected stem/branch pair",
                extra={"stem": stem.name, "branch": branch.name},
            )
            raise InvalidCombinationError(stem, branch)
        return cls((6 * stem.ordinal - 5 * branch.ordinal) % GANZHI_COUNT)

    @property
    def stem(self) -> Stem:
        return Stem(self.ordinal % STEM_COUNT)

    @property
    def branch(self) -> Branch:
        return Branch(self.ordinal % BRANCH_COUNT)

    def decompose(self) -> Tuple[Stem, Branch]:
        """Inverse of :meth:`from_pair`."""

        return self.stem, self.branch

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def next(self, n: int = 1) -> "Ganzhi":
        """Return the element ``n`` steps ahead; negative ``n`` steps backwards."""

        return Ganzhi((self.ordinal + n) % GANZHI_COUNT)

    def add(self, n: int) -> "Ganzhi":
        return self.next(n)

    def subtract(self, n: int) -> "Ganzhi":
        return self.next(-n)

    def difference(self, other: "Ganzhi") -> int:
        """Number of forward steps from ``other`` to ``self``, always in ``[0, 59]``.

        Not symmetric: ``a.difference(b) + b.difference(a)`` is 60 unless
        ``a == b``.
        """

        return (self.ordinal - other.ordinal) % GANZHI_COUNT

    def __add__(self, other: int) -> "Ganzhi":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if isinstance(other, Ganzhi):
            return self.difference(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return self.subtract(other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def format(self, fmt: TextFormat | str | None = None) -> str:
        """Render as pinyin (``"G"``, default, e.g. ``"Yimao"``) or Chinese (``"C"``, ``"乙卯"``)."""

        text_format = TextFormat.parse(fmt)
        return f"{self.stem.format(text_format)}{self.branch.format(text_format).lower()}"

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec)

    def __str__(self) -> str:
        return self.format()


_CYCLE: Tuple[Ganzhi, ...] = tuple(Ganzhi(ordinal) for ordinal in range(GANZHI_COUNT))


__all__ = ["Ganzhi"]
