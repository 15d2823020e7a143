"""The twelve earthly branches (Dizhi)."""
from __future__ import annotations

from .base import CyclicMember


class Branch(CyclicMember):
    """Earthly branch, a member of the 12-element cycle."""

    ZI = 0
    CHOU = 1
    YIN = 2
    MAO = 3
    CHEN = 4
    SI = 5
    WU = 6
    WEI = 7
    SHEN = 8
    YOU = 9
    XU = 10
    HAI = 11

    @classmethod
    def _chinese_names(cls) -> str:
        return "子丑寅卯辰巳午未申酉戌亥"


__all__ = ["Branch"]
