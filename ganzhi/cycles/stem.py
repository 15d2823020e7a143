"""The ten heavenly stems (Tiangan)."""
from __future__ import annotations

from .base import CyclicMember


class Stem(CyclicMember):
    """Heavenly stem, a member of the 10-element cycle."""

    JIA = 0
    YI = 1
    BING = 2
    DING = 3
    WU = 4
    JI = 5
    GENG = 6
    XIN = 7
    REN = 8
    GUI = 9

    @classmethod
    def _chinese_names(cls) -> str:
        return "甲乙丙丁戊己庚辛壬癸"


__all__ = ["Stem"]
