"""Leaf cycles: the 10 stems and the 12 branches."""

from .base import CyclicMember
from .branch import Branch
from .stem import Stem

__all__ = ["Branch", "CyclicMember", "Stem"]
