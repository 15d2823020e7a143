"""Combinations built from the leaf cycles."""

from .ganzhi import Ganzhi
from .stem_or_branch import StemOrBranch

__all__ = ["Ganzhi", "StemOrBranch"]
