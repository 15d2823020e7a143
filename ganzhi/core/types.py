"""Shared type aliases for readability and contract enforcement.

Cycle values expose two different integer views: a zero-based ordinal used
for arithmetic and a one-based index used by people ("Jiazi is the 1st").
Keeping them apart as named types reduces the risk of off-by-one mixups.
"""
from __future__ import annotations

from typing import NewType

Ordinal = NewType("Ordinal", int)
Index = NewType("Index", int)

STEM_COUNT = 10
BRANCH_COUNT = 12
GANZHI_COUNT = 60
