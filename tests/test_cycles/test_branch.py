from __future__ import annotations

import pytest

from ganzhi.core.enums import Yinyang
from ganzhi.cycles import Branch, Stem


def test_branch_should_expose_ordinal_and_index() -> None:
    assert [branch.ordinal for branch in Branch] == list(range(12))
    assert Branch.ZI.index == 1
    assert Branch.HAI.index == 12


def test_branch_from_index_should_wrap_any_integer() -> None:
    assert Branch.from_index(0) is Branch.HAI
    assert Branch.from_index(13) is Branch.ZI
    assert Branch.from_index(-1) is Branch.XU
    for i in range(-50, 50):
        assert Branch.from_index(i) is Branch.from_index(i - 12)


def test_branch_next_and_operators_should_agree() -> None:
    for branch in Branch:
        assert branch.next(123) is branch + 123
        assert branch.next(-123) is branch - 123
    assert Branch.HAI.next() is Branch.ZI


def test_branch_difference_should_wrap_at_twelve() -> None:
    assert Branch.ZI - Branch.HAI == 1
    assert Branch.HAI - Branch.ZI == 11


def test_branch_yinyang_should_alternate() -> None:
    assert Branch.ZI.yinyang is Yinyang.YANG
    assert Branch.CHOU.yinyang is Yinyang.YIN
    assert Branch.HAI.yinyang is Yinyang.YIN


@pytest.mark.parametrize(
    ("branch", "pinyin", "chinese"),
    [
        (Branch.ZI, "Zi", "子"),
        (Branch.MAO, "Mao", "卯"),
        (Branch.SHEN, "Shen", "申"),
        (Branch.HAI, "Hai", "亥"),
    ],
)
def test_branch_format_should_render_both_scripts(branch: Branch, pinyin: str, chinese: str) -> None:
    assert str(branch) == pinyin
    assert branch.format("C") == chinese


def test_branch_subtracting_a_stem_should_be_unsupported() -> None:
    with pytest.raises(TypeError):
        _ = Branch.ZI - Stem.JIA
