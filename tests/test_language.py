"""Tests for the Chinese/Latin target classifier."""

import pytest

from tmt_translate.language import (
    TARGET_CHINESE,
    TARGET_ENGLISH,
    choose_target,
    count_languages,
    is_chinese,
)


@pytest.mark.parametrize("text", ["hello", "Hello World", "abc", "x"])
def test_ascii_text_translates_to_chinese(text):
    assert choose_target(text) == TARGET_CHINESE


@pytest.mark.parametrize("text", ["你好", "中文翻译", "\u3400", "\U00020000", "\uf900", "\U0002f800"])
def test_cjk_text_translates_to_english(text):
    assert choose_target(text) == TARGET_ENGLISH


def test_tie_falls_back_to_chinese():
    # equal counts keep the non-strict default
    assert count_languages("ab你好") == count_languages("你a好b")
    assert choose_target("ab你好") == TARGET_CHINESE


def test_counts_ascii_punctuation_and_ignores_other_scripts():
    counts = count_languages("你好, мир！")
    assert counts.chinese == 2
    # "," and " " are ASCII; Cyrillic and the full-width "！" are ignored
    assert counts.latin == 2


def test_empty_text_translates_to_chinese():
    assert choose_target("") == TARGET_CHINESE


@pytest.mark.parametrize(
    "ch,expected",
    [
        ("\u4e00", True),
        ("\u9fff", True),
        ("\u4dbf", True),
        ("\U0002a6df", True),
        ("\U0002a700", True),
        ("\U0002b81f", True),
        ("\U0002ceaf", True),
        ("\U0002fa1f", True),
        ("あ", False),  # hiragana
        ("가", False),  # hangul
        ("a", False),
    ],
)
def test_is_chinese_range_boundaries(ch, expected):
    assert is_chinese(ch) is expected
