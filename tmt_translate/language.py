"""Heuristic Chinese/Latin language detection for picking a translation target."""

from __future__ import annotations

from dataclasses import dataclass

TARGET_ENGLISH = "en"
TARGET_CHINESE = "zh"

# CJK Unified Ideographs and their extension/compatibility blocks.
CJK_RANGES: tuple[tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),  # 常用汉字
    (0x3400, 0x4DBF),  # 扩展A区
    (0x20000, 0x2A6DF),  # 扩展B区
    (0x2A700, 0x2B73F),  # 扩展C区
    (0x2B740, 0x2B81F),  # 扩展D区
    (0x2B820, 0x2CEAF),  # 扩展E区
    (0xF900, 0xFAFF),  # 兼容汉字
    (0x2F800, 0x2FA1F),  # 兼容汉字扩展
)


@dataclass(frozen=True, slots=True)
class LanguageCounts:
    chinese: int
    latin: int


def is_chinese(ch: str) -> bool:
    code = ord(ch)
    return any(start <= code <= end for start, end in CJK_RANGES)


def count_languages(text: str) -> LanguageCounts:
    """Tally ASCII and CJK characters; anything else is ignored."""
    chinese = 0
    latin = 0
    for ch in text:
        if ch.isascii():
            latin += 1
        elif is_chinese(ch):
            chinese += 1
    return LanguageCounts(chinese=chinese, latin=latin)


def choose_target(text: str) -> str:
    """Return ``"en"`` for mostly-Chinese text, otherwise ``"zh"``.

    Only a strict Chinese majority selects English; equal counts fall
    through to Chinese.
    """
    counts = count_languages(text)
    if counts.chinese > counts.latin:
        return TARGET_ENGLISH
    return TARGET_CHINESE
