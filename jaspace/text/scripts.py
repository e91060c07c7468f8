"""Unicode script classification for Japanese text.

Responsibilities:
- Classify single code points into Han, Hiragana, Katakana, or Other.
- Share one Script_Extensions character class with the space normalizer.

Script_Extensions (scx) is used instead of Script because it also assigns
shared CJK punctuation such as `、`, `。`, `「` and the prolonged sound mark `ー`
to the Japanese scripts; plain Script reports those as Common.
"""

from __future__ import annotations

from enum import Enum

import regex


JAPANESE_CHAR_CLASS = (
    r"[\p{Script_Extensions=Han}"
    r"\p{Script_Extensions=Hiragana}"
    r"\p{Script_Extensions=Katakana}]"
)


class ScriptClass(str, Enum):
    """Script bucket of a single code point."""

    HAN = "han"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    OTHER = "other"


# Checked in order; a code point shared by several scripts takes the first hit.
_SCRIPT_PATTERNS: tuple[tuple[ScriptClass, regex.Pattern[str]], ...] = (
    (ScriptClass.HAN, regex.compile(r"\p{Script_Extensions=Han}")),
    (ScriptClass.HIRAGANA, regex.compile(r"\p{Script_Extensions=Hiragana}")),
    (ScriptClass.KATAKANA, regex.compile(r"\p{Script_Extensions=Katakana}")),
)
_JAPANESE_CHAR_RE = regex.compile(JAPANESE_CHAR_CLASS)


def _require_single_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"Expected exactly one code point, got {len(char)}: {char!r}.")


def classify_char(char: str) -> ScriptClass:
    """Return the script class of one code point.

    Args:
        char: String holding exactly one code point.

    Raises:
        ValueError: If `char` is empty or longer than one code point.
    """

    _require_single_char(char)
    for script_class, pattern in _SCRIPT_PATTERNS:
        if pattern.fullmatch(char):
            return script_class
    return ScriptClass.OTHER


def is_japanese_char(char: str) -> bool:
    """Return whether one code point belongs to Han, Hiragana, or Katakana (scx)."""

    _require_single_char(char)
    return _JAPANESE_CHAR_RE.fullmatch(char) is not None
