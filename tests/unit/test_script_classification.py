"""Unit tests for Script_Extensions-based code point classification."""

from __future__ import annotations

import pytest

from jaspace.text.scripts import ScriptClass, classify_char, is_japanese_char


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("漢", ScriptClass.HAN),
        ("々", ScriptClass.HAN),
        ("あ", ScriptClass.HIRAGANA),
        ("カ", ScriptClass.KATAKANA),
        ("ｶ", ScriptClass.KATAKANA),
        ("A", ScriptClass.OTHER),
        ("1", ScriptClass.OTHER),
        (" ", ScriptClass.OTHER),
        ("한", ScriptClass.OTHER),
        ("\ud800", ScriptClass.OTHER),
    ],
)
def test_classify_char(char: str, expected: ScriptClass) -> None:
    """Classification should follow the Unicode script tables."""

    assert classify_char(char) is expected


def test_classify_char_resolves_shared_characters_in_fixed_order() -> None:
    """Characters shared across scripts take the first of Han, Hiragana, Katakana."""

    assert classify_char("ー") is ScriptClass.HIRAGANA
    assert classify_char("、") is ScriptClass.HAN


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("、", True),
        ("。", True),
        ("ー", True),
        ("ア", True),
        (",", False),
        (".", False),
    ],
)
def test_is_japanese_char_uses_script_extensions(char: str, expected: bool) -> None:
    """Shared CJK punctuation counts as Japanese; ASCII punctuation does not."""

    assert is_japanese_char(char) is expected


@pytest.mark.parametrize("value", ["", "ab", "日本"])
def test_classification_rejects_non_single_code_points(value: str) -> None:
    """Classification is defined for exactly one code point."""

    with pytest.raises(ValueError, match="exactly one code point"):
        classify_char(value)
    with pytest.raises(ValueError, match="exactly one code point"):
        is_japanese_char(value)
