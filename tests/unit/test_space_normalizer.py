"""Unit tests for Japanese whitespace normalization and detection."""

from __future__ import annotations

import pytest

from jaspace import is_normalizable, normalize
from jaspace.text.normalizer import (
    CollapseWhitespaceRuns,
    RemoveJapaneseSpaces,
    SpaceRemover,
)


SAMPLES = [
    "",
    " ",
    "   ",
    "これ は 日本語 です",
    "Hello 世界 です",
    "Hello  世界 です",
    "Hello  世界",
    "世界  Hello",
    "2024 年 1 月",
    "a    b",
    "a b c",
    "a\tb",
    "これは日本語",
    "これ\tは",
    "日本　語",
    "日本 \t 語",
    "  これ は  ",
    "日本\n語",
    "コーヒー ゼリー",
    "はい、 そうです",
    "ｶﾀｶﾅ ﾃｷｽﾄ",
    "한국 어",
    "日本 😀 語",
    "\ud800 \ud800",
    "あ \ud800",
    "\ud800  あ",
]


def test_normalize_removes_spaces_between_japanese_characters() -> None:
    """Spaces inside Japanese text should disappear entirely."""

    assert normalize("これ は 日本語 です") == "これは日本語です"


def test_normalize_preserves_latin_boundary_space() -> None:
    """A single space next to Latin text should survive."""

    assert normalize("Hello 世界 です") == "Hello 世界です"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello  世界", "Hello 世界"),
        ("世界  Hello", "世界 Hello"),
        ("Hello  世界 です", "Hello 世界です"),
    ],
)
def test_normalize_collapses_double_space_at_script_boundary(text: str, expected: str) -> None:
    """Double spaces at a Japanese/Latin boundary should collapse to one."""

    assert normalize(text) == expected


def test_normalize_preserves_spaces_between_numbers_and_japanese() -> None:
    """Digit/Japanese boundaries are meaningful and stay untouched."""

    assert normalize("2024 年 1 月") == "2024 年 1 月"


def test_normalize_collapses_ascii_runs_without_japanese() -> None:
    """Plain ASCII text should still get multi-space runs collapsed."""

    assert normalize("a    b") == "a b"
    assert normalize("a b c") == "a b c"
    assert normalize("a\tb") == "a\tb"


def test_normalize_empty_string_is_noop() -> None:
    """Empty input should map to empty output."""

    assert normalize("") == ""


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("これ\tは", "これは"),
        ("日本　語", "日本語"),
        ("日本\u00a0語", "日本語"),
        ("日本 \t 語", "日本語"),
        ("日本\n語", "日本語"),
    ],
)
def test_normalize_treats_all_whitespace_alike(text: str, expected: str) -> None:
    """Tabs, ideographic spaces, NBSP, and newlines share one whitespace class."""

    assert normalize(text) == expected


def test_normalize_only_collapses_leading_and_trailing_runs() -> None:
    """Edge runs have a missing neighbor and are never deleted."""

    assert normalize("  これ は  ") == " これは "
    assert normalize(" 日本") == " 日本"
    assert normalize("日本 ") == "日本 "


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("コーヒー ゼリー", "コーヒーゼリー"),
        ("はい、 そうです", "はい、そうです"),
        ("終わり。 次", "終わり。次"),
    ],
)
def test_normalize_counts_shared_cjk_punctuation_as_japanese(text: str, expected: str) -> None:
    """Script_Extensions puts `ー`, `、` and `。` in the Japanese scripts."""

    assert normalize(text) == expected


def test_normalize_handles_halfwidth_katakana() -> None:
    """Halfwidth katakana is Katakana script."""

    assert normalize("ｶﾀｶﾅ ﾃｷｽﾄ") == "ｶﾀｶﾅﾃｷｽﾄ"


@pytest.mark.parametrize("text", ["한국 어", "日本 😀 語", "Ελληνικά 日本"])
def test_normalize_keeps_spaces_next_to_other_scripts(text: str) -> None:
    """Hangul, emoji, and Greek neighbors are not Japanese."""

    assert normalize(text) == text
    assert is_normalizable(text) is False


def test_normalize_treats_lone_surrogates_as_opaque() -> None:
    """Unpaired surrogates match neither whitespace nor any script class."""

    assert normalize("\ud800 \ud800") == "\ud800 \ud800"
    assert normalize("あ \ud800") == "あ \ud800"
    assert normalize("\ud800  あ") == "\ud800 あ"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("これ は", True),
        ("Hello  世界", True),
        ("世界  Hello", True),
        ("a    b", True),
        ("Hello 世界", False),
        ("これは日本語", False),
        ("2024 年 1 月", False),
        ("a\tb", False),
        ("", False),
    ],
)
def test_is_normalizable(text: str, expected: bool) -> None:
    """Detection should flag multi-space runs and inter-Japanese runs only."""

    assert is_normalizable(text) is expected


@pytest.mark.parametrize("text", SAMPLES)
def test_is_normalizable_matches_normalize_outcome(text: str) -> None:
    """Detection is true exactly when normalization changes the text."""

    assert is_normalizable(text) == (normalize(text) != text)


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(text: str) -> None:
    """A second pass should never change already normalized text."""

    once = normalize(text)

    assert normalize(once) == once
    assert is_normalizable(once) is False


def test_space_remover_reports_stage_counts() -> None:
    """The report should count collapsed and removed runs separately."""

    report = SpaceRemover().remove_with_report("Hello  世界 です  と")

    assert report.text == "Hello 世界ですと"
    assert report.collapsed_runs_count == 2
    assert report.removed_runs_count == 2
    assert report.changed is True


def test_space_remover_report_is_unchanged_for_clean_text() -> None:
    """Clean text should yield zero counts."""

    report = SpaceRemover().remove_with_report("Hello 世界")

    assert report.text == "Hello 世界"
    assert report.changed is False


def test_rules_run_independently() -> None:
    """Each rule rewrites only its own kind of run."""

    assert CollapseWhitespaceRuns().apply("これ  は") == ("これ は", 1)
    assert RemoveJapaneseSpaces().apply("Hello  世界") == ("Hello  世界", 0)
    assert RemoveJapaneseSpaces().apply("これ  は") == ("これは", 1)
    assert CollapseWhitespaceRuns().detect("a b") is False
    assert RemoveJapaneseSpaces().detect("これ は") is True
