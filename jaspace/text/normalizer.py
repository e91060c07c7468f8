"""Japanese whitespace normalization.

Responsibilities:
- Collapse runs of two or more whitespace characters to one ASCII space.
- Delete whitespace runs whose both neighbors are Japanese (scx Han/Hiragana/Katakana).
- Detect whether normalization would change a string without rewriting it.

Rules run in a fixed order: collapsing first guarantees that no run of two or
more spaces survives next to a Japanese/non-Japanese boundary. All patterns
are compiled once at import and never mutated, so the public functions are
safe to call from any number of threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import regex

from .scripts import JAPANESE_CHAR_CLASS


class SpaceRule(Protocol):
    """Protocol for one whitespace rewrite stage."""

    def apply(self, text: str) -> tuple[str, int]:
        """Return rewritten text and the number of whitespace runs rewritten."""

    def detect(self, text: str) -> bool:
        """Return whether `apply` would rewrite at least one run."""


class CollapseWhitespaceRuns:
    """Replace every run of 2+ whitespace characters with a single space."""

    _RUN_RE = regex.compile(r"\s{2,}")

    def apply(self, text: str) -> tuple[str, int]:
        """Collapse multi-character whitespace runs."""

        return self._RUN_RE.subn(" ", text)

    def detect(self, text: str) -> bool:
        """Return whether any multi-character whitespace run exists."""

        return self._RUN_RE.search(text) is not None


class RemoveJapaneseSpaces:
    """Delete whitespace runs sitting between two Japanese characters.

    Neighbors are matched with lookaround, so only the run itself is removed.
    """

    _JAPANESE_SPACE_RE = regex.compile(
        rf"(?<={JAPANESE_CHAR_CLASS})\s+(?={JAPANESE_CHAR_CLASS})"
    )

    def apply(self, text: str) -> tuple[str, int]:
        """Remove inter-Japanese whitespace runs."""

        return self._JAPANESE_SPACE_RE.subn("", text)

    def detect(self, text: str) -> bool:
        """Return whether any whitespace run has Japanese neighbors on both sides."""

        return self._JAPANESE_SPACE_RE.search(text) is not None


@dataclass(frozen=True, slots=True)
class SpaceRemovalReport:
    """Result of one normalization pass.

    Attributes:
        text: Normalized text.
        collapsed_runs_count: Multi-character runs collapsed to one space.
        removed_runs_count: Runs deleted between Japanese characters.
    """

    text: str
    collapsed_runs_count: int
    removed_runs_count: int

    @property
    def changed(self) -> bool:
        """Return whether any rule rewrote the input."""

        return self.collapsed_runs_count > 0 or self.removed_runs_count > 0


class SpaceRemover:
    """Run the collapse and removal rules in their required order."""

    def __init__(self) -> None:
        """Bind the stateless rule instances."""

        self._collapse = CollapseWhitespaceRuns()
        self._remove = RemoveJapaneseSpaces()

    def remove_with_report(self, text: str) -> SpaceRemovalReport:
        """Normalize text and return counts for each stage."""

        collapsed, collapsed_count = self._collapse.apply(text)
        cleaned, removed_count = self._remove.apply(collapsed)
        return SpaceRemovalReport(
            text=cleaned,
            collapsed_runs_count=collapsed_count,
            removed_runs_count=removed_count,
        )

    def remove(self, text: str) -> str:
        """Return normalized text."""

        return self.remove_with_report(text).text

    def is_removable(self, text: str) -> bool:
        """Return whether `remove` would change the text.

        A single whitespace character between Japanese characters is the same
        run before and after collapsing, so checking the raw input is exact.
        """

        return self._collapse.detect(text) or self._remove.detect(text)


_DEFAULT_REMOVER = SpaceRemover()


def normalize(text: str) -> str:
    """Remove meaningless whitespace from Japanese text.

    Examples:
        >>> normalize("これ は 日本語 です")
        'これは日本語です'
        >>> normalize("Hello  世界 です")
        'Hello 世界です'
        >>> normalize("2024 年 1 月")
        '2024 年 1 月'
    """

    return _DEFAULT_REMOVER.remove(text)


def is_normalizable(text: str) -> bool:
    """Return whether `normalize(text)` differs from `text`."""

    return _DEFAULT_REMOVER.is_removable(text)
