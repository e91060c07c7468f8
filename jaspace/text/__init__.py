"""Japanese text normalization components.

This package holds the pure, stateless whitespace rules and the script
classification they depend on. Nothing here performs I/O or logging.
"""

from .normalizer import (
    CollapseWhitespaceRuns,
    RemoveJapaneseSpaces,
    SpaceRemovalReport,
    SpaceRemover,
    is_normalizable,
    normalize,
)
from .scripts import ScriptClass, classify_char, is_japanese_char

__all__ = [
    "normalize",
    "is_normalizable",
    "SpaceRemover",
    "SpaceRemovalReport",
    "CollapseWhitespaceRuns",
    "RemoveJapaneseSpaces",
    "ScriptClass",
    "classify_char",
    "is_japanese_char",
]
