"""Shared parsing helpers for config and environment value normalization."""

from __future__ import annotations

from collections.abc import Iterable


_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})
BOOLEAN_TOKENS_HINT = "(`true`/`false`, `1`/`0`, `yes`/`no`, `on`/`off`)"


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as a stripped string, or `None` when it is missing or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a boolean token and return `None` for anything unrecognized."""

    if isinstance(value, bool):
        return value

    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def parse_name_list(value: object) -> tuple[str, ...] | None:
    """Parse a comma-separated string or a sequence into lower-cased unique names.

    Args:
        value: `"highlight, underline"` or `["highlight", "underline"]`.

    Returns:
        Names in first-seen order, or `None` when the value holds no names.

    Raises:
        ValueError: If `value` is neither a string nor an iterable of strings.
    """

    if value is None:
        return None
    if isinstance(value, str):
        raw_items: Iterable[object] = value.split(",")
    elif isinstance(value, (list, tuple, set, frozenset)):
        raw_items = value
    else:
        raise ValueError("expected a comma-separated string or a list of names")

    names: list[str] = []
    for item in raw_items:
        name = normalize_optional_string(item)
        if name is None:
            continue
        lowered = name.lower()
        if lowered not in names:
            names.append(lowered)
    return tuple(names) or None
