"""Shared pytest fixtures for the jaspace test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


SAMPLE_EXPORT_ITEMS: list[dict[str, object]] = [
    {
        "key": "A1",
        "annotationType": "highlight",
        "annotationText": "これ は 日本語 です",
        "annotationColor": "#ffd400",
    },
    {
        "key": "A2",
        "annotationType": "highlight",
        "annotationText": "Hello 世界",
    },
    {
        "key": "A3",
        "annotationType": "note",
        "annotationText": "メモ です",
    },
    {
        "key": "A4",
        "annotationType": "underline",
        "annotationText": "",
    },
]


@pytest.fixture
def annotation_export_path(tmp_path: Path) -> Path:
    """Write a small Zotero-style annotation export and return its path."""

    path = tmp_path / "annotations.json"
    path.write_text(json.dumps(SAMPLE_EXPORT_ITEMS, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_jaspace_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `JASPACE_*` variables from leaking into config resolution."""

    for key in (
        "JASPACE_ANNOTATION_TYPES",
        "JASPACE_PER_LINE",
        "JASPACE_ENCODING",
        "JASPACE_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
