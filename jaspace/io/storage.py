"""Filesystem storage for text files and annotation exports.

Responsibilities:
- Read and write plain text with an explicit encoding.
- Parse annotation exports into `Annotation` records and serialize them back,
  keeping every field the normalizer does not touch.

Accepted export shapes are a bare JSON list of annotation objects or an object
with an `annotations` list. Field names follow either the Zotero item layout
(`key`, `annotationType`, `annotationText`) or the short form (`id`/`key`,
`type`, `text`).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from ..models.datatypes import Annotation, AnnotationExport


_KEY_FIELDS = ("key", "id")
_TYPE_FIELDS = ("annotationType", "type")
_TEXT_FIELDS = ("annotationText", "text")


def _first_present(payload: Mapping[str, Any], names: tuple[str, ...]) -> str | None:
    """Return the first field name of `names` present in `payload`."""

    for name in names:
        if name in payload:
            return name
    return None


class AnnotationStore:
    """Filesystem-backed store rooted at one directory."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root directory."""

        self.root = root

    def load_text(self, relative_path: Path, encoding: str = "utf-8") -> str:
        """Load text content."""

        return (self.root / relative_path).read_text(encoding=encoding)

    def save_text(self, relative_path: Path, content: str, encoding: str = "utf-8") -> Path:
        """Save text content and return the final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps line endings exactly as normalized.
        with path.open("w", encoding=encoding, newline="") as handle:
            handle.write(content)
        return path

    def load_annotations(self, relative_path: Path) -> AnnotationExport:
        """Load and parse an annotation export.

        Raises:
            FileNotFoundError: If the export does not exist.
            ValueError: If the payload is not valid JSON or not an annotation export.
        """

        path = self.root / relative_path
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(
                f"Annotation export `{path}` is not valid JSON "
                f"(line {exc.lineno}, column {exc.colno}): {exc.msg}."
            ) from exc

        envelope: dict[str, Any] | None = None
        if isinstance(payload, Mapping):
            raw_items = payload.get("annotations")
            envelope = {key: value for key, value in payload.items() if key != "annotations"}
        else:
            raw_items = payload
        if not isinstance(raw_items, list):
            raise ValueError(
                f"Annotation export `{path}` must be a JSON list or an object "
                "with an `annotations` list."
            )

        annotations = tuple(
            self._parse_annotation(item, index, path) for index, item in enumerate(raw_items)
        )
        return AnnotationExport(annotations=annotations, envelope=envelope)

    def save_annotations(self, relative_path: Path, export: AnnotationExport) -> Path:
        """Serialize annotations in the shape they were loaded from and return the path."""

        items = [self._serialize_annotation(annotation) for annotation in export.annotations]
        payload: object = items
        if export.envelope is not None:
            payload = {**export.envelope, "annotations": items}

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2) + "\n",
            encoding="utf-8",
        )
        return path

    @staticmethod
    def _parse_annotation(item: object, index: int, path: Path) -> Annotation:
        """Build one `Annotation` from a raw export object."""

        if not isinstance(item, Mapping):
            raise ValueError(f"Annotation export `{path}` item {index} must be an object.")

        key_field = _first_present(item, _KEY_FIELDS)
        type_field = _first_present(item, _TYPE_FIELDS)
        text_field = _first_present(item, _TEXT_FIELDS) or "text"

        raw_text = item.get(text_field)
        if raw_text is not None and not isinstance(raw_text, str):
            raise ValueError(
                f"Annotation export `{path}` item {index} field `{text_field}` must be a string."
            )

        return Annotation(
            key=str(item[key_field]) if key_field is not None else str(index),
            annotation_type=str(item[type_field]).lower() if type_field is not None else "",
            text=raw_text or "",
            text_field=text_field,
            extra=dict(item),
        )

    @staticmethod
    def _serialize_annotation(annotation: Annotation) -> dict[str, Any]:
        """Return the original export object with the current text written back."""

        payload = dict(annotation.extra)
        if annotation.text != (payload.get(annotation.text_field) or ""):
            payload[annotation.text_field] = annotation.text
        return payload
