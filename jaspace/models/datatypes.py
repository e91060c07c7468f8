"""Records exchanged between the annotation host, storage, and CLI.

Key types:
- `Annotation`: one annotation taken from an export.
- `AnnotationStatus`: outcome of applying space removal to one annotation.
- `AnnotationOutcome`, `AnnotationBatchReport`: per-item and batch results.
- `AnnotationExport`: annotations plus the envelope of the file they came from.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class Annotation:
    """An annotation record from a reader export.

    Attributes:
        key: Stable annotation identifier.
        annotation_type: Annotation kind (`highlight`, `underline`, `note`, ...).
        text: Annotated source text, possibly OCR- or PDF-derived.
        text_field: Export field the text was read from and is written back to.
        extra: All other fields, written back unchanged.
    """

    key: str
    annotation_type: str
    text: str
    text_field: str = "text"
    extra: Mapping[str, Any] = field(default_factory=dict)

    def with_text(self, text: str) -> Annotation:
        """Return a copy carrying new text."""

        return replace(self, text=text)


class AnnotationStatus(str, Enum):
    """Result of offering space removal for one annotation."""

    UPDATED = "updated"
    NO_CHANGES = "no_changes"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class AnnotationOutcome:
    """Space-removal outcome for one annotation.

    Attributes:
        annotation: Annotation after processing (unchanged unless `UPDATED`).
        status: What happened to the annotation.
        removed_runs_count: Whitespace runs deleted between Japanese characters.
        collapsed_runs_count: Multi-character whitespace runs collapsed.
    """

    annotation: Annotation
    status: AnnotationStatus
    removed_runs_count: int = 0
    collapsed_runs_count: int = 0


@dataclass(frozen=True, slots=True)
class AnnotationBatchReport:
    """Ordered outcomes for a batch of annotations."""

    outcomes: tuple[AnnotationOutcome, ...]

    @property
    def annotations(self) -> list[Annotation]:
        """Return processed annotations in input order."""

        return [outcome.annotation for outcome in self.outcomes]

    def count(self, status: AnnotationStatus) -> int:
        """Return how many outcomes carry `status`."""

        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def updated_count(self) -> int:
        return self.count(AnnotationStatus.UPDATED)

    @property
    def no_changes_count(self) -> int:
        return self.count(AnnotationStatus.NO_CHANGES)

    @property
    def skipped_count(self) -> int:
        return self.count(AnnotationStatus.SKIPPED)


@dataclass(frozen=True, slots=True)
class AnnotationExport:
    """Annotations loaded from one export file.

    Attributes:
        annotations: Parsed annotations in file order.
        envelope: Other top-level fields when the file wraps the list in an
            `{"annotations": [...]}` object, else `None` for a bare list.
    """

    annotations: tuple[Annotation, ...]
    envelope: Mapping[str, Any] | None = None
