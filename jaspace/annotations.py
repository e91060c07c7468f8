"""Annotation host around the space normalizer.

Responsibilities:
- Decide whether space removal should be offered for an annotation.
- Apply normalization to annotation text and classify the outcome.
- Process exported annotation batches in order with per-status counts.

The host never mutates input records; updated annotations are new values the
caller persists through `AnnotationStore`.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import DEFAULT_ANNOTATION_TYPES
from .models.datatypes import (
    Annotation,
    AnnotationBatchReport,
    AnnotationOutcome,
    AnnotationStatus,
)
from .telemetry.logger import RunLogger
from .text.normalizer import SpaceRemover


class AnnotationSpaceRemover:
    """Offer and apply Japanese space removal on annotation text."""

    def __init__(
        self,
        annotation_types: Iterable[str] = DEFAULT_ANNOTATION_TYPES,
        remover: SpaceRemover | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize with the processable annotation types."""

        self._annotation_types = frozenset(name.lower() for name in annotation_types)
        self._remover = remover or SpaceRemover()
        self._run_logger = run_logger

    def offers_action(self, annotation: Annotation) -> bool:
        """Return whether space removal applies to this annotation.

        Only processable types with non-empty text that normalization would
        change qualify.
        """

        if annotation.annotation_type not in self._annotation_types:
            return False
        if not annotation.text:
            return False
        return self._remover.is_removable(annotation.text)

    def apply(self, annotation: Annotation) -> AnnotationOutcome:
        """Normalize one annotation and report what happened."""

        if not self.offers_action(annotation):
            return self._record(AnnotationOutcome(annotation, AnnotationStatus.SKIPPED))

        report = self._remover.remove_with_report(annotation.text)
        if report.text == annotation.text:
            return self._record(AnnotationOutcome(annotation, AnnotationStatus.NO_CHANGES))

        return self._record(
            AnnotationOutcome(
                annotation=annotation.with_text(report.text),
                status=AnnotationStatus.UPDATED,
                removed_runs_count=report.removed_runs_count,
                collapsed_runs_count=report.collapsed_runs_count,
            )
        )

    def process(self, annotations: Iterable[Annotation]) -> AnnotationBatchReport:
        """Apply space removal to every annotation, preserving order."""

        return AnnotationBatchReport(
            outcomes=tuple(self.apply(annotation) for annotation in annotations)
        )

    def _record(self, outcome: AnnotationOutcome) -> AnnotationOutcome:
        if self._run_logger is not None:
            self._run_logger.log_annotation(
                outcome.annotation.key,
                outcome.status.value,
                removed=outcome.removed_runs_count,
                collapsed=outcome.collapsed_runs_count,
            )
        return outcome
