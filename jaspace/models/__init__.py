"""Typed records used by the annotation host and CLI."""

from .datatypes import (
    Annotation,
    AnnotationBatchReport,
    AnnotationExport,
    AnnotationOutcome,
    AnnotationStatus,
)

__all__ = [
    "Annotation",
    "AnnotationBatchReport",
    "AnnotationExport",
    "AnnotationOutcome",
    "AnnotationStatus",
]
