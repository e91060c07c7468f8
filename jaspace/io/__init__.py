"""File input/output for text and annotation exports."""

from .storage import AnnotationStore

__all__ = ["AnnotationStore"]
