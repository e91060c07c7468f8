"""Top-level package for jaspace.

jaspace removes semantically meaningless whitespace from Japanese text
fragments such as OCR output or PDF-extracted annotation text, while keeping
spaces at boundaries with Latin text and numerals. The core entry points are
`normalize` and `is_normalizable`.
"""

from .text.normalizer import is_normalizable, normalize

__all__ = ["normalize", "is_normalizable", "__version__"]

__version__ = "0.1.0"
