"""Domain exceptions for CLI and annotation-host diagnostics.

The normalizer itself never raises for string input; these errors come only
from reading, parsing, and writing the material around it.
"""

from __future__ import annotations


class CommandStageError(RuntimeError):
    """Raised when a specific command stage (`config`, `read`, `parse`, `write`) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
