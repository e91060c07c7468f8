"""Configuration model and loaders for jaspace.

Responsibilities:
- Define host-side settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.
- Keep CLI-over-file precedence explicit through `JaspaceConfig.with_overrides`.

Key types:
- `JaspaceConfig`: settings for one CLI invocation.
- `ConfigLoader`: static construction helpers for `JaspaceConfig`.

The normalizer has no settings; everything here configures the annotation
host and the CLI around it.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    BOOLEAN_TOKENS_HINT,
    normalize_optional_string,
    parse_name_list,
    parse_permissive_boolean,
)


DEFAULT_ANNOTATION_TYPES = ("highlight", "underline")
_SUPPORTED_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


@dataclass(frozen=True, slots=True)
class JaspaceConfig:
    """Settings for one CLI invocation.

    Attributes:
        annotation_types: Annotation types eligible for space removal.
        per_line: Normalize each line of a text file independently.
        encoding: Text encoding for files read and written by the CLI.
        log_level: Minimum loguru level emitted by `RunLogger`.
    """

    annotation_types: tuple[str, ...] = DEFAULT_ANNOTATION_TYPES
    per_line: bool = False
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def validate(self) -> None:
        """Validate values before any command runs."""

        if not self.annotation_types:
            raise ValueError("`annotation_types` must name at least one annotation type.")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(f"`log_level` must be one of: {supported}.")

    def with_overrides(
        self,
        *,
        per_line: bool | None = None,
        encoding: str | None = None,
        log_level: str | None = None,
    ) -> JaspaceConfig:
        """Return a validated copy where explicit CLI values replace file values."""

        updated = replace(
            self,
            per_line=self.per_line if per_line is None else per_line,
            encoding=normalize_optional_string(encoding) or self.encoding,
            log_level=(normalize_optional_string(log_level) or self.log_level).upper(),
        )
        updated.validate()
        return updated


class ConfigLoader:
    """Factory methods for creating `JaspaceConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {"annotation_types", "per_line", "encoding", "log_level"}
    )

    @staticmethod
    def from_yaml(path: Path) -> JaspaceConfig:
        """Create a validated config from a YAML file.

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the payload is not a mapping or holds invalid values.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> JaspaceConfig:
        """Create a validated config from `JASPACE_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        annotation_types = DEFAULT_ANNOTATION_TYPES
        raw_types = normalize_optional_string(env_map.get("JASPACE_ANNOTATION_TYPES"))
        if raw_types is not None:
            annotation_types = parse_name_list(raw_types) or DEFAULT_ANNOTATION_TYPES

        per_line = ConfigLoader._optional_env_boolean(env_map, "JASPACE_PER_LINE")
        encoding = normalize_optional_string(env_map.get("JASPACE_ENCODING"))
        log_level = normalize_optional_string(env_map.get("JASPACE_LOG_LEVEL"))

        config = JaspaceConfig(
            annotation_types=annotation_types,
            per_line=per_line if per_line is not None else False,
            encoding=encoding or "utf-8",
            log_level=(log_level or "WARNING").upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> JaspaceConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        annotation_types = DEFAULT_ANNOTATION_TYPES
        if "annotation_types" in payload:
            try:
                parsed_types = parse_name_list(payload["annotation_types"])
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `annotation_types`: {exc}."
                ) from exc
            if parsed_types is None:
                raise ValueError(
                    f"{source_label} field `annotation_types` must name at least one type."
                )
            annotation_types = parsed_types

        config = JaspaceConfig(
            annotation_types=annotation_types,
            per_line=ConfigLoader._optional_boolean(payload, "per_line", source_label, False),
            encoding=normalize_optional_string(payload.get("encoding")) or "utf-8",
            log_level=(
                normalize_optional_string(payload.get("log_level")) or "WARNING"
            ).upper(),
        )
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value {BOOLEAN_TOKENS_HINT}."
            )
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from an environment mapping."""

        if normalize_optional_string(env.get(key)) is None:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value {BOOLEAN_TOKENS_HINT}."
            )
        return parsed
