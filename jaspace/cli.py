"""Command-line interface for jaspace.

Responsibilities:
- Expose commands that normalize, check, and batch-process Japanese text.
- Resolve `JaspaceConfig` from YAML or environment plus explicit CLI overrides.
- Map read/parse/write failures to stage-aware diagnostics.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .annotations import AnnotationSpaceRemover
from .cli_rendering import echo_batch_summary, echo_updated_keys, exit_with_command_error
from .config import ConfigLoader, JaspaceConfig
from .errors import CommandStageError
from .io.storage import AnnotationStore
from .models.datatypes import AnnotationExport
from .telemetry.logger import RunLogger
from .text.normalizer import is_normalizable, normalize

app = typer.Typer(
    name="jaspace",
    no_args_is_help=True,
    help="Remove meaningless whitespace from Japanese text.",
)

_STDIN_MARKER = "-"
_CHECK_NORMALIZABLE_EXIT_CODE = 1
_CHECK_FAILURE_EXIT_CODE = 2

InputArgument = Annotated[
    Path | None,
    typer.Argument(help="Text file to read. Reads stdin when omitted or `-`."),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
LinesOption = Annotated[
    bool | None,
    typer.Option(
        "--lines/--whole",
        help=(
            "Normalize each line independently, keeping line breaks, or the whole input "
            "as one fragment where line breaks count as whitespace (default)."
        ),
    ),
]
EncodingOption = Annotated[
    str | None,
    typer.Option("--encoding", help="Encoding for files read and written."),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option("--log-level", help="Minimum log level written to stderr."),
]


def _load_config(
    config_path: Path | None,
    *,
    per_line: bool | None = None,
    encoding: str | None = None,
    log_level: str | None = None,
) -> JaspaceConfig:
    """Load file or environment config, apply CLI overrides, and map failures."""

    try:
        if config_path is None:
            base_config = ConfigLoader.from_env()
        else:
            base_config = ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        source = f"config file `{config_path}`" if config_path else "environment config"
        raise CommandStageError(
            stage="config",
            detail=f"Invalid {source}: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc

    try:
        return base_config.with_overrides(
            per_line=per_line,
            encoding=encoding,
            log_level=log_level,
        )
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid command option: {exc}",
        ) from exc


def _read_text(input_path: Path | None, config: JaspaceConfig) -> str:
    """Read command input from a file or stdin."""

    if input_path is None or str(input_path) == _STDIN_MARKER:
        return typer.get_text_stream("stdin").read()

    try:
        return AnnotationStore(Path(".")).load_text(input_path, encoding=config.encoding)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Input file not found: `{input_path}`.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Input file `{input_path}` is not valid {config.encoding}: {exc.reason}.",
            hint="Pass the file encoding via `--encoding`.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="read",
            detail=f"Failed to read `{input_path}`: {exc}",
        ) from exc


def _normalize_document(text: str, per_line: bool) -> str:
    """Normalize input as one fragment, or line by line keeping `\\n` breaks."""

    if not per_line:
        return normalize(text)
    return "\n".join(normalize(line) for line in text.split("\n"))


def _document_is_normalizable(text: str, per_line: bool) -> bool:
    if not per_line:
        return is_normalizable(text)
    return any(is_normalizable(line) for line in text.split("\n"))


@app.command("normalize")
def normalize_command(
    input_path: InputArgument = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write normalized text here instead of stdout."),
    ] = None,
    lines: LinesOption = None,
    config_file: ConfigOption = None,
    encoding: EncodingOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Normalize whitespace in Japanese text.

    By default the whole input is one fragment and line breaks count as
    whitespace, so breaks between Japanese characters are removed and
    multi-line input can be joined into one line. Pass `--lines` to keep
    every line break.
    """

    run_logger: RunLogger | None = None
    try:
        config = _load_config(
            config_file, per_line=lines, encoding=encoding, log_level=log_level
        )
        run_logger = RunLogger(level=config.log_level)
        run_logger.log_stage_start("normalize", per_line=config.per_line)
        source_text = _read_text(input_path, config)
        normalized = _normalize_document(source_text, config.per_line)
        if out is not None:
            try:
                AnnotationStore(Path(".")).save_text(out, normalized, encoding=config.encoding)
            except OSError as exc:
                raise CommandStageError(
                    stage="write",
                    detail=f"Failed to write `{out}`: {exc}",
                ) from exc
        run_logger.log_stage_complete("normalize", changed=normalized != source_text)
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("normalize", type(exc).__name__)
        exit_with_command_error("normalize", exc)

    if out is None:
        typer.echo(normalized, nl=False)
    else:
        typer.echo(f"Normalized text: {out}")


@app.command("check")
def check_command(
    input_path: InputArgument = None,
    lines: LinesOption = None,
    config_file: ConfigOption = None,
    encoding: EncodingOption = None,
) -> None:
    """Report whether normalization would change the input.

    Exits with code 0 when the text is clean, 1 when it is normalizable, and
    2 when the input or config cannot be read.
    """

    try:
        config = _load_config(config_file, per_line=lines, encoding=encoding)
        source_text = _read_text(input_path, config)
        normalizable = _document_is_normalizable(source_text, config.per_line)
    except Exception as exc:
        exit_with_command_error("check", exc, code=_CHECK_FAILURE_EXIT_CODE)

    if normalizable:
        typer.echo("normalizable")
        raise typer.Exit(code=_CHECK_NORMALIZABLE_EXIT_CODE)
    typer.echo("clean")


@app.command("annotations")
def annotations_command(
    export_path: Annotated[
        Path,
        typer.Argument(help="Annotation export JSON (list or `{\"annotations\": [...]}`)."),
    ],
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write results here instead of updating the export in place."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Report what would change without writing."),
    ] = False,
    config_file: ConfigOption = None,
    log_level: LogLevelOption = None,
) -> None:
    """Remove Japanese spaces from annotation texts in an export."""

    run_logger: RunLogger | None = None
    target = out if out is not None else export_path
    try:
        config = _load_config(config_file, log_level=log_level)
        run_logger = RunLogger(level=config.log_level)
        store = AnnotationStore(Path("."))

        run_logger.log_stage_start("parse", export=export_path)
        try:
            export = store.load_annotations(export_path)
        except FileNotFoundError as exc:
            raise CommandStageError(
                stage="read",
                detail=f"Annotation export not found: `{export_path}`.",
            ) from exc
        except ValueError as exc:
            raise CommandStageError(
                stage="parse",
                detail=str(exc),
                hint="Export annotations as JSON with `key`, `type` and `text` fields.",
            ) from exc
        run_logger.log_stage_complete("parse", count=len(export.annotations))

        remover = AnnotationSpaceRemover(
            annotation_types=config.annotation_types,
            run_logger=run_logger,
        )
        report = remover.process(export.annotations)

        if not dry_run and (report.updated_count > 0 or out is not None):
            run_logger.log_stage_start("write", target=target)
            try:
                store.save_annotations(
                    target,
                    AnnotationExport(
                        annotations=tuple(report.annotations),
                        envelope=export.envelope,
                    ),
                )
            except OSError as exc:
                raise CommandStageError(
                    stage="write",
                    detail=f"Failed to write annotations to `{target}`: {exc}",
                ) from exc
            run_logger.log_stage_complete("write", target=target)
    except Exception as exc:
        if run_logger is not None:
            run_logger.log_stage_failure("annotations", type(exc).__name__)
        exit_with_command_error("annotations", exc)

    echo_updated_keys(report)
    echo_batch_summary(report)
    if dry_run:
        typer.echo("Dry run: no files written.")
    elif report.updated_count > 0 or out is not None:
        typer.echo(f"Annotations written: {target}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
