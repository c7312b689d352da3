"""CLI application entry point for bidiwrap.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from bidiwrap import __version__
from bidiwrap.cli.output import console, print_error, print_inspection, print_summary
from bidiwrap.config import (
    BidiWrapSettings,
    FormatterConfig,
    LoggingConfig,
    OutputConfig,
)
from bidiwrap.core import BidiFormatter, direction_for_locale, get_heuristic
from bidiwrap.domain import Direction, describe_controls
from bidiwrap.exceptions import BidiWrapError
from bidiwrap.utils import WrapLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="bidiwrap",
    help="Format text of unknown direction for safe display in LTR or RTL content.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Bidiwrap[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Format text of unknown direction for safe display in LTR or RTL content."""


RtlContextOption = Annotated[
    bool,
    typer.Option(
        "--rtl-context",
        "-r",
        help="The surrounding paragraph is right-to-left",
    ),
]
LocaleOption = Annotated[
    str | None,
    typer.Option(
        "--locale",
        "-l",
        help="Derive the context direction from a locale (e.g. he-IL, ar_EG)",
    ),
]
HeuristicOption = Annotated[
    str,
    typer.Option(
        "--heuristic",
        "-H",
        help="Direction estimator (ltr|rtl|firststrong_ltr|firststrong_rtl|anyrtl_ltr)",
    ),
]
NoStereoResetOption = Annotated[
    bool,
    typer.Option(
        "--no-stereo-reset",
        help="Do not guard the start of each item against preceding content",
    ),
]


def _context_direction(rtl_context: bool, locale: str | None) -> Direction:
    if locale is not None:
        if rtl_context:
            raise typer.BadParameter("Cannot use --rtl-context and --locale together")
        return direction_for_locale(locale)
    return Direction.from_rtl(rtl_context)


def _formatter_config(
    rtl_context: bool, locale: str | None, heuristic: str, no_stereo_reset: bool
) -> FormatterConfig:
    # Raises UnknownHeuristicError with the list of valid names
    get_heuristic(heuristic)
    return FormatterConfig(
        context_direction=_context_direction(rtl_context, locale),
        stereo_reset=not no_stereo_reset,
        heuristic=heuristic,
    )


def _read_items(texts: list[str] | None, input_file: Path | None) -> list[str]:
    items = list(texts or [])
    if input_file is not None:
        if not input_file.is_file():
            raise typer.BadParameter(f"Input file not found: {input_file}")
        try:
            with input_file.open(encoding="utf-8") as f:
                items.extend(line.rstrip("\r\n") for line in f)
        except UnicodeDecodeError as e:
            raise typer.BadParameter(
                f"Input file is not valid UTF-8: {input_file} ({e.reason})"
            ) from e
        except OSError as e:
            raise typer.BadParameter(f"Could not read input file {input_file}: {e.strerror}") from e
    return items


@app.command()
def wrap(
    texts: Annotated[
        list[str] | None,
        typer.Argument(
            help="Text items to format (one output line per item)",
            show_default=False,
        ),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option(
            "--input",
            "-i",
            help="Read items from a UTF-8 file, one per line",
        ),
    ] = None,
    rtl_context: RtlContextOption = False,
    locale: LocaleOption = None,
    heuristic: HeuristicOption = "firststrong_ltr",
    no_stereo_reset: NoStereoResetOption = False,
    no_isolate: Annotated[
        bool,
        typer.Option(
            "--no-isolate",
            help="Do not guard content following each item",
        ),
    ] = False,
    html: Annotated[
        bool,
        typer.Option(
            "--html",
            help="Emit HTML (escaped text, dir spans) instead of Unicode controls",
        ),
    ] = False,
    show_controls: Annotated[
        bool,
        typer.Option(
            "--show-controls",
            "-s",
            help="Print directional controls as visible [LRM], [RLE], ... placeholders",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print formatted items only",
        ),
    ] = False,
) -> None:
    """Format text items for insertion into a paragraph of known direction.

    Example:
        bidiwrap wrap --show-controls "שלום"

    prints [LRM][RLE]שלום[PDF][LRM]: the Hebrew word embedded as RTL and
    shielded on both sides for an LTR paragraph.
    """
    try:
        settings = BidiWrapSettings(
            formatter=_formatter_config(rtl_context, locale, heuristic, no_stereo_reset),
            output=OutputConfig(
                html=html,
                isolate=not no_isolate,
                show_controls=show_controls,
            ),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        )
        items = _read_items(texts, input_file)
    except typer.BadParameter as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except BidiWrapError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ValidationError as e:
        print_error("Invalid settings", details=str(e))
        raise typer.Exit(code=1)

    if not items:
        print_error("Nothing to format", details="Pass TEXT arguments or --input FILE.")
        raise typer.Exit(code=1)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except OSError as e:
        print_error(f"Could not open log file: {settings.logging.log_file}", details=e.strerror)
        raise typer.Exit(code=1)
    wrap_logger = WrapLogger(logger)
    formatter = BidiFormatter.from_config(settings.formatter)
    render = formatter.span_wrap if settings.output.html else formatter.unicode_wrap

    wrap_logger.start()
    for index, item in enumerate(items):
        decision = formatter.decide(item, isolate=settings.output.isolate)
        wrap_logger.log_decision(index, decision)
        result = render(item, isolate=settings.output.isolate)
        typer.echo(describe_controls(result) if settings.output.show_controls else result)
    wrap_logger.finish()

    if not quiet:
        print_summary(wrap_logger.stats)


@app.command()
def inspect(
    text: Annotated[
        str,
        typer.Argument(help="Text to inspect", show_default=False),
    ],
    rtl_context: RtlContextOption = False,
    locale: LocaleOption = None,
    heuristic: HeuristicOption = "firststrong_ltr",
    no_stereo_reset: NoStereoResetOption = False,
) -> None:
    """Show how a text is classified and formatted in a context."""
    try:
        config = _formatter_config(rtl_context, locale, heuristic, no_stereo_reset)
    except typer.BadParameter as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except BidiWrapError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    formatter = BidiFormatter.from_config(config)
    print_inspection(
        text=text,
        decision=formatter.decide(text),
        dir_attr=formatter.dir_attr(text),
        mark_before=formatter.mark_before(text),
        mark_after=formatter.mark_after(text),
        unicode_wrapped=formatter.unicode_wrap(text),
        span_wrapped=formatter.span_wrap(text),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
