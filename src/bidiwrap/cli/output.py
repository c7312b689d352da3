"""Rich console output helpers for the CLI.

Formatted text itself is written with ``typer.echo`` so that it reaches stdout
byte for byte; everything here is presentation around it.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bidiwrap.domain import WrapDecision, describe_controls
from bidiwrap.utils import WrapStats

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

# Unicode symbols for consistent visual language
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def _direction_label(value: str | None) -> str:
    return value if value is not None else "none"


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    err_console.print(Text(message))
    if details:
        err_console.print(Text(f"  {details}"))


def print_summary(stats: WrapStats) -> None:
    """Print a one-line summary of a formatting run.

    Args:
        stats: Statistics collected while formatting
    """
    err_console.print(
        f"[green]{SYM_OK}[/green] {stats.item_count} items {SYM_DOT} "
        f"{stats.wrapped_count} embedded {SYM_DOT} "
        f"{stats.leading_marks + stats.trailing_marks} marks"
    )


def print_inspection(
    text: str,
    decision: WrapDecision,
    dir_attr: str,
    mark_before: str,
    mark_after: str,
    unicode_wrapped: str,
    span_wrapped: str,
) -> None:
    """Print a table describing how one text is treated in a context.

    Args:
        text: The inspected text
        decision: Wrap decision for the text
        dir_attr: Result of dir_attr for the text
        mark_before: Result of mark_before for the text
        mark_after: Result of mark_after for the text
        unicode_wrapped: Result of unicode_wrap for the text
        span_wrapped: Result of span_wrap for the text
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Property")
    table.add_column("Value")

    data = decision.to_dict()
    rows = [
        ("text", describe_controls(text)),
        ("context", data["context"]),
        ("entry", _direction_label(data["entry"])),
        ("exit", _direction_label(data["exit"])),
        ("overall", data["overall"]),
        ("embed", "yes" if decision.needs_wrap else "no"),
        ("dir attr", dir_attr or "-"),
        ("mark before", describe_controls(mark_before) or "-"),
        ("mark after", describe_controls(mark_after) or "-"),
        ("unicode", describe_controls(unicode_wrapped)),
        ("html", describe_controls(span_wrapped)),
    ]
    for name, value in rows:
        table.add_row(Text(name), Text(value))

    console.print(table)
