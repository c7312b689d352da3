"""HTML glue for the markup output variant."""

import html

from bidiwrap.domain import Direction

SPAN_CLOSE = "</span>"


def escape_html(text: str) -> str:
    """Escape text for inclusion in HTML element content or attributes."""
    return html.escape(text, quote=True)


def dir_attribute(direction: Direction) -> str:
    """Render a ``dir`` attribute, e.g. ``dir="rtl"``."""
    return f'dir="{direction.value}"'


def span_open(direction: Direction) -> str:
    """Opening tag of a span carrying a direction."""
    return f"<span {dir_attribute(direction)}>"
