"""Bidiwrap - Format text for safe display inside a directional context.

Bidiwrap takes a run of text whose directionality is unknown or mixed and
formats it so that splicing it into a left-to-right or right-to-left paragraph
cannot scramble the surrounding text. Output is either plain text with Unicode
directional controls or HTML with a ``dir`` attributed span.

Example:
    from bidiwrap import BidiFormatter

    formatter = BidiFormatter.get_instance(rtl_context=False)
    formatter.span_wrap("נס")   # LRM + '<span dir="rtl">...</span>' + LRM

From the shell:
    $ bidiwrap wrap --show-controls "שלום"
"""

from bidiwrap.core.formatter import BidiFormatter
from bidiwrap.domain import Direction, WrapDecision

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["BidiFormatter", "Direction", "WrapDecision", "__author__", "__version__"]
