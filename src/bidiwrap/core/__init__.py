"""Core formatting algorithms for bidiwrap.

This module contains:

- Direction resolution (strong character classification, entry/exit scans)
- Directionality heuristics (forced, first strong, any RTL, locale)
- Locale to direction translation
- The BidiFormatter decision engine and its Unicode/HTML renderings

All services are:
- Stateless (safe to share across threads)
- Pure (no side effects, no I/O)

Key functions:
- strong_direction_of: Classify one character
- entry_direction / exit_direction: First / last strong character of a text
- overall_direction: Apply a heuristic to a text
- is_rtl_locale: Whether a locale is written right-to-left

Key classes:
- BidiFormatter: Wraps and marks text for a known context direction
"""

from bidiwrap.core.formatter import BidiFormatter
from bidiwrap.core.heuristics import (
    DEFAULT_HEURISTIC,
    HEURISTICS,
    always_ltr,
    always_rtl,
    any_rtl_ltr,
    first_strong_ltr,
    first_strong_rtl,
    get_heuristic,
    locale_heuristic,
)
from bidiwrap.core.locales import direction_for_locale, is_rtl_locale
from bidiwrap.core.markup import escape_html
from bidiwrap.core.resolver import (
    DirectionalityHeuristic,
    entry_direction,
    exit_direction,
    overall_direction,
    strong_direction_of,
)

__all__ = [
    # Formatter
    "BidiFormatter",
    # Heuristics
    "DEFAULT_HEURISTIC",
    "HEURISTICS",
    "DirectionalityHeuristic",
    "always_ltr",
    "always_rtl",
    "any_rtl_ltr",
    "first_strong_ltr",
    "first_strong_rtl",
    "get_heuristic",
    "locale_heuristic",
    # Locale
    "direction_for_locale",
    "is_rtl_locale",
    # Markup
    "escape_html",
    # Resolver functions
    "entry_direction",
    "exit_direction",
    "overall_direction",
    "strong_direction_of",
]
