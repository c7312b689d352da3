"""Directionality heuristics.

A heuristic is any callable that maps text to a Direction and is total: it must
answer even for empty or purely neutral text. Heuristics are plain functions so
they can be passed per call, stored on a formatter or looked up by name.

Shipped heuristics:
- always_ltr / always_rtl: force a direction
- first_strong_ltr / first_strong_rtl: first strong character wins
- any_rtl_ltr: RTL if any strong RTL character is present
- locale_heuristic: constant direction of a locale
"""

from bidiwrap.core.locales import direction_for_locale
from bidiwrap.core.resolver import DirectionalityHeuristic, entry_direction, strong_direction_of
from bidiwrap.domain import Direction
from bidiwrap.exceptions import UnknownHeuristicError


def always_ltr(text: str) -> Direction:  # noqa: ARG001
    """Treat every text as left-to-right."""
    return Direction.LTR


def always_rtl(text: str) -> Direction:  # noqa: ARG001
    """Treat every text as right-to-left."""
    return Direction.RTL


def first_strong_ltr(text: str) -> Direction:
    """First strong character decides; LTR when there is none."""
    return entry_direction(text) or Direction.LTR


def first_strong_rtl(text: str) -> Direction:
    """First strong character decides; RTL when there is none."""
    return entry_direction(text) or Direction.RTL


def any_rtl_ltr(text: str) -> Direction:
    """RTL if any strong RTL character is present, LTR otherwise."""
    for char in text:
        if strong_direction_of(char) is Direction.RTL:
            return Direction.RTL
    return Direction.LTR


def locale_heuristic(locale: str) -> DirectionalityHeuristic:
    """Build a heuristic that always answers with the direction of a locale.

    Args:
        locale: BCP-47 or POSIX locale identifier

    Returns:
        Heuristic returning the locale's direction for any text
    """
    direction = direction_for_locale(locale)

    def estimate(text: str) -> Direction:  # noqa: ARG001
        return direction

    estimate.__name__ = f"locale_{locale}"
    return estimate


DEFAULT_HEURISTIC: DirectionalityHeuristic = first_strong_ltr

HEURISTICS: dict[str, DirectionalityHeuristic] = {
    "ltr": always_ltr,
    "rtl": always_rtl,
    "firststrong_ltr": first_strong_ltr,
    "firststrong_rtl": first_strong_rtl,
    "anyrtl_ltr": any_rtl_ltr,
}


def get_heuristic(name: str) -> DirectionalityHeuristic:
    """Look up a registered heuristic by name.

    Args:
        name: Registry key (case-insensitive, '-' accepted for '_')

    Returns:
        The registered heuristic

    Raises:
        UnknownHeuristicError: If no heuristic has that name
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return HEURISTICS[key]
    except KeyError:
        raise UnknownHeuristicError(name, sorted(HEURISTICS)) from None
