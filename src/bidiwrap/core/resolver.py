"""Direction resolution for runs of text.

Stateless, context-free classification used by the formatter:

- strong_direction_of: intrinsic direction of a single character
- entry_direction / exit_direction: first / last strong character of a text
- overall_direction: heuristic estimate of the whole text

A return value of None means the text holds no strongly-directional character
(empty text, digits, punctuation, whitespace).
"""

import unicodedata
from collections.abc import Callable, Iterable

from bidiwrap.domain import Direction
from bidiwrap.exceptions import HeuristicError, InvalidArgumentError

DirectionalityHeuristic = Callable[[str], Direction]

_LTR_CLASSES = frozenset({"L"})
_RTL_CLASSES = frozenset({"R", "AL"})


def strong_direction_of(char: str) -> Direction | None:
    """Classify a single character by its Unicode bidi class.

    Args:
        char: A single character

    Returns:
        LTR for class L, RTL for classes R and AL, None otherwise
    """
    bidi_class = unicodedata.bidirectional(char)
    if bidi_class in _LTR_CLASSES:
        return Direction.LTR
    if bidi_class in _RTL_CLASSES:
        return Direction.RTL
    return None


def _first_strong(chars: Iterable[str]) -> Direction | None:
    for char in chars:
        direction = strong_direction_of(char)
        if direction is not None:
            return direction
    return None


def entry_direction(text: str) -> Direction | None:
    """Direction of the first strong character in text.

    Args:
        text: Text to scan from the start

    Returns:
        Direction of the first strong character, or None if there is none
    """
    require_text(text)
    return _first_strong(text)


def exit_direction(text: str) -> Direction | None:
    """Direction of the last strong character in text.

    Args:
        text: Text to scan from the end

    Returns:
        Direction of the last strong character, or None if there is none
    """
    require_text(text)
    return _first_strong(reversed(text))


def overall_direction(text: str, heuristic: DirectionalityHeuristic) -> Direction:
    """Estimate the direction of text as a whole.

    Args:
        text: Text to estimate
        heuristic: Callable mapping text to a Direction

    Returns:
        The heuristic's estimate

    Raises:
        InvalidArgumentError: If text is not a str or heuristic is not callable
        HeuristicError: If the heuristic returns something other than a Direction
    """
    require_text(text)
    require_heuristic(heuristic)
    result = heuristic(text)
    if not isinstance(result, Direction):
        raise HeuristicError(heuristic, result)
    return result


def require_text(text: object) -> None:
    """Reject anything that is not a str."""
    if not isinstance(text, str):
        raise InvalidArgumentError("text", f"expected str, got {type(text).__name__}")


def require_heuristic(heuristic: object) -> None:
    """Reject anything that is not callable."""
    if not callable(heuristic):
        raise InvalidArgumentError(
            "heuristic", f"expected a callable, got {type(heuristic).__name__}"
        )
