"""Wrap decision produced by the formatter.

A WrapDecision captures everything the formatter worked out about one piece of
text, before it is rendered as Unicode controls or HTML markup.
"""

from dataclasses import dataclass
from typing import Any

from bidiwrap.domain.direction import Direction


@dataclass(frozen=True, slots=True)
class WrapDecision:
    """Outcome of the wrap/mark decision for one piece of text.

    Attributes:
        context: Direction of the surrounding paragraph
        overall: Heuristic-estimated direction of the whole text
        entry: Direction of the first strong character (None if there is none)
        exit: Direction of the last strong character (None if there is none)
        leading_mark: Whether a reset mark goes before the body
        trailing_mark: Whether a reset mark goes after the body
    """

    context: Direction
    overall: Direction
    entry: Direction | None
    exit: Direction | None
    leading_mark: bool = False
    trailing_mark: bool = False

    @property
    def needs_wrap(self) -> bool:
        """True when the text must be embedded in its own direction."""
        return self.overall is not self.context

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dictionary (used for logging and the CLI).

        Returns:
            Dictionary with direction values as strings
        """
        return {
            "context": self.context.value,
            "overall": self.overall.value,
            "entry": self.entry.value if self.entry else None,
            "exit": self.exit.value if self.exit else None,
            "needs_wrap": self.needs_wrap,
            "leading_mark": self.leading_mark,
            "trailing_mark": self.trailing_mark,
        }
