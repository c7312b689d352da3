"""Base direction type."""

from enum import Enum


class Direction(str, Enum):
    """Base directionality of a paragraph or a run of text.

    The value doubles as the HTML ``dir`` attribute value.
    """

    LTR = "ltr"
    RTL = "rtl"

    @property
    def is_rtl(self) -> bool:
        """True for right-to-left."""
        return self is Direction.RTL

    @property
    def opposite(self) -> "Direction":
        """The other base direction."""
        return Direction.LTR if self is Direction.RTL else Direction.RTL

    @property
    def start_edge(self) -> str:
        """Visual side where text flow begins ("left" or "right")."""
        return "right" if self is Direction.RTL else "left"

    @property
    def end_edge(self) -> str:
        """Visual side where text flow ends ("left" or "right")."""
        return "left" if self is Direction.RTL else "right"

    @classmethod
    def from_rtl(cls, rtl: bool) -> "Direction":
        """Map a boolean RTL flag to a direction."""
        return cls.RTL if rtl else cls.LTR
