"""Unicode directional formatting characters.

Only the characters the formatter emits are defined here:
- LRM / RLM: zero-width marks that reset neutral resolution
- LRE / RLE: embedding openers
- PDF: embedding closer
"""

from bidiwrap.domain.direction import Direction

LRM = "\u200e"  # Left-to-right mark
RLM = "\u200f"  # Right-to-left mark
LRE = "\u202a"  # Left-to-right embedding
RLE = "\u202b"  # Right-to-left embedding
PDF = "\u202c"  # Pop directional formatting

CONTROL_NAMES: dict[str, str] = {
    LRM: "LRM",
    RLM: "RLM",
    LRE: "LRE",
    RLE: "RLE",
    PDF: "PDF",
}


def mark_for(direction: Direction) -> str:
    """Return the reset mark for a direction."""
    return RLM if direction is Direction.RTL else LRM


def embedding_for(direction: Direction) -> str:
    """Return the embedding opener for a direction."""
    return RLE if direction is Direction.RTL else LRE


def describe_controls(text: str) -> str:
    """Replace directional controls with visible ``[NAME]`` placeholders.

    Args:
        text: Text that may contain LRM/RLM/LRE/RLE/PDF

    Returns:
        Text with each control replaced by its bracketed name
    """
    return "".join(
        f"[{CONTROL_NAMES[ch]}]" if ch in CONTROL_NAMES else ch for ch in text
    )
