"""Domain models for bidiwrap.

This module contains the value types shared by the resolver, the formatter and
the CLI. All models are:

- Immutable (frozen dataclasses and enums)
- Free of formatting policy

Key types:
- Direction: The two base directions
- WrapDecision: Outcome of the wrap/mark decision for one piece of text
- Control characters: LRM, RLM, LRE, RLE, PDF
"""

from bidiwrap.domain.controls import (
    CONTROL_NAMES,
    LRE,
    LRM,
    PDF,
    RLE,
    RLM,
    describe_controls,
)
from bidiwrap.domain.decision import WrapDecision
from bidiwrap.domain.direction import Direction

__all__: list[str] = [
    # Enums
    "Direction",
    # Core types
    "WrapDecision",
    # Control characters
    "CONTROL_NAMES",
    "LRE",
    "LRM",
    "PDF",
    "RLE",
    "RLM",
    "describe_controls",
]
