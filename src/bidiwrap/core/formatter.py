"""Bidi formatter: wrap and mark decisions for text of unknown direction.

The formatter knows the direction of the surrounding paragraph (the context)
and decides, for each piece of text, whether the text must be embedded in its
own direction and whether reset marks must shield the context from the text's
edges. Two renderings share one decision:

- unicode_wrap: embedding controls (LRE/RLE ... PDF) and LRM/RLM marks
- span_wrap: HTML escaped text inside ``<span dir="...">`` plus marks

Decision rules, for context C, overall direction O, entry E and exit X:
- The text is embedded iff O != C.
- The leading mark is due iff O != C or E is the opposite of C. It is only
  emitted when both stereo_reset and isolate are set.
- The trailing mark is due iff O != C or X is the opposite of C. It is only
  emitted when isolate is set.
"""

from dataclasses import dataclass, field
from functools import lru_cache

from bidiwrap.config.settings import FormatterConfig
from bidiwrap.core.heuristics import DEFAULT_HEURISTIC, get_heuristic
from bidiwrap.core.locales import direction_for_locale
from bidiwrap.core.markup import SPAN_CLOSE, dir_attribute, escape_html, span_open
from bidiwrap.core.resolver import (
    DirectionalityHeuristic,
    entry_direction,
    exit_direction,
    overall_direction,
    require_heuristic,
)
from bidiwrap.domain import PDF, Direction, WrapDecision
from bidiwrap.domain.controls import embedding_for, mark_for
from bidiwrap.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class BidiFormatter:
    """Formats text for display inside a paragraph of known direction.

    Immutable and free of shared state, so one instance can serve any number
    of threads.

    Attributes:
        context_direction: Direction of the surrounding paragraph
        stereo_reset: Whether to guard the output's start against whatever
            precedes it
        heuristic: Estimator used when a call does not pass its own
    """

    context_direction: Direction = Direction.LTR
    stereo_reset: bool = True
    heuristic: DirectionalityHeuristic = field(default=DEFAULT_HEURISTIC)

    def __post_init__(self) -> None:
        if not isinstance(self.context_direction, Direction):
            raise InvalidArgumentError(
                "context_direction",
                f"expected Direction, got {type(self.context_direction).__name__}",
            )
        if not isinstance(self.stereo_reset, bool):
            raise InvalidArgumentError("stereo_reset", "expected bool")
        require_heuristic(self.heuristic)

    @classmethod
    def get_instance(cls, rtl_context: bool = False) -> "BidiFormatter":
        """Shared formatter with default settings for an LTR or RTL context.

        Args:
            rtl_context: True for a right-to-left paragraph

        Returns:
            Cached formatter instance
        """
        return _default_instance(bool(rtl_context))

    @classmethod
    def for_locale(
        cls,
        locale: str,
        stereo_reset: bool = True,
        heuristic: DirectionalityHeuristic | None = None,
    ) -> "BidiFormatter":
        """Build a formatter whose context direction comes from a locale.

        Args:
            locale: BCP-47 or POSIX locale identifier
            stereo_reset: Leading-edge guard
            heuristic: Default estimator (first strong, LTR fallback if None)

        Returns:
            New formatter
        """
        return cls(
            context_direction=direction_for_locale(locale),
            stereo_reset=stereo_reset,
            heuristic=heuristic or DEFAULT_HEURISTIC,
        )

    @classmethod
    def from_config(cls, config: FormatterConfig) -> "BidiFormatter":
        """Build a formatter from validated settings."""
        return cls(
            context_direction=config.context_direction,
            stereo_reset=config.stereo_reset,
            heuristic=get_heuristic(config.heuristic),
        )

    # Context accessors

    def is_rtl_context(self) -> bool:
        """True if the surrounding paragraph is right-to-left."""
        return self.context_direction is Direction.RTL

    def mark(self) -> str:
        """Reset mark of the context direction (LRM or RLM)."""
        return mark_for(self.context_direction)

    def start_edge(self) -> str:
        """Visual side where the context's text flow starts."""
        return self.context_direction.start_edge

    def end_edge(self) -> str:
        """Visual side where the context's text flow ends."""
        return self.context_direction.end_edge

    # Direction queries

    def _estimate(self, text: str, heuristic: DirectionalityHeuristic | None) -> Direction:
        return overall_direction(text, self.heuristic if heuristic is None else heuristic)

    def _edge_opposes(self, overall: Direction, edge: Direction | None) -> bool:
        return overall is not self.context_direction or edge is self.context_direction.opposite

    def is_rtl(self, text: str, heuristic: DirectionalityHeuristic | None = None) -> bool:
        """Estimate whether text is right-to-left, ignoring the context."""
        return self._estimate(text, heuristic) is Direction.RTL

    def dir_attr_value(
        self, text: str, heuristic: DirectionalityHeuristic | None = None
    ) -> str:
        """Estimated direction of text as ``"ltr"`` or ``"rtl"``."""
        return self._estimate(text, heuristic).value

    def dir_attr(self, text: str, heuristic: DirectionalityHeuristic | None = None) -> str:
        """HTML ``dir`` attribute for text, or "" when it matches the context.

        Args:
            text: Text whose direction is estimated
            heuristic: Estimator overriding the formatter's default

        Returns:
            ``dir="ltr"``, ``dir="rtl"`` or an empty string
        """
        overall = self._estimate(text, heuristic)
        if overall is self.context_direction:
            return ""
        return dir_attribute(overall)

    def mark_before(
        self, text: str, heuristic: DirectionalityHeuristic | None = None
    ) -> str:
        """Mark to put before text so preceding content is unaffected by it.

        Returns the context mark when the overall or entry direction of text
        opposes the context, and "" otherwise.
        """
        overall = self._estimate(text, heuristic)
        return self.mark() if self._edge_opposes(overall, entry_direction(text)) else ""

    def mark_after(
        self, text: str, heuristic: DirectionalityHeuristic | None = None
    ) -> str:
        """Mark to put after text so following content is unaffected by it.

        Returns the context mark when the overall or exit direction of text
        opposes the context, and "" otherwise.
        """
        overall = self._estimate(text, heuristic)
        return self.mark() if self._edge_opposes(overall, exit_direction(text)) else ""

    # Wrapping

    def decide(
        self,
        text: str,
        heuristic: DirectionalityHeuristic | None = None,
        isolate: bool = True,
    ) -> WrapDecision:
        """Work out how text must be wrapped in this context.

        Args:
            text: Text to format
            heuristic: Estimator overriding the formatter's default
            isolate: Whether to guard content that follows the text

        Returns:
            The decision, ready to be rendered
        """
        if not isinstance(isolate, bool):
            raise InvalidArgumentError("isolate", "expected bool")
        overall = self._estimate(text, heuristic)
        entry = entry_direction(text)
        exit_ = exit_direction(text)
        return WrapDecision(
            context=self.context_direction,
            overall=overall,
            entry=entry,
            exit=exit_,
            leading_mark=self.stereo_reset and isolate and self._edge_opposes(overall, entry),
            trailing_mark=isolate and self._edge_opposes(overall, exit_),
        )

    def _render(self, decision: WrapDecision, body: str) -> str:
        leading = self.mark() if decision.leading_mark else ""
        trailing = self.mark() if decision.trailing_mark else ""
        return f"{leading}{body}{trailing}"

    def unicode_wrap(
        self,
        text: str,
        heuristic: DirectionalityHeuristic | None = None,
        isolate: bool = True,
    ) -> str:
        """Format text using Unicode embedding controls and marks.

        Text whose estimated direction differs from the context is enclosed in
        RLE/LRE ... PDF. Reset marks are added as the decision requires.

        Args:
            text: Text to format
            heuristic: Estimator overriding the formatter's default
            isolate: Whether to guard content that follows the text

        Returns:
            Formatted text
        """
        decision = self.decide(text, heuristic, isolate)
        body = f"{embedding_for(decision.overall)}{text}{PDF}" if decision.needs_wrap else text
        return self._render(decision, body)

    def span_wrap(
        self,
        text: str,
        heuristic: DirectionalityHeuristic | None = None,
        isolate: bool = True,
    ) -> str:
        """Format text as HTML, escaping it and adding a dir span if needed.

        The text is always HTML escaped. Text whose estimated direction differs
        from the context is enclosed in ``<span dir="...">``. Reset marks are
        added as the decision requires.

        Args:
            text: Text to format (raw, not yet escaped)
            heuristic: Estimator overriding the formatter's default
            isolate: Whether to guard content that follows the text

        Returns:
            HTML fragment
        """
        decision = self.decide(text, heuristic, isolate)
        escaped = escape_html(text)
        if decision.needs_wrap:
            body = f"{span_open(decision.overall)}{escaped}{SPAN_CLOSE}"
        else:
            body = escaped
        return self._render(decision, body)


@lru_cache(maxsize=2)
def _default_instance(rtl_context: bool) -> BidiFormatter:
    return BidiFormatter(context_direction=Direction.from_rtl(rtl_context))
