"""Locale to direction adapter.

Translates a locale identifier into the base direction of its script. This is
a boundary convenience for building formatters and heuristics; the formatter
itself only ever sees a Direction.
"""

import re

from bidiwrap.domain import Direction
from bidiwrap.exceptions import InvalidArgumentError

# ISO 15924 codes of right-to-left scripts
RTL_SCRIPTS = frozenset({
    "adlm", "arab", "aran", "armi", "avst", "cprt", "hebr", "khar", "lydi",
    "mand", "mani", "mend", "narb", "nbat", "nkoo", "orkh", "palm", "phli",
    "phlp", "phnx", "prti", "rohg", "samr", "sarb", "sogd", "sogo", "syrc",
    "thaa", "yezi",
})

# Languages written right-to-left when no script subtag says otherwise
RTL_LANGUAGES = frozenset({
    "ar", "arc", "ckb", "dv", "fa", "glk", "he", "iw", "ji", "khw", "ks",
    "lrc", "mzn", "nqo", "pnb", "ps", "sd", "syr", "ug", "ur", "yi",
})

_TAG_SEPARATORS = re.compile(r"[-_]")


def _parse(locale: str) -> tuple[str, str | None]:
    """Split a locale identifier into (language, script)."""
    if not isinstance(locale, str) or not locale.strip():
        raise InvalidArgumentError("locale", "expected a non-empty locale identifier")

    # Drop POSIX encoding/modifier suffixes: he_IL.UTF-8@euro
    tag = locale.strip().split(".", 1)[0].split("@", 1)[0]
    subtags = [part.lower() for part in _TAG_SEPARATORS.split(tag) if part]
    if not subtags or not subtags[0].isalpha() or not 2 <= len(subtags[0]) <= 8:
        raise InvalidArgumentError("locale", f"malformed locale identifier '{locale}'")

    script = next(
        (part for part in subtags[1:] if len(part) == 4 and part.isalpha()),
        None,
    )
    return subtags[0], script


def is_rtl_locale(locale: str) -> bool:
    """Check whether a locale is written right-to-left.

    An explicit script subtag wins (``az-Arab`` is RTL, ``ku-Latn`` is LTR);
    otherwise the primary language decides.

    Args:
        locale: BCP-47 (``ar-EG``) or POSIX (``he_IL.UTF-8``) identifier

    Returns:
        True if the locale's script is right-to-left

    Raises:
        InvalidArgumentError: If the identifier is empty or malformed
    """
    language, script = _parse(locale)
    if script is not None:
        return script in RTL_SCRIPTS
    return language in RTL_LANGUAGES


def direction_for_locale(locale: str) -> Direction:
    """Base direction of a locale."""
    return Direction.from_rtl(is_rtl_locale(locale))
