"""Exception hierarchy for Bidiwrap."""


class BidiWrapError(Exception):
    """Base exception for all Bidiwrap errors."""

    pass


class InvalidArgumentError(BidiWrapError, ValueError):
    """A caller passed a value the formatter cannot work with."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid argument '{name}': {reason}")


class HeuristicError(BidiWrapError):
    """A directionality heuristic broke its contract."""

    def __init__(self, heuristic: object, result: object) -> None:
        self.heuristic = heuristic
        self.result = result
        label = getattr(heuristic, "__name__", repr(heuristic))
        super().__init__(
            f"Heuristic '{label}' returned {result!r} instead of a Direction"
        )


class UnknownHeuristicError(BidiWrapError):
    """Requested heuristic name is not registered."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(
            f"Unknown heuristic '{name}' (expected one of: {', '.join(known)})"
        )
