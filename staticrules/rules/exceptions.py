"""Custom exceptions for the static rule engine."""


class LookupFailure(RuntimeError):
    """Raised by read capabilities when a key could not be resolved.

    Absence of a value is not a failure: read capabilities return ``None`` for
    that. Rules never catch this exception, it reaches the caller unchanged.
    """

    def __init__(self, key: str, message: str | None = None) -> None:
        super().__init__(message or f"Lookup of key '{key}' failed")
        self.key = key


class RuleConstructionError(ValueError):
    """Raised when a rule or factory is built in violation of its contract."""


__all__ = ["LookupFailure", "RuleConstructionError"]
