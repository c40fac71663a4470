"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class CheckFailedError(AssertionError):
    """A smoke check observed a value other than the expected one.

    Inherits from AssertionError so test harnesses report it as an
    ordinary assertion failure.

    Example:
        >>> from fake_example.domain.errors import CheckFailedError
        >>> err = CheckFailedError("expected 'a', got 'b'")
        >>> str(err)
        "expected 'a', got 'b'"
        >>> isinstance(err, AssertionError)
        True
    """


__all__ = [
    "CheckFailedError",
]
