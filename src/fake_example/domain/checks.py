"""Registry of scaffold smoke checks and a runner reporting pass/fail.

Contents:
    * :func:`check_example` - Assert the placeholder carries its canonical text.
    * :data:`ALL_CHECKS` - Ordered registry of named checks.
    * :class:`CheckResult` - Outcome of a single check.
    * :func:`run_checks` - Execute checks and collect their outcomes.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .behaviors import CANONICAL_TEXT, FakeExample
from .errors import CheckFailedError

SmokeCheck = Callable[[], None]
"""A zero-argument check that raises :class:`CheckFailedError` on failure."""


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of running one registered check.

    Attributes:
        name: Registry name of the check.
        passed: Whether the check completed without a failure.
        detail: Failure message, empty when the check passed.
    """

    name: str
    passed: bool
    detail: str = ""


def check_example(example: FakeExample | None = None) -> None:
    """Verify that a placeholder value carries the canonical text.

    Args:
        example: Placeholder to inspect. A fresh instance is built when None.

    Raises:
        CheckFailedError: If ``example.text`` differs from the canonical text.

    Example:
        >>> check_example()
        >>> check_example(FakeExample(text="Goodbye"))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        CheckFailedError: expected 'Hello, World!', got 'Goodbye'
    """
    subject = example if example is not None else FakeExample()
    if subject.text != CANONICAL_TEXT:
        raise CheckFailedError(f"expected {CANONICAL_TEXT!r}, got {subject.text!r}")


ALL_CHECKS: tuple[tuple[str, SmokeCheck], ...] = (("check_example", check_example),)


def run_checks(checks: Sequence[tuple[str, SmokeCheck]] = ALL_CHECKS) -> list[CheckResult]:
    """Run each check in registry order and collect the outcomes.

    Only :class:`CheckFailedError` is translated into a failed result;
    any other exception is a defect in the check itself and propagates.

    Args:
        checks: Ordered ``(name, check)`` pairs. Defaults to :data:`ALL_CHECKS`.

    Returns:
        One :class:`CheckResult` per check, in the same order.

    Example:
        >>> [(r.name, r.passed) for r in run_checks()]
        [('check_example', True)]
    """
    results: list[CheckResult] = []
    for name, check in checks:
        try:
            check()
        except CheckFailedError as exc:
            results.append(CheckResult(name=name, passed=False, detail=str(exc)))
        else:
            results.append(CheckResult(name=name, passed=True))
    return results


__all__ = [
    "ALL_CHECKS",
    "CheckResult",
    "SmokeCheck",
    "check_example",
    "run_checks",
]
