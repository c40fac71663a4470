"""Domain layer: pure values and rules, no I/O."""

from __future__ import annotations

from .behaviors import CANONICAL_TEXT, FakeExample, build_greeting
from .checks import ALL_CHECKS, CheckResult, SmokeCheck, check_example, run_checks
from .enums import DeployTarget, OutputFormat
from .errors import CheckFailedError

__all__ = [
    "ALL_CHECKS",
    "CANONICAL_TEXT",
    "CheckFailedError",
    "CheckResult",
    "DeployTarget",
    "FakeExample",
    "OutputFormat",
    "SmokeCheck",
    "build_greeting",
    "check_example",
    "run_checks",
]
