"""fake_example: a scaffold whose one value says ``Hello, World!``.

The package root re-exports the domain (placeholder value and smoke checks),
the production configuration loader, and the metadata printer.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain.behaviors import CANONICAL_TEXT, FakeExample, build_greeting
from .domain.checks import ALL_CHECKS, run_checks

__all__ = [
    "ALL_CHECKS",
    "CANONICAL_TEXT",
    "FakeExample",
    "build_greeting",
    "get_config",
    "print_info",
    "run_checks",
]
