"""Command-line adapter: the ``fake-example`` group and its runner.

Other layers import :func:`main` and :data:`cli` from here.
"""

from __future__ import annotations

from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = ["ExitCode", "cli", "main"]
