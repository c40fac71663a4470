"""Settings shared by the root group and every subcommand."""

from __future__ import annotations

from typing import Final

#: Accept ``-h`` next to ``--help`` on every command.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Characters of an error message shown without ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Characters of a traceback shown with ``--traceback``.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = ["CLICK_CONTEXT_SETTINGS", "TRACEBACK_SUMMARY_LIMIT", "TRACEBACK_VERBOSE_LIMIT"]
