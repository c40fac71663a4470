"""Run the root group and turn its outcome into a process exit code.

``lib_cli_exit_tools.run_cli`` cannot hand ``obj`` to Click, so
:func:`main` calls ``cli.main(..., standalone_mode=False)`` itself and maps
every way a run can end:

* normal return, ``--help`` and ``--version``: ``0`` or Click's own code
* Click usage errors: Click's message and exit code ``2``
* ``SystemExit`` from a command: its code, the command already printed why
* any other exception: a one-line summary, or the full traceback under
  ``--traceback``, and the code ``lib_cli_exit_tools`` assigns to it
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from fake_example import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState

if TYPE_CHECKING:
    from fake_example.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    verbose = TracebackState.capture().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _dispatch(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        return lib_cli_exit_tools.get_system_exit_code(exc)
    except BaseException as exc:  # noqa: BLE001 - last stop before the shell; KeyboardInterrupt included
        return _report_failure(exc)
    # Click returns the exit code of ``--help``/``--version``; commands return None.
    return outcome if isinstance(outcome, int) else 0


def _shutdown_logging() -> None:
    # A worker thread shutting the runtime down would silence the main thread.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI once and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back the way they were
            before the run. Embedders that run the CLI repeatedly keep this on.
        services_factory: Zero-argument callable returning the
            :class:`~fake_example.composition.AppServices` for this run, usually
            ``build_production`` or ``build_testing``.

    Returns:
        The exit code, ready for ``sys.exit``.

    Raises:
        ValueError: When ``services_factory`` is missing.

    Example:
        >>> from fake_example.composition import build_testing
        >>> main(["hello"], services_factory=build_testing)
        Hello, World!
        0
        >>> main(["selftest", "--format", "json"], services_factory=build_testing)  # doctest: +ELLIPSIS
        [
        ...
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = TracebackState.capture()
    try:
        return _dispatch(list(sys.argv[1:] if argv is None else argv), services_factory)
    finally:
        if restore_traceback:
            saved.apply()
        _shutdown_logging()


__all__ = ["main"]
