"""State the root group hands to its subcommands.

Contents:
    * :class:`TracebackState` - the two ``lib_cli_exit_tools`` traceback flags.
    * :class:`CLIContext` - services, merged config and root options.
    * :func:`load_config` - config loading with CLI error mapping.
    * :func:`command_scope` - per-command logging context.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from fake_example.adapters.config.loader import validate_profile
from fake_example.adapters.config.overrides import apply_overrides

from .exit_codes import ExitCode

if TYPE_CHECKING:
    from fake_example.composition import AppServices


@dataclass(frozen=True, slots=True)
class TracebackState:
    """Snapshot of ``lib_cli_exit_tools.config`` traceback settings.

    Attributes:
        enabled: Print full tracebacks instead of a one-line summary.
        force_color: Colour tracebacks even when stderr is not a terminal.

    Example:
        >>> saved = TracebackState.capture()
        >>> TracebackState(enabled=True, force_color=True).apply()
        >>> lib_cli_exit_tools.config.traceback
        True
        >>> saved.apply()
        >>> TracebackState.capture() == saved
        True
    """

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        """Read the flags currently set in ``lib_cli_exit_tools.config``."""
        return cls(
            enabled=bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
            force_color=bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
        )

    def apply(self) -> None:
        """Write both flags back into ``lib_cli_exit_tools.config``."""
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def enable_tracebacks(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for the rest of the run.

    Args:
        enabled: Value of the root ``--traceback`` flag.
    """
    TracebackState(enabled=bool(enabled), force_color=bool(enabled)).apply()


@dataclass(slots=True)
class CLIContext:
    """What every subcommand finds in ``ctx.obj``.

    Attributes:
        traceback: The root ``--traceback`` flag.
        config: Configuration merged from all layers plus ``--set`` values.
        services: Port implementations chosen by the caller of ``main``.
        profile: The root ``--profile`` value, if any.
        set_overrides: Raw ``--set`` values, reapplied when a subcommand
            loads another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(ctx: click.Context, state: CLIContext) -> None:
    """Make ``state`` the ``ctx.obj`` seen by subcommands."""
    ctx.obj = state


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root group.

    Raises:
        RuntimeError: When a command runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def require_valid_profile(profile: str) -> None:
    """Exit with ``CONFIG_ERROR`` and a one-line message for a bad profile name.

    Args:
        profile: Name given to ``--profile``.

    Raises:
        SystemExit: ``ExitCode.CONFIG_ERROR`` when the name is rejected.

    Example:
        >>> require_valid_profile("staging")
        >>> try:
        ...     require_valid_profile("../etc")
        ... except SystemExit as exc:
        ...     int(exc.code)
        78
    """
    try:
        validate_profile(profile)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load configuration for ``profile`` and apply ``--set`` values on top.

    Args:
        services: Provides the ``get_config`` port.
        profile: Profile to load, or None for the plain layers.
        set_overrides: Raw ``SECTION.KEY=VALUE`` strings.

    Returns:
        The merged configuration.

    Raises:
        SystemExit: ``ExitCode.CONFIG_ERROR`` when the profile is rejected.
        click.UsageError: When an override is malformed.

    Example:
        >>> from fake_example.composition import build_testing
        >>> config = load_config(build_testing(), None, ("greeting.text=hi",))
        >>> config.get("greeting", default={})["text"]
        'hi'
    """
    if profile is not None:
        require_valid_profile(profile)
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@contextmanager
def command_scope(command: str, **fields: Any) -> Iterator[None]:
    """Bind ``command`` and ``fields`` to log records emitted inside the block.

    Does nothing while the logging runtime is not initialised, which is the
    case under ``build_testing``.
    """
    if not lib_log_rich.runtime.is_initialised():
        yield
        return
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command, **fields}):
        yield


__all__ = [
    "CLIContext",
    "TracebackState",
    "command_scope",
    "enable_tracebacks",
    "get_cli_context",
    "load_config",
    "require_valid_profile",
    "store_cli_context",
]
