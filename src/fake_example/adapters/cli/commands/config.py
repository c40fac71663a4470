"""``config`` shows the merged configuration; ``config-deploy`` writes it out.

Both commands accept ``--profile`` to work on another profile than the root
group's. A rejected profile name exits with ``CONFIG_ERROR`` (78).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

import rich_click as click

from fake_example.adapters.config.deploy import PermissionSettings
from fake_example.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, command_scope, get_cli_context, load_config, require_valid_profile
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


class OctalMode(click.ParamType):
    """Click type accepting ``750`` or ``0o750`` and yielding ``0o750``.

    Example:
        >>> oct(OctalMode().convert("0o640", None, None))
        '0o640'
    """

    name = "octal"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int):
            return value
        try:
            return int(str(value).removeprefix("0o"), 8)
        except ValueError:
            self.fail(f"Invalid octal mode: {value}", param, ctx)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Render as annotated TOML or as JSON",
)
@click.option("--section", default=None, help="Show a single top-level section, e.g. lib_log_rich")
@click.option("--profile", default=None, metavar="NAME", help="Show this profile instead of the root --profile")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration merged from every layer.

    Layers apply in the order defaults, app, host, user, .env, environment;
    the root ``--set`` values apply last. Unknown sections exit with 22.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    config, shown_profile = cli_ctx.config, cli_ctx.profile
    if profile:
        config = load_config(cli_ctx.services, profile, cli_ctx.set_overrides)
        shown_profile = profile

    with command_scope("config", format=fmt.value, profile=shown_profile):
        logger.debug("Showing configuration section %s", section or "<all>")
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=shown_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _list_paths(heading: str, paths: Sequence[Path]) -> None:
    click.echo(f"\n{heading}")
    for path in paths:
        click.echo(f"  ✓ {path}")


def _abort_deploy(written: Sequence[Path], target: DeployTarget, exc: Exception) -> NoReturn:
    """Report what was written before ``target`` failed, then exit."""
    if written:
        _list_paths(f"Deployed before the {target.value} target failed:", written)
    if isinstance(exc, PermissionError):
        logger.error("No permission to deploy the %s layer: %s", target.value, exc)
        click.echo(f"\nError: Permission denied. {exc}", err=True)
        click.echo("Hint: the app and host layers usually need root (sudo).", err=True)
        raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
    logger.error("Deploying the %s layer failed: %s", target.value, exc)
    click.echo(f"\nError: Failed to deploy configuration: {exc}", err=True)
    raise SystemExit(ExitCode.GENERAL_ERROR) from exc


def _deploy_each(
    cli_ctx: CLIContext,
    targets: Sequence[DeployTarget],
    *,
    force: bool,
    profile: str | None,
    set_permissions: bool | None,
    dir_mode: int | None,
    file_mode: int | None,
) -> tuple[list[Path], bool]:
    """Deploy target by target so each layer gets its own modes.

    Returns:
        Written paths and whether permissions were applied.
    """
    settings = PermissionSettings.from_config(cli_ctx.config)
    apply_modes = settings.enabled if set_permissions is None else set_permissions
    written: list[Path] = []
    for target in targets:
        modes = (dir_mode, file_mode)
        if apply_modes:
            modes = settings.modes_for(target, dir_mode=dir_mode, file_mode=file_mode)
        try:
            written += cli_ctx.services.deploy_configuration(
                targets=(target,),
                force=force,
                profile=profile,
                set_permissions=apply_modes,
                dir_mode=modes[0],
                file_mode=modes[1],
            )
        except Exception as exc:  # noqa: BLE001 - reported with the partial result, then re-raised as SystemExit
            _abort_deploy(written, target, exc)
    return written, apply_modes


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Layer to write: app, host or user; repeat for several",
)
@click.option("--force", is_flag=True, default=False, help="Replace files that already exist")
@click.option("--profile", default=None, metavar="NAME", help="Deploy into profile/NAME/ instead of the root --profile")
@click.option(
    "--permissions/--no-permissions",
    "set_permissions",
    default=None,
    help="Apply file modes after writing. Default: [lib_layered_config.default_permissions].enabled",
)
@click.option("--dir-mode", type=OctalMode(), default=None, help="Directory mode for every target, e.g. 750")
@click.option("--file-mode", type=OctalMode(), default=None, help="File mode for every target, e.g. 640")
@click.pass_context
def cli_config_deploy(
    ctx: click.Context,
    targets: tuple[str, ...],
    force: bool,
    profile: str | None,
    set_permissions: bool | None,
    dir_mode: int | None,
    file_mode: int | None,
) -> None:
    r"""Copy the bundled defaults into configuration layers.

    \b
    - app:  system-wide application config (needs root)
    - host: system-wide config for this host name (needs root)
    - user: per-user config (~/.config on Linux)

    Existing files stay untouched unless --force is given. When some targets
    succeed before another fails, the written files are listed before the
    error.
    """
    cli_ctx = get_cli_context(ctx)
    if profile:
        require_valid_profile(profile)
    effective_profile = profile or cli_ctx.profile
    deploy_targets = list(dict.fromkeys(DeployTarget(t.lower()) for t in targets))

    with command_scope(
        "config-deploy", targets=[t.value for t in deploy_targets], force=force, profile=effective_profile
    ):
        written, applied_modes = _deploy_each(
            cli_ctx,
            deploy_targets,
            force=force,
            profile=effective_profile,
            set_permissions=set_permissions,
            dir_mode=dir_mode,
            file_mode=file_mode,
        )
        logger.info("Deployed %d configuration file(s)", len(written))

    if not written:
        click.echo("\nNothing written: every target file already exists.")
        click.echo("Run again with --force to replace them.")
        return
    suffix = (f" (profile: {effective_profile})" if effective_profile else "") + (
        "" if applied_modes else " (permissions not set)"
    )
    _list_paths(f"Configuration deployed successfully{suffix}:", written)


__all__ = ["OctalMode", "cli_config", "cli_config_deploy"]
