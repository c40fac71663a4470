"""The ``fake-example`` command group.

The group resolves everything subcommands share: it builds the services,
loads configuration for ``--profile`` with ``--set`` values applied, starts
logging and records ``--traceback``. Subcommands read the result through
:func:`~fake_example.adapters.cli.context.get_cli_context`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click

from fake_example import __init__conf__

from .commands import cli_config, cli_config_deploy, cli_hello, cli_info, cli_selftest
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, enable_tracebacks, load_config, store_cli_context

if TYPE_CHECKING:
    from fake_example.composition import AppServices


def _build_services(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full traceback when a command fails",
)
@click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Read configuration from profile/NAME/ in every layer",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeat for more. VALUE is parsed as JSON when possible.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare shared state, then run the subcommand or print help.

    Args:
        ctx: Click context; ``ctx.obj`` holds the services factory on entry
            and a :class:`~fake_example.adapters.cli.context.CLIContext` on exit.
        traceback: Print full tracebacks for unexpected errors.
        profile: Configuration profile name.
        set_overrides: Raw ``--set`` values.

    Example:
        >>> from click.testing import CliRunner
        >>> from fake_example.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["hello"], obj=build_testing)
        >>> result.exit_code, result.output
        (0, 'Hello, World!\\n')
    """
    services = _build_services(ctx)
    config = load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        CLIContext(
            traceback=traceback,
            config=config,
            services=services,
            profile=profile,
            set_overrides=set_overrides,
        ),
    )
    enable_tracebacks(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_info, cli_hello, cli_selftest, cli_config, cli_config_deploy):
    cli.add_command(_command)


__all__ = ["cli"]
