"""``info`` and ``hello``: what is installed, and what it says."""

from __future__ import annotations

import logging

import rich_click as click

from fake_example import __init__conf__
from fake_example.domain.behaviors import build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import command_scope

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print name, version, homepage and author of the installed package."""
    with command_scope("info"):
        logger.debug("Printing package metadata")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print the text of a default FakeExample.

    Example:
        >>> from click.testing import CliRunner
        >>> CliRunner().invoke(cli_hello).output
        'Hello, World!\\n'
    """
    with command_scope("hello"):
        greeting = build_greeting()
        logger.debug("Greeting with %r", greeting)
        click.echo(greeting)


__all__ = ["cli_hello", "cli_info"]
