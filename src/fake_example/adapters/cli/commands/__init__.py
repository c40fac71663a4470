"""Subcommands registered on the root group."""

from __future__ import annotations

from .config import cli_config, cli_config_deploy
from .greeting import cli_hello, cli_info
from .selftest import cli_selftest

__all__ = ["cli_config", "cli_config_deploy", "cli_hello", "cli_info", "cli_selftest"]
