"""Composition root: the only place adapters are bound to ports.

The CLI receives a zero-argument factory returning :class:`AppServices`;
``build_production`` is used by the entry points, ``build_testing`` by
tests that must not touch the filesystem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging
from ..domain.checks import run_checks

if TYPE_CHECKING:
    from ..application.ports import DeployConfiguration, DisplayConfig, GetConfig, InitLogging, RunChecks

    # pyright checks each adapter against its Protocol here
    _get_config: GetConfig = get_config
    _deploy_configuration: DeployConfiguration = deploy_configuration
    _display_config: DisplayConfig = display_config
    _init_logging: InitLogging = init_logging
    _run_checks: RunChecks = run_checks


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the CLI."""

    get_config: GetConfig
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    init_logging: InitLogging
    run_checks: RunChecks


def build_production() -> AppServices:
    """Real configuration layers, real deployment, lib_log_rich logging.

    Example:
        >>> build_production().run_checks()[0].passed
        True
    """
    return AppServices(
        get_config=get_config,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        init_logging=init_logging,
        run_checks=run_checks,
    )


def build_testing() -> AppServices:
    """In-memory configuration and logging; the check runner is shared."""
    from ..adapters.memory import (
        deploy_configuration_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        deploy_configuration=deploy_configuration_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        run_checks=run_checks,
    )


__all__ = ["AppServices", "build_production", "build_testing", "get_config"]
