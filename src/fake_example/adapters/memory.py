"""In-memory stand-ins for the configuration and logging ports.

Used by :func:`fake_example.composition.build_testing`: nothing touches the
filesystem and the logging runtime is never started.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from fake_example.domain.enums import DeployTarget, OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return Config({}, {})


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    """Write nothing and report nothing written."""
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    pass


def init_logging_in_memory(config: Config) -> None:
    pass


__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
