"""Callable Protocols the CLI depends on.

Adapters are plain module-level functions; they satisfy these Protocols
structurally, so the composition root can swap production and in-memory
implementations without the CLI noticing.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.checks import CheckResult
from ..domain.enums import DeployTarget, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return merged configuration for an optional profile.

    Raises ``ValueError`` for an unusable profile name.
    """

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DeployConfiguration(Protocol):
    """Write the bundled defaults into the given layers; return written paths."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
        set_permissions: bool = ...,
        dir_mode: int | None = ...,
        file_mode: int | None = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Render configuration; raises ``ValueError`` for an unknown section."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    def __call__(self, config: Config) -> None: ...


class RunChecks(Protocol):
    """Run the registered smoke checks, one result per check."""

    def __call__(self) -> list[CheckResult]: ...


__all__ = ["DeployConfiguration", "DisplayConfig", "GetConfig", "InitLogging", "RunChecks"]
