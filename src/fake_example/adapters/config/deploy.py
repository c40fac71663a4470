"""Deployment of ``defaultconfig.toml`` into the app, host and user layers.

Permission modes come from ``[lib_layered_config.default_permissions]``;
system layers default to 755/644 and the user layer to 700/600.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lib_layered_config import (
    DEFAULT_APP_DIR_MODE,
    DEFAULT_APP_FILE_MODE,
    DEFAULT_USER_DIR_MODE,
    DEFAULT_USER_FILE_MODE,
    Config,
    deploy_config,
)
from lib_layered_config.examples.deploy import DeployAction

from fake_example import __init__conf__
from fake_example.adapters.config.loader import get_default_config_path, validate_profile
from fake_example.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})

_FALLBACK_MODES: dict[DeployTarget, tuple[int, int]] = {
    DeployTarget.APP: (DEFAULT_APP_DIR_MODE, DEFAULT_APP_FILE_MODE),
    DeployTarget.HOST: (DEFAULT_APP_DIR_MODE, DEFAULT_APP_FILE_MODE),
    DeployTarget.USER: (DEFAULT_USER_DIR_MODE, DEFAULT_USER_FILE_MODE),
}


def parse_mode(value: object, fallback: int) -> int:
    """Read a permission mode given as an int or an octal string.

    Booleans and unreadable strings log a warning and yield ``fallback``.

    Example:
        >>> [oct(parse_mode(v, 0)) for v in (0o750, "0o750", "750")]
        ['0o750', '0o750', '0o750']
        >>> oct(parse_mode("rwx", 0o600))
        '0o600'
    """
    if isinstance(value, bool):
        logger.warning("Ignoring boolean permission mode %r", value)
        return fallback
    if isinstance(value, int):
        return value
    text = str(value).strip()
    try:
        return int(text.removeprefix("0o"), 8)
    except ValueError:
        logger.warning("Invalid permission mode %r, using %o", value, fallback)
        return fallback


@dataclass(frozen=True, slots=True)
class LayerModes:
    directory: int
    file: int


@dataclass(frozen=True, slots=True)
class PermissionSettings:
    """Whether deploy sets modes, and which modes each layer gets."""

    enabled: bool
    modes: Mapping[DeployTarget, LayerModes]

    @classmethod
    def from_config(cls, config: Config) -> PermissionSettings:
        """Build settings from ``[lib_layered_config.default_permissions]``.

        Example:
            >>> settings = PermissionSettings.from_config(Config({}, {}))
            >>> settings.enabled, oct(settings.modes[DeployTarget.USER].file)
            (True, '0o600')
        """
        section: dict[str, Any] = config.get("lib_layered_config", default={}).get("default_permissions", {})
        modes = {
            target: LayerModes(
                directory=parse_mode(section.get(f"{target.value}_directory", dir_default), dir_default),
                file=parse_mode(section.get(f"{target.value}_file", file_default), file_default),
            )
            for target, (dir_default, file_default) in _FALLBACK_MODES.items()
        }
        return cls(enabled=bool(section.get("enabled", True)), modes=modes)

    def modes_for(
        self, target: DeployTarget, *, dir_mode: int | None = None, file_mode: int | None = None
    ) -> tuple[int, int]:
        """Return ``(dir_mode, file_mode)`` for ``target``; explicit modes win."""
        layer = self.modes[target]
        return (
            layer.directory if dir_mode is None else dir_mode,
            layer.file if file_mode is None else file_mode,
        )


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    """Copy the bundled defaults into ``targets``.

    On Linux without a profile the destinations are
    ``/etc/xdg/<slug>/config.toml`` (app),
    ``/etc/xdg/<slug>/hosts/<hostname>.toml`` (host) and
    ``~/.config/<slug>/config.toml`` (user).

    Args:
        targets: Layers to write.
        force: Replace files that already exist.
        profile: Write below ``profile/<name>/`` instead.
        set_permissions: Apply ``dir_mode``/``file_mode`` (or library defaults).
        dir_mode: Directory mode for every target.
        file_mode: File mode for every target.

    Returns:
        Paths created or overwritten, ``.d`` snippets included. Files left
        in place are not listed.

    Raises:
        PermissionError: When a system layer is not writable.
        ValueError: When ``profile`` is not a valid profile name.
    """
    if profile is not None:
        validate_profile(profile)

    outcomes = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[target.value for target in targets],
        force=force,
        set_permissions=set_permissions,
        dir_mode=dir_mode,
        file_mode=file_mode,
    )

    written: list[Path] = []
    for outcome in outcomes:
        for item in (outcome, *outcome.dot_d_results):
            if item.action in _WRITTEN:
                written.append(item.destination)
    logger.debug("Deployed %d file(s) to %s", len(written), [t.value for t in targets])
    return written


__all__ = ["LayerModes", "PermissionSettings", "deploy_configuration", "parse_mode"]
