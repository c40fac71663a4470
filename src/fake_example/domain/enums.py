"""String enums shared by the CLI and the adapters."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``config`` and ``selftest`` render their report.

    Members compare equal to their string value, so Click choices map
    straight onto them.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration layer that ``config-deploy`` writes into.

    ``app`` and ``host`` are system-wide and usually need elevated
    privileges; ``user`` lives under the user's config directory.

    Example:
        >>> [t.value for t in DeployTarget]
        ['app', 'host', 'user']
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = ["DeployTarget", "OutputFormat"]
