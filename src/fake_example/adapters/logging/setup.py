"""lib_log_rich runtime configured from the ``[lib_log_rich]`` section.

Every entry point (console script, ``python -m``, tests) goes through
:func:`init_logging`; application modules only ever call
``logging.getLogger(__name__)``.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from fake_example import __init__conf__


class LoggingSection(BaseModel):
    """Validated ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are modelled; any other key is
    kept and handed to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingSection.model_validate({"console_level": "DEBUG"}).passthrough()
        {'console_level': 'DEBUG'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    def passthrough(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


def runtime_config_from(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the logging section into a ``RuntimeConfig``.

    The service name defaults to the distribution name.
    """
    section = LoggingSection.model_validate(config.get("lib_log_rich", default={}) or {})
    return lib_log_rich.runtime.RuntimeConfig(
        service=section.service or __init__conf__.name,
        environment=section.environment,
        **section.passthrough(),
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    ``.env`` files are honoured so ``LOG_*`` variables apply, and stdlib
    ``logging`` records are bridged into the runtime.

    Args:
        config: Configuration holding the ``[lib_log_rich]`` section.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(runtime_config_from(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingSection", "init_logging", "runtime_config_from"]
