"""Configuration rendering for the ``config`` command."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LayeredOutputFormat
from lib_layered_config import display_config as render_config
from rich.console import Console

from fake_example.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` (or one ``section``) as TOML-like text or JSON.

    Buffered log records are flushed before printing so they cannot land
    in the middle of the rendered output. Secret-looking keys are masked by
    lib_layered_config.

    Raises:
        ValueError: If ``section`` is not present in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_config(
        config,
        output_format=LayeredOutputFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
