"""Fixtures shared by the CLI and configuration tests.

Ports are swapped one at a time through :func:`dataclasses.replace` on a
real :class:`~fake_example.composition.AppServices`, so every other port
keeps its production behaviour.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

if TYPE_CHECKING:
    from fake_example.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
_EXIT_TOOLS_FIELDS = tuple(f.name for f in dataclasses.fields(type(lib_cli_exit_tools.config)))


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh runner; read ``result.stdout`` to keep log lines out of assertions."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    from fake_example.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> ServicesFactory:
    """In-memory services: empty config, no files written, no logging runtime."""
    from fake_example.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from tracebacks off and put ``lib_cli_exit_tools.config`` back afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    saved = {name: getattr(lib_cli_exit_tools.config, name) for name in _EXIT_TOOLS_FIELDS}
    yield
    for name, value in saved.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def fresh_config() -> None:
    """Drop configuration cached by earlier tests."""
    from fake_example.adapters.config.loader import clear_config_cache

    clear_config_cache()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    return lambda data: Config(data, {})


@pytest.fixture
def source_info_factory() -> Callable[..., SourceInfo]:
    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def services_with(fresh_config: None) -> Callable[..., ServicesFactory]:
    """Return ``services_with(**ports)`` building a factory of production services.

    A :class:`Config` or plain dict passed as ``get_config`` is served for
    every profile.
    """
    from fake_example.composition import build_production

    def _build(**ports: Any) -> ServicesFactory:
        served = ports.get("get_config")
        if isinstance(served, dict):
            served = Config(served, {})
        if isinstance(served, Config):
            ports["get_config"] = lambda **_kwargs: served
        services = dataclasses.replace(build_production(), **ports)
        return lambda: services

    return _build


@pytest.fixture
def profile_recorder(services_with: Callable[..., ServicesFactory]) -> tuple[list[str | None], ServicesFactory]:
    """A factory whose ``get_config`` records each profile it is asked for."""
    requested: list[str | None] = []

    def _get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
        requested.append(profile)
        return Config({"greeting": {"profile": profile or "none"}}, {})

    return requested, services_with(get_config=_get_config)
