"""Layered configuration for fake_example.

Sources merge in the order ``defaults -> app -> host -> user -> dotenv -> env``;
a profile inserts ``profile/<name>/`` into every file path. Each
``(profile, start_dir)`` pair is read from disk once per process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from fake_example import __init__conf__

_DEFAULTS_FILE = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str, max_length: int = DEFAULT_MAX_PROFILE_LENGTH) -> None:
    """Refuse profile names that cannot safely become a directory name.

    Raises:
        ValueError: For empty, overlong, reserved or path-like names.

    Example:
        >>> validate_profile("staging-v2")
        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length)


def get_default_config_path() -> Path:
    """Path of the ``defaultconfig.toml`` bundled with the package."""
    return _DEFAULTS_FILE


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULTS_FILE,
        start_dir=start_dir,
    )


def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, validating ``profile`` first.

    Args:
        profile: Optional profile name.
        start_dir: Where ``.env`` discovery starts; the working directory
            when omitted.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> get_config().get("missing", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile, start_dir)


def clear_config_cache() -> None:
    """Forget every cached load so the next call re-reads the layers."""
    _read_layers.cache_clear()


__all__ = ["clear_config_cache", "get_config", "get_default_config_path", "validate_profile"]
