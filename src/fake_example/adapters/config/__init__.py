"""Configuration adapters built on lib_layered_config."""

from __future__ import annotations

from .deploy import PermissionSettings, deploy_configuration
from .display import display_config
from .loader import clear_config_cache, get_config, get_default_config_path, validate_profile
from .overrides import apply_overrides

__all__ = [
    "PermissionSettings",
    "apply_overrides",
    "clear_config_cache",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
