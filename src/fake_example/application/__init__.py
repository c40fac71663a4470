"""Application layer: the ports adapters plug into."""

from __future__ import annotations

from .ports import DeployConfiguration, DisplayConfig, GetConfig, InitLogging, RunChecks

__all__ = ["DeployConfiguration", "DisplayConfig", "GetConfig", "InitLogging", "RunChecks"]
