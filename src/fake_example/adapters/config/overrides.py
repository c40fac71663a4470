"""``--set SECTION.KEY[.SUBKEY...]=VALUE`` overrides layered on top of Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import orjson
from lib_layered_config import Config


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single ``--set`` assignment.

    Attributes:
        path: Section followed by the nested key names, never empty.
        value: Value after JSON coercion.
    """

    path: tuple[str, ...]
    value: Any

    @property
    def section(self) -> str:
        return self.path[0]

    def as_nested(self) -> dict[str, Any]:
        """Turn the dotted path into nested dicts ending in the value.

        Example:
            >>> ConfigOverride(("a", "b", "c"), 1).as_nested()
            {'a': {'b': {'c': 1}}}
        """
        nested: Any = self.value
        for part in reversed(self.path):
            nested = {part: nested}
        return nested


def coerce_value(text: str) -> Any:
    """Read ``text`` as a JSON literal when it is one, else keep the string.

    Example:
        >>> coerce_value("8192"), coerce_value("false"), coerce_value("DEBUG")
        (8192, False, 'DEBUG')
    """
    if not text:
        return text
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError:
        return text


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY=VALUE``; everything after the first ``=`` is the value.

    Raises:
        ValueError: On a missing ``=``, a key without a section, or an
            empty path component.

    Example:
        >>> parse_override("lib_log_rich.console_level=DEBUG")
        ConfigOverride(path=('lib_log_rich', 'console_level'), value='DEBUG')
    """
    dotted, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path = tuple(dotted.split("."))
    if len(path) < 2:
        raise ValueError(f"Invalid override {raw!r}: expected SECTION.KEY before '='")
    if not all(path):
        raise ValueError(f"Invalid override {raw!r}: empty name in {dotted!r}")
    return ConfigOverride(path=path, value=coerce_value(value))


def _merge(target: dict[str, Any], patch: dict[str, Any]) -> None:
    for key, value in patch.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _merge(current, value)
        else:
            target[key] = value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` assignment applied, later ones winning.

    The original Config is never modified; with nothing to apply it is
    returned as is.

    Raises:
        ValueError: If any assignment is malformed.

    Example:
        >>> base = Config({"s": {"k": 1, "keep": True}}, {})
        >>> apply_overrides(base, ("s.k=2",)).as_dict()["s"]
        {'k': 2, 'keep': True}
    """
    if not raw_overrides:
        return config
    merged: dict[str, Any] = {}
    for raw in raw_overrides:
        _merge(merged, parse_override(raw).as_nested())
    return config.with_overrides(merged)


__all__ = ["ConfigOverride", "apply_overrides", "coerce_value", "parse_override"]
