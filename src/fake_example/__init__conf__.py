"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml``. The ``LAYEREDCONF_*``
identifiers determine the platform-specific configuration paths used by
lib_layered_config.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as declared in pyproject.toml.
name = "fake_example"
#: One-line project summary used as CLI help text.
title = "Project scaffold exposing a placeholder Hello, World! value"
#: Current release version.
version = "0.1.0"
#: Project homepage.
homepage = "https://github.com/fake-example/fake_example"
#: Primary author.
author = "Fake Example Maintainers"
#: Contact address for the author.
author_email = "maintainers@fake-example.invalid"
#: Console script name.
shell_command = "fake-example"

#: Vendor identifier for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "fake-example"
#: Application identifier for macOS/Windows configuration paths.
LAYEREDCONF_APP = "fake_example"
#: Slug for Linux XDG configuration paths.
LAYEREDCONF_SLUG = "fake-example"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for fake_example:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
