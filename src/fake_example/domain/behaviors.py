"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from dataclasses import dataclass

CANONICAL_TEXT = "Hello, World!"


@dataclass(frozen=True, slots=True)
class FakeExample:
    """Placeholder value emitted by the project scaffold.

    Carries a single fixed string field. A freshly constructed instance
    always holds :data:`CANONICAL_TEXT`.

    Attributes:
        text: The placeholder text.

    Example:
        >>> FakeExample().text
        'Hello, World!'
        >>> FakeExample(text="other") == FakeExample()
        False
    """

    text: str = CANONICAL_TEXT


def build_greeting() -> str:
    r"""Return the text of a freshly constructed placeholder.

    Provide a deterministic success path that the documentation, smoke
    tests, and packaging checks can rely on.

    Returns:
        The canonical placeholder text.

    Example:
        >>> build_greeting()
        'Hello, World!'
    """
    return FakeExample().text


__all__ = [
    "CANONICAL_TEXT",
    "FakeExample",
    "build_greeting",
]
