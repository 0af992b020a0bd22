"""Environment placeholder expansion for raw configuration text.

Supports ``${NAME}`` and ``${NAME:default}``. Anything that does not match
the placeholder grammar, including a bare ``$`` inside a password, is kept
verbatim.
"""

from __future__ import annotations

import os
import re
from typing import Callable, Mapping

Lookup = Callable[[str], str]

# The first ':' inside the braces starts the fallback; a placeholder never spans lines.
PLACEHOLDER_PATTERN = re.compile(r"\$\{(?P<name>[a-zA-Z_][a-zA-Z0-9_/.]*)(?::(?P<fallback>[^}\r\n]*))?\}")


def expand(text: str, mapping: Lookup) -> str:
    """Replace every placeholder in ``text`` using ``mapping``.

    Args:
        text: Raw configuration text.
        mapping: Callable returning the value for a name, ``""`` when unset.

    Returns:
        The expanded text. When a fallback is given and the looked-up value
        is empty, the fallback literal is substituted instead.
    """

    def _replace(match: re.Match[str]) -> str:
        value = mapping(match.group("name"))
        fallback = match.group("fallback")
        if fallback is not None and value == "":
            return fallback
        return value

    return PLACEHOLDER_PATTERN.sub(_replace, text)


def env_lookup(env: Mapping[str, str] | None = None) -> Lookup:
    """Build a lookup over ``env`` (``os.environ`` by default) where missing keys map to ``""``."""

    source = env if env is not None else os.environ

    def _lookup(name: str) -> str:
        return source.get(name, "")

    return _lookup


def expand_env(text: str, env: Mapping[str, str] | None = None) -> str:
    return expand(text, env_lookup(env))


__all__ = ["Lookup", "PLACEHOLDER_PATTERN", "env_lookup", "expand", "expand_env"]
