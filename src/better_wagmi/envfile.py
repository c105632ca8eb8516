"""Serialisation of ``.env.local`` files read by Next.js.

Next.js loads environment files with ``dotenv`` and then ``dotenv-expand``.
Inside a quoted value ``dotenv`` does not understand backslash escapes for
quote characters, so a value containing ``"`` is written with a different
quote character instead. ``$`` is escaped as ``\\$`` because ``dotenv-expand``
would otherwise treat it as a variable reference.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable

from .errors import EnvFormatError

__all__ = [
    "ENV_FILE_NAME",
    "WALLETCONNECT_ENV_KEY",
    "format_env_assignment",
    "quote_env_value",
    "render_env_file",
    "write_env_file",
]


LOGGER = logging.getLogger(__name__)

ENV_FILE_NAME = ".env.local"
WALLETCONNECT_ENV_KEY = "NEXT_PUBLIC_WALLETCONNECT_PROJECT_ID"

_KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_QUOTES = ('"', "'", "`")
_FORBIDDEN = ("\n", "\r", "\0")


def quote_env_value(value: str) -> str:
    """Return ``value`` quoted for a dotenv assignment.

    Double quotes are preferred. Single quotes are used when the value contains
    a double quote, backticks when it contains both.
    """

    if any(char in value for char in _FORBIDDEN):
        raise EnvFormatError("environment values must be a single line")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EnvFormatError("environment values must be valid UTF-8 text") from exc

    escaped = value.replace("$", "\\$")
    for quote in _QUOTES:
        if quote not in value:
            return f"{quote}{escaped}{quote}"

    raise EnvFormatError("environment values cannot contain all of \", ' and `")


def format_env_assignment(key: str, value: str) -> str:
    """Return a ``KEY="value"`` line."""

    if not _KEY_PATTERN.match(key):
        raise EnvFormatError(f"invalid environment variable name '{key}'")
    return f"{key}={quote_env_value(value)}"


def render_env_file(entries: Iterable[tuple[str, str]]) -> str:
    """Render ``entries`` as dotenv text, one assignment per line."""

    return "\n".join(format_env_assignment(key, value) for key, value in entries)


def write_env_file(
    project_root: str | Path,
    entries: Iterable[tuple[str, str]],
    *,
    filename: str = ENV_FILE_NAME,
) -> Path:
    """Write ``entries`` to ``project_root / filename``, replacing any existing file."""

    content = render_env_file(entries)
    destination = Path(project_root) / filename
    destination.write_text(content, encoding="utf-8", newline="")
    LOGGER.debug("Wrote %s", destination)
    return destination
