"""Project name checks shared by the configuration model and CLI."""

from __future__ import annotations

import re
import unicodedata

__all__ = ["slugify", "is_valid_package_name", "suggest_project_name", "validate_project_name"]


_SEPARATORS = re.compile(r"[\s_\-]+")
# npm package names: lowercase, URL safe, no leading dot or underscore.
_PACKAGE_NAME = re.compile(r"^[a-z0-9~][a-z0-9._~-]*$")
_MAX_PACKAGE_NAME_LENGTH = 214


def slugify(value: str, *, separator: str = "-") -> str:
    """Create a lowercase ASCII slug from ``value``.

    Parameters
    ----------
    value:
        The text to normalise.
    separator:
        The character used to join individual words.
    """

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\s\-.]", "", text).strip().lower()

    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator + ".")


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when ``name`` is accepted by npm as a package name."""

    if not name or len(name) > _MAX_PACKAGE_NAME_LENGTH:
        return False
    return bool(_PACKAGE_NAME.match(name))


def suggest_project_name(name: str) -> str:
    """Return a usable project name close to ``name``."""

    return slugify(name) or "my-app"


def validate_project_name(name: str) -> str:
    """Return ``name`` unchanged or raise :class:`ValueError` explaining why it is unusable."""

    if not name or not name.strip():
        raise ValueError("project name must not be empty")
    if name in {".", ".."} or "/" in name or "\\" in name:
        raise ValueError(f"project name '{name}' must be a single directory name")
    if not is_valid_package_name(name):
        raise ValueError(
            f"project name '{name}' is not a valid npm package name; "
            f"try '{suggest_project_name(name)}'"
        )
    return name
