"""Utility helpers shared by the refpages configuration loader."""

from __future__ import annotations

from pathlib import Path

from refpages._constants import NAVIGATION_KINDS
from refpages.generator.registry import OnConflict

from .models import SiteConfigError


def _optional_path(value: object | None) -> Path | None:
    """Return a Path for non-empty values, or None."""
    if value is None:
        return None
    text = str(value).strip()
    return Path(text) if text else None


def _required_path(raw: dict[str, object], key: str, default: Path) -> Path:
    """Return ``raw[key]`` as a Path, falling back to ``default`` when absent."""
    if key not in raw:
        return default
    path = _optional_path(raw[key])
    if path is None:
        msg = f"'{key}' must not be empty."
        raise SiteConfigError(msg)
    return path


def _normalize_extension(value: object | None) -> str:
    """Return ``value`` as a page suffix with a leading dot, or ``""``."""
    text = str(value or "").strip()
    if text and not text.startswith("."):
        text = f".{text}"
    return text


def _parse_navigation(value: object | None) -> list[str]:
    """Validate the navigation fragment list."""
    if value is None:
        return ["classes"]
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        msg = "'navigation' must be a list of fragment names."
        raise SiteConfigError(msg)
    names = [str(item).strip() for item in value]
    unknown = [name for name in names if name not in NAVIGATION_KINDS]
    if unknown:
        allowed = ", ".join(NAVIGATION_KINDS)
        msg = f"Unknown navigation entries {unknown}; expected any of: {allowed}."
        raise SiteConfigError(msg)
    return names


def _parse_links(value: object | None) -> dict[str, str]:
    """Return symbol links as a plain ``str -> str`` mapping."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = "'links' must map symbol names to URLs."
        raise SiteConfigError(msg)
    links: dict[str, str] = {}
    for name, url in value.items():
        if not str(name).strip() or url is None or not str(url).strip():
            msg = f"Link entry '{name}' needs both a symbol name and a URL."
            raise SiteConfigError(msg)
        links[str(name).strip()] = str(url).strip()
    return links


def _parse_on_conflict(value: object | None) -> OnConflict:
    """Map the ``on_conflict`` setting to an :class:`OnConflict` member."""
    if value is None:
        return OnConflict.LAST_WRITE_WINS
    try:
        return OnConflict(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(policy.value for policy in OnConflict)
        msg = f"Unknown on_conflict policy '{value}'; expected one of: {allowed}."
        raise SiteConfigError(msg) from exc


def parse_link_option(value: str) -> tuple[str, str]:
    """Split a ``NAME=URL`` command-line value.

    Raises
    ------
    ValueError
        If either side of the ``=`` is empty.
    """
    name, sep, url = value.partition("=")
    if not sep or not name.strip() or not url.strip():
        msg = f"Expected NAME=URL, got '{value}'."
        raise ValueError(msg)
    return name.strip(), url.strip()


__all__ = [
    "_normalize_extension",
    "_optional_path",
    "_parse_links",
    "_parse_navigation",
    "_parse_on_conflict",
    "_required_path",
    "parse_link_option",
]
