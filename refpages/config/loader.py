"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from refpages._constants import DEFAULT_EXTENSION

from .helpers import (
    _normalize_extension,
    _optional_path,
    _parse_links,
    _parse_navigation,
    _parse_on_conflict,
    _required_path,
)
from .models import SiteConfig

_DEFAULTS = SiteConfig()


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing a documentation build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``refpages.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with defaults applied for omitted keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a value is invalid (empty output folder, unknown navigation entry,
        malformed links, unknown conflict policy).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from refpages.config import load_site_config
    >>> config = load_site_config(Path("refpages.yaml"))  # doctest: +SKIP
    >>> config.navigation  # doctest: +SKIP
    ['classes']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return SiteConfig(
        metadata=_optional_path(raw.get("metadata")),
        title=str(raw.get("title") or _DEFAULTS.title),
        version=str(raw.get("version") or ""),
        output_dir=_required_path(raw, "output_dir", _DEFAULTS.output_dir),
        extension=_normalize_extension(raw.get("extension", DEFAULT_EXTENSION)),
        guides_dir=_optional_path(raw.get("guides_dir", _DEFAULTS.guides_dir)),
        files_dir=_optional_path(raw.get("files_dir", _DEFAULTS.files_dir)),
        readme=_optional_path(raw.get("readme", _DEFAULTS.readme)),
        assets_dir=_optional_path(raw.get("assets_dir")),
        pygments_style=str(raw.get("pygments_style") or _DEFAULTS.pygments_style),
        navigation=_parse_navigation(raw.get("navigation")),
        links=_parse_links(raw.get("links")),
        on_conflict=_parse_on_conflict(raw.get("on_conflict")),
        dump_metadata=bool(raw.get("dump_metadata", False)),
        dump_path=_optional_path(raw.get("dump_path")),
    )


__all__ = ["load_site_config"]
