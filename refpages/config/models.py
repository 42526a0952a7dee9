"""Typed dataclasses describing refpages site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from refpages._constants import DEFAULT_DUMP_NAME, DEFAULT_EXTENSION
from refpages.generator.registry import OnConflict


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved documentation build definition.

    Attributes
    ----------
    metadata : Path or None
        Digested metadata JSON produced by the digestion step.
    title : str
        Site title shown in the header and page titles.
    version : str
        Version label shown in the header; empty hides it.
    output_dir : Path
        Folder receiving pages, assets, and the index page.
    extension : str
        Suffix appended to every page name, for example ``".html"``.
    guides_dir : Path or None
        Folder whose markdown files become guide pages.
    files_dir : Path or None
        Folder whose top-level markdown files become file pages.
    readme : Path or None
        Markdown source of the index page; ``None`` skips the index.
    assets_dir : Path or None
        Extra static assets copied next to the bundled stylesheet.
    pygments_style : str
        Pygments style used for code blocks.
    navigation : list[str]
        Navigation fragments shown on every page, in order.
    links : dict[str, str]
        Manually registered symbol URLs, usually external references.
    on_conflict : OnConflict
        Policy when a symbol is registered twice with different URLs.
    dump_metadata : bool
        Whether to write the digested metadata as JSON after the build.
    dump_path : Path or None
        Destination of the metadata dump; defaults inside ``output_dir``.
    """

    metadata: Path | None = None
    title: str = "API Documentation"
    version: str = ""
    output_dir: Path = Path("docs")
    extension: str = DEFAULT_EXTENSION
    guides_dir: Path | None = Path("guides")
    files_dir: Path | None = Path()
    readme: Path | None = Path("README.md")
    assets_dir: Path | None = None
    pygments_style: str = "monokai"
    navigation: list[str] = dc.field(default_factory=lambda: ["classes"])
    links: dict[str, str] = dc.field(default_factory=dict)
    on_conflict: OnConflict = OnConflict.LAST_WRITE_WINS
    dump_metadata: bool = False
    dump_path: Path | None = None

    def resolve_dump_path(self) -> Path:
        """Return the explicit dump path or the default one in ``output_dir``."""
        return self.dump_path or self.output_dir / DEFAULT_DUMP_NAME


__all__ = ["SiteConfig", "SiteConfigError"]
