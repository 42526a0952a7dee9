"""High-level orchestration for documentation site generation.

This module drives one whole-tree pass: it seeds a :class:`LinkRegistry` from
the digested metadata and configured links, builds navigation once, renders
every class, guide, and root markdown file through the matching page renderer,
wraps each fragment in the shared layout, and writes the results together with
static assets and the index page.

Every page is rendered in memory before anything is written, so a failing
render aborts the run without leaving a partial page set behind.

Example
-------
>>> from pathlib import Path
>>> from refpages.config import load_site_config
>>> from refpages.generator import PageAssembler
>>> from refpages.metadata import load_metadata
>>> config = load_site_config(Path("refpages.yaml"))  # doctest: +SKIP
>>> metadata = load_metadata(config.metadata)  # doctest: +SKIP
>>> PageAssembler(config, metadata).run()  # doctest: +SKIP
[PosixPath('docs/Ext.Component.html'), ...]
"""

from __future__ import annotations

import logging
import shutil
import typing as typ
from pathlib import Path

from refpages._constants import ASSETS_DIRNAME, INDEX_STEM, STYLESHEET_NAME
from refpages.metadata import dump_metadata

from .models import RenderedPage
from .navigation import NavigationBuilder, discover_markdown, label_for
from .pages import ClassPage, FilePage
from .registry import LinkRegistry
from .renderer import HtmlContentRenderer
from .templates import TemplateRenderer

if typ.TYPE_CHECKING:
    from refpages.config import SiteConfig
    from refpages.metadata import DigestedMetadata

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


class PageGenerationError(RuntimeError):
    """Raised when the page set cannot be produced consistently."""


class PageAssembler:
    """Render every documented entity into themed HTML pages on disk."""

    def __init__(
        self,
        config: SiteConfig,
        metadata: DigestedMetadata,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the assembler with configuration and template context.

        Parameters
        ----------
        config : SiteConfig
            Output location, page extension, sources, and composition choices.
        metadata : DigestedMetadata
            Digested tree; read only.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.config = config
        self.metadata = metadata
        self.templates = TemplateRenderer(templates_dir)
        self.registry = LinkRegistry(on_conflict=config.on_conflict)
        self.pygments_css = HtmlContentRenderer(config.pygments_style).stylesheet

    def run(self) -> list[Path]:
        """Seed, navigate, render, and write the whole site.

        Returns
        -------
        list[Path]
            Written pages in render order (classes, guides, files, index),
            followed by the metadata dump when requested.

        Raises
        ------
        PageGenerationError
            Raised when two pages would be written to the same path, or when a
            page name would place it outside the output folder.
        FileNotFoundError
            Raised when a markdown source, the readme, or the assets folder is
            missing.
        """
        self.seed()

        guides = discover_markdown(self.config.guides_dir)
        exclude = [self.config.readme] if self.config.readme else []
        files = discover_markdown(self.config.files_dir, exclude=exclude)
        navigation = self._build_navigation(guides, files)

        pages = self.render_all(navigation, guides, files)
        assets_dir = self.config.assets_dir
        if assets_dir is not None and not assets_dir.is_dir():
            msg = f"Assets directory '{assets_dir}' not found."
            raise FileNotFoundError(msg)

        out_dir = self.config.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for page in pages:
            page.path.write_text(page.content, encoding="utf-8")
            logger.info("wrote %s", page.path)
            written.append(page.path)
        self._copy_assets()
        if self.config.dump_metadata:
            written.append(
                dump_metadata(self.metadata, self.config.resolve_dump_path())
            )
        return written

    def seed(self) -> LinkRegistry:
        """Populate the registry from metadata, then the configured links."""
        self.registry.seed(self.metadata, extension=self.config.extension)
        self.registry.update(self.config.links, override=True)
        return self.registry

    def render_all(
        self, navigation: str, guides: list[Path], files: list[Path]
    ) -> list[RenderedPage]:
        """Render every page into memory without touching the output folder."""
        class_page = ClassPage(
            self.registry, self.templates, pygments_style=self.config.pygments_style
        )
        file_page = FilePage(self.templates, pygments_style=self.config.pygments_style)

        pages: list[RenderedPage] = []
        seen: dict[Path, str] = {}

        def _add(stem: str, title: str, content: str, origin: str) -> None:
            path = self.config.output_dir / f"{stem}{self.config.extension}"
            if stem in {"", ".", ".."} or path.parent != self.config.output_dir:
                msg = f"{origin} cannot be written inside '{self.config.output_dir}'."
                raise PageGenerationError(msg)
            if path in seen:
                msg = f"{origin} and {seen[path]} would both be written to '{path}'."
                raise PageGenerationError(msg)
            seen[path] = origin
            pages.append(RenderedPage(path, self._wrap(title, content, navigation)))

        for name, entity in self.metadata.classes.items():
            _add(name, name, class_page.render(entity), f"class '{name}'")
        for path in (*guides, *files):
            _add(path.stem, label_for(path), file_page.render(path), f"'{path}'")
        if self.config.readme:
            _add(
                INDEX_STEM,
                self.config.title,
                file_page.render(self.config.readme),
                f"readme '{self.config.readme}'",
            )
        return pages

    def _build_navigation(self, guides: list[Path], files: list[Path]) -> str:
        builder = NavigationBuilder(self.templates, extension=self.config.extension)
        model = builder.build(self.metadata, guides, files)
        return builder.render(model).compose(self.config.navigation)

    def _wrap(self, title: str, content: str, navigation: str) -> str:
        """Place a content fragment inside the shared layout."""
        site_title = self.config.title
        html_title = title if title == site_title else f"{title} | {site_title}"
        html = self.templates.render(
            "layout.jinja",
            title=html_title,
            site_title=site_title,
            version=self.config.version,
            navigation=navigation,
            content=content,
            pygments_css=self.pygments_css,
            stylesheet=f"{ASSETS_DIRNAME}/{STYLESHEET_NAME}",
            index_url=f"{INDEX_STEM}{self.config.extension}",
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _copy_assets(self) -> None:
        """Copy bundled and configured static assets into the output folder."""
        target = self.config.output_dir / ASSETS_DIRNAME
        shutil.copytree(STATIC_DIR, target, dirs_exist_ok=True)
        if self.config.assets_dir is not None:
            shutil.copytree(self.config.assets_dir, target, dirs_exist_ok=True)


__all__ = ["STATIC_DIR", "PageAssembler", "PageGenerationError"]
