"""Build the class, guide, and file navigation lists and their HTML fragments.

The model is built once per run and every page reuses the same rendered
fragments. Each list becomes one ``nav_item.jinja`` fragment per entry, joined
and wrapped in a titled ``navigation.jinja`` block; empty lists still render
the wrapper.
"""

from __future__ import annotations

import typing as typ

from .models import NavigationFragments, NavigationModel, NavItem

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from refpages.metadata import DigestedMetadata

    from .templates import TemplateRenderer

NAVIGATION_TITLES = {"classes": "Classes", "guides": "Guides", "files": "Files"}


def discover_markdown(
    directory: Path | None, *, exclude: cabc.Iterable[Path] = ()
) -> list[Path]:
    """Return ``*.md`` files directly inside ``directory`` sorted by name.

    Parameters
    ----------
    directory : Path or None
        Folder to list. ``None`` or a missing folder yields an empty list.
    exclude : Iterable[Path], optional
        Files to leave out, compared after resolving both sides.

    Returns
    -------
    list[Path]
        Markdown files in a stable listing order.
    """
    if directory is None or not directory.is_dir():
        return []
    skipped = {path.resolve() for path in exclude}
    return sorted(
        (
            path
            for path in directory.glob("*.md")
            if path.is_file() and path.resolve() not in skipped
        ),
        key=lambda path: path.name,
    )


def label_for(path: Path) -> str:
    """Derive a navigation label from a markdown file name."""
    return path.stem.replace("-", " ").replace("_", " ").strip().title() or path.stem


class NavigationBuilder:
    """Derive navigation lists from metadata and discovered markdown files."""

    def __init__(self, templates: TemplateRenderer, *, extension: str = "") -> None:
        self.templates = templates
        self.extension = extension

    def build(
        self,
        metadata: DigestedMetadata,
        guides: cabc.Sequence[Path] = (),
        files: cabc.Sequence[Path] = (),
    ) -> NavigationModel:
        """Return the navigation model; classes follow metadata order."""
        return NavigationModel(
            classes=tuple(
                NavItem(name, f"{name}{self.extension}") for name in metadata.classes
            ),
            guides=tuple(self._file_item(path) for path in guides),
            files=tuple(self._file_item(path) for path in files),
        )

    def render(self, model: NavigationModel) -> NavigationFragments:
        """Render each navigation list into its own titled fragment."""
        return NavigationFragments(
            classes=self._render_list("classes", model.classes),
            guides=self._render_list("guides", model.guides),
            files=self._render_list("files", model.files),
        )

    def _file_item(self, path: Path) -> NavItem:
        return NavItem(label_for(path), f"{path.stem}{self.extension}")

    def _render_list(self, kind: str, items: cabc.Sequence[NavItem]) -> str:
        rendered = "\n".join(
            self.templates.render("nav_item.jinja", label=item.label, url=item.url)
            for item in items
        )
        return self.templates.render(
            "navigation.jinja",
            kind=kind,
            title=NAVIGATION_TITLES[kind],
            items=rendered,
        )


__all__ = ["NAVIGATION_TITLES", "NavigationBuilder", "discover_markdown", "label_for"]
