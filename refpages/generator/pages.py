"""Render digested entities and markdown files into HTML content fragments.

A content fragment is the page body only: the assembler wraps it in the shared
layout with title, version, and navigation.
"""

from __future__ import annotations

import re
import typing as typ

from .markdown_refs import ReferenceExtension
from .references import ReferenceExpander
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from refpages.metadata import ClassEntity, Member

    from .registry import LinkRegistry
    from .templates import TemplateRenderer


class ClassPage:
    """Render a :class:`~refpages.metadata.ClassEntity` with linked references."""

    def __init__(
        self,
        registry: LinkRegistry,
        templates: TemplateRenderer,
        *,
        pygments_style: str = "monokai",
    ) -> None:
        """Bind the page renderer to a registry and template collaborator.

        Parameters
        ----------
        registry : LinkRegistry
            Fully seeded registry; only read while rendering.
        templates : TemplateRenderer
            Source of the ``class_page.jinja`` template.
        pygments_style : str, optional
            Pygments style for code blocks embedded in prose.
        """
        self.expander = ReferenceExpander(registry)
        self.templates = templates
        self.renderer = HtmlContentRenderer(
            pygments_style, link_extension=ReferenceExtension(self.expander)
        )

    def render(self, entity: ClassEntity) -> str:
        """Return the content fragment for ``entity``.

        Sections and members keep source order. Prose passes through markdown
        with reference resolution; signatures pass through the expander.
        Identical input and registry state yield identical output.
        """
        used: set[str] = set()
        # Members claim their own names first so `Class#member` links hold.
        grouped = [
            [self._member(member, used) for member in section.members]
            for section in entity.sections
        ]
        members = [self._member(member, used) for member in entity.members]
        sections = [
            {
                "title": section.title,
                "anchor": _section_anchor(section.title, used),
                "description_html": self.renderer.markdown(section.description),
                "members": section_members,
            }
            for section, section_members in zip(entity.sections, grouped, strict=True)
        ]
        return self.templates.render(
            "class_page.jinja",
            name=entity.name,
            extends_html=self.expander.expand(entity.extends) if entity.extends else "",
            description_html=self.renderer.markdown(entity.description),
            sections=sections,
            members=members,
            members_anchor=_unique_anchor("members", used) if members else "",
        )

    def _member(self, member: Member, used: set[str]) -> dict[str, typ.Any]:
        return {
            "name": member.name,
            "anchor": _unique_anchor(member.name, used),
            "kind": member.kind,
            "static": member.static,
            "signature_html": self.expander.expand(member.signature),
            "description_html": self.renderer.markdown(member.description),
        }


class FilePage:
    """Render a guide or loose markdown file as free text."""

    def __init__(
        self, templates: TemplateRenderer, *, pygments_style: str = "monokai"
    ) -> None:
        self.templates = templates
        self.renderer = HtmlContentRenderer(pygments_style)

    def render(self, path: Path) -> str:
        """Read ``path`` and return its content fragment.

        Raises
        ------
        FileNotFoundError
            If ``path`` disappeared after discovery.
        """
        text = path.read_text(encoding="utf-8")
        return self.templates.render(
            "file_page.jinja", source=path.name, html=self.renderer.markdown(text)
        )


def _slugify(value: str) -> str:
    """Convert a string into a lowercase hyphen-separated slug."""
    return re.sub(r"[^a-z0-9]+", "-", value.lower()).strip("-")


def _section_anchor(title: str, used: set[str]) -> str:
    """Return a unique ``section-<slug>`` anchor for a section title."""
    slug = _slugify(title)
    base = f"section-{slug}" if slug else "section"
    return _unique_anchor(base, used)


def _unique_anchor(base: str, used: set[str]) -> str:
    """Return a unique anchor, appending numeric suffixes and mutating ``used``."""
    candidate = base
    suffix = 2
    while candidate in used:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used.add(candidate)
    return candidate


__all__ = ["ClassPage", "FilePage"]
