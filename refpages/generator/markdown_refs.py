"""Python-Markdown extension that resolves reference markers in prose."""

from __future__ import annotations

import typing as typ
import xml.etree.ElementTree as etree

from markdown import util
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor

from .references import MARKER_PATTERN, marker_parts

if typ.TYPE_CHECKING:
    import re

    from markdown import Markdown

    from .references import ReferenceExpander
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any


class ReferenceExtension(Extension):
    """Link ``{@link ...}`` and ``[[...]]`` markers while parsing markdown.

    The processor runs after code spans and escapes, so markers inside inline
    code stay literal, and before Markdown's own link handling so that
    ``[[Target]]`` is not mistaken for a reference-style link.
    """

    def __init__(self, expander: ReferenceExpander) -> None:
        super().__init__()
        self.expander = expander

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the reference inline processor on the Markdown instance."""
        processor = ReferenceInlineProcessor(MARKER_PATTERN.pattern, md, self.expander)
        md.inlinePatterns.register(processor, "refpages_references", 175)


class ReferenceInlineProcessor(InlineProcessor):
    """Replace a marker with an anchor, or its display text when unresolved."""

    def __init__(self, pattern: str, md: Markdown, expander: ReferenceExpander) -> None:
        super().__init__(pattern, md)
        self.expander = expander

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[etree.Element | str, int, int]:
        """Return the replacement node and the span it covers."""
        target, display = marker_parts(m)
        link = self.expander.link(target, display)
        if link.href is None:
            return util.AtomicString(link.display), m.start(0), m.end(0)
        anchor = etree.Element("a")
        anchor.set("href", link.href)
        anchor.text = util.AtomicString(link.display)
        return anchor, m.start(0), m.end(0)


__all__ = ["ReferenceExtension", "ReferenceInlineProcessor"]
