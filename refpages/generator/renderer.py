"""Markdown rendering for documentation prose, with Pygments-highlighted code."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

FENCE_LANGUAGE_PATTERN = re.compile(
    r"^[ ]{0,3}(?:`{3,}|~{3,})[ ]*\{?\.?([A-Za-z0-9_+#.-]+)?", re.MULTILINE
)
HIGHLIGHT_OPEN_TAG = '<div class="codehilite">'


class HtmlContentRenderer:
    """Convert markdown to HTML with highlighted fenced code blocks.

    Parameters
    ----------
    pygments_style : str, optional
        Pygments style used for highlighting and :attr:`stylesheet`.
    link_extension : Extension, optional
        Extra markdown extension, typically the symbol reference extension.
        ``None`` renders prose without reference resolution.
    """

    def __init__(
        self, pygments_style: str = "monokai", link_extension: Extension | None = None
    ) -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
        ]
        if link_extension is not None:
            extensions.append(link_extension)
        self._md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": pygments_style,
                }
            },
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS rules for ``.codehilite`` blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render ``text``; blank input yields an empty string."""
        if not text.strip():
            return ""
        html = self._md.reset().convert(text)
        return _tag_languages(html, text)


def _tag_languages(html: str, source: str) -> str:
    """Add ``data-language`` to each highlighted block, in fence order.

    Fences without a language are tagged ``text``.
    """
    # Opening and closing fence lines alternate; keep the opening ones.
    languages = [
        match.group(1) or "text" for match in FENCE_LANGUAGE_PATTERN.finditer(source)
    ][::2]
    if HIGHLIGHT_OPEN_TAG not in html or not languages:
        return html
    remaining = iter(languages)
    return re.sub(
        re.escape(HIGHLIGHT_OPEN_TAG),
        lambda _match: (
            '<div class="codehilite" data-language="'
            f'{escape(next(remaining, "text"), quote=True)}">'
        ),
        html,
    )


__all__ = ["HtmlContentRenderer"]
