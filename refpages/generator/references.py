r"""Expand symbol reference markers into hyperlinks.

Two marker styles are recognised in documentation prose and signatures:

- ``{@link Target}`` or ``{@link Target display text}``
- ``[[Target]]`` or ``[[Target|display text]]``

``Target`` may name a member as ``Class#member``. The full target is looked up
first; when that misses, the class part is looked up and the fragment appended
to its URL. Markers whose target cannot be resolved degrade to their display
text without a link.

Example
-------
>>> from refpages.generator.registry import LinkRegistry
>>> from refpages.generator.references import ReferenceExpander
>>> registry = LinkRegistry()
>>> registry.add("Foo", "Foo.html")
>>> ReferenceExpander(registry).expand("bar(x: [[Foo]]): [[Qux]]")
'bar(x: <a href="Foo.html">Foo</a>): Qux'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ
from html import escape

from .registry import Resolved

if typ.TYPE_CHECKING:
    from .registry import LinkRegistry

logger = logging.getLogger(__name__)

MARKER_PATTERN = re.compile(
    r"\{@link\s+(?P<link_target>[^\s}]+)(?:\s+(?P<link_text>[^}]*?))?\s*\}"
    r"|\[\[(?P<wiki_target>[^\]|]+?)(?:\|(?P<wiki_text>[^\]]+))?\]\]"
)


@dc.dataclass(frozen=True, slots=True)
class ReferenceLink:
    """Outcome of resolving one marker; ``href`` is ``None`` when unresolved."""

    display: str
    href: str | None = None

    def to_html(self) -> str:
        """Return an anchor for resolved links, otherwise escaped text."""
        text = escape(self.display, quote=False)
        if self.href is None:
            return text
        return f'<a href="{escape(self.href, quote=True)}">{text}</a>'


def marker_parts(match: re.Match[str]) -> tuple[str, str | None]:
    """Return ``(target, display)`` from a :data:`MARKER_PATTERN` match."""
    if match.group("link_target") is not None:
        return match.group("link_target"), match.group("link_text")
    return match.group("wiki_target"), match.group("wiki_text")


class ReferenceExpander:
    """Resolve markers against a :class:`LinkRegistry` without mutating it."""

    def __init__(self, registry: LinkRegistry) -> None:
        self.registry = registry

    def link(self, target: str, display: str | None = None) -> ReferenceLink:
        """Resolve ``target`` and pair it with the text shown to readers.

        Parameters
        ----------
        target : str
            Symbol name, optionally with a ``#member`` fragment.
        display : str, optional
            Explicit link text; defaults to ``target`` as written.

        Returns
        -------
        ReferenceLink
            Link with ``href`` set when the target (or its class) resolves.
        """
        target = target.strip()
        label = display.strip() if display and display.strip() else target
        href = self._href(target)
        if href is None:
            logger.debug("unresolved reference %r", target)
        return ReferenceLink(label, href)

    def _href(self, target: str) -> str | None:
        """Return the URL for ``target``, trying the full name before its class."""
        match self.registry.resolve(target):
            case Resolved(url=url):
                return url

        name, sep, fragment = target.partition("#")
        if not (sep and fragment):
            return None
        if not name:
            return f"#{fragment}"
        match self.registry.resolve(name):
            case Resolved(url=url):
                return f"{url}#{fragment}"
        return None

    def expand(self, text: str) -> str:
        """Return ``text`` as HTML with every marker replaced by its link.

        Text outside markers is HTML-escaped. Markers are handled left to
        right and never nest.
        """
        parts: list[str] = []
        position = 0
        for match in MARKER_PATTERN.finditer(text):
            parts.append(escape(text[position : match.start()], quote=False))
            target, display = marker_parts(match)
            parts.append(self.link(target, display).to_html())
            position = match.end()
        parts.append(escape(text[position:], quote=False))
        return "".join(parts)


__all__ = ["MARKER_PATTERN", "ReferenceExpander", "ReferenceLink", "marker_parts"]
