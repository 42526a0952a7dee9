"""Cross-reference resolution and page rendering for refpages sites."""

from .assembler import PageAssembler, PageGenerationError
from .markdown_refs import ReferenceExtension
from .models import NavigationFragments, NavigationModel, NavItem, RenderedPage
from .navigation import NavigationBuilder, discover_markdown
from .pages import ClassPage, FilePage
from .references import ReferenceExpander, ReferenceLink
from .registry import (
    UNRESOLVED,
    LinkConflict,
    LinkConflictError,
    LinkRegistry,
    OnConflict,
    Resolved,
    Unresolved,
)
from .renderer import HtmlContentRenderer
from .templates import TemplateRenderer

__all__ = [
    "UNRESOLVED",
    "ClassPage",
    "FilePage",
    "HtmlContentRenderer",
    "LinkConflict",
    "LinkConflictError",
    "LinkRegistry",
    "NavItem",
    "NavigationBuilder",
    "NavigationFragments",
    "NavigationModel",
    "OnConflict",
    "PageAssembler",
    "PageGenerationError",
    "ReferenceExpander",
    "ReferenceExtension",
    "ReferenceLink",
    "RenderedPage",
    "Resolved",
    "TemplateRenderer",
    "Unresolved",
    "discover_markdown",
]
