"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from refpages._constants import NAVIGATION_KINDS

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """A single navigation entry: visible label and target URL."""

    label: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class NavigationModel:
    """Ordered navigation entries for classes, guides, and root files.

    Attributes
    ----------
    classes : tuple[NavItem, ...]
        One entry per documented class, in metadata iteration order.
    guides : tuple[NavItem, ...]
        One entry per guide markdown file, in listing order.
    files : tuple[NavItem, ...]
        One entry per root-level markdown file, in listing order.
    """

    classes: tuple[NavItem, ...] = ()
    guides: tuple[NavItem, ...] = ()
    files: tuple[NavItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class NavigationFragments:
    """Rendered navigation HTML for each list in a :class:`NavigationModel`."""

    classes: str
    guides: str
    files: str

    def compose(self, names: cabc.Iterable[str]) -> str:
        """Join the fragments named in ``names`` in the order given.

        Raises
        ------
        ValueError
            If a name is not one of ``classes``, ``guides``, or ``files``.
        """
        chosen: list[str] = []
        for name in names:
            if name not in NAVIGATION_KINDS:
                msg = f"Unknown navigation fragment '{name}'."
                raise ValueError(msg)
            chosen.append(getattr(self, name))
        return "\n".join(chosen)


@dc.dataclass(slots=True)
class RenderedPage:
    """Fully wrapped page HTML and the path it will be written to."""

    path: Path
    content: str


__all__ = ["NavItem", "NavigationFragments", "NavigationModel", "RenderedPage"]
