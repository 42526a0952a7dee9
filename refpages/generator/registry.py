"""Symbol-to-URL table shared by every renderer during a run.

The registry is seeded from the digested metadata (each class maps to the page
generated for it) and then extended with manually registered links, usually
external documentation for third-party symbols. Lookups are exact-name only
and never raise: a miss yields :data:`UNRESOLVED`.

Example
-------
>>> from refpages.generator.registry import LinkRegistry, Resolved
>>> registry = LinkRegistry()
>>> registry.add("Promise", "https://developer.mozilla.org/Promise")
>>> registry.resolve("Promise")
Resolved(url='https://developer.mozilla.org/Promise')
>>> registry.resolve("Missing").found
False
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from refpages.metadata import DigestedMetadata

logger = logging.getLogger(__name__)


class OnConflict(enum.Enum):
    """Policy applied when a name is registered again with a different URL."""

    LAST_WRITE_WINS = "last-write-wins"
    ERROR = "error"


class LinkConflictError(ValueError):
    """Raised for a conflicting registration under :attr:`OnConflict.ERROR`."""


@dc.dataclass(frozen=True, slots=True)
class Resolved:
    """Successful lookup carrying the registered URL."""

    url: str

    @property
    def found(self) -> bool:
        """Return ``True``; resolved lookups always carry a URL."""
        return True


@dc.dataclass(frozen=True, slots=True)
class Unresolved:
    """Lookup miss; use the :data:`UNRESOLVED` singleton."""

    @property
    def found(self) -> bool:
        """Return ``False``; nothing is registered under the name."""
        return False


UNRESOLVED = Unresolved()

Resolution = Resolved | Unresolved


@dc.dataclass(frozen=True, slots=True)
class LinkConflict:
    """Record of an overwrite: ``name`` moved from ``previous`` to ``current``."""

    name: str
    previous: str
    current: str


class LinkRegistry:
    """Map symbol names to URLs with an explicit conflict policy."""

    def __init__(self, on_conflict: OnConflict = OnConflict.LAST_WRITE_WINS) -> None:
        self.on_conflict = on_conflict
        self._links: dict[str, str] = {}
        self.conflicts: list[LinkConflict] = []

    def seed(self, metadata: DigestedMetadata, *, extension: str = "") -> None:
        """Register the page URL of every class in ``metadata``.

        Parameters
        ----------
        metadata : DigestedMetadata
            Digested tree whose class names become symbols.
        extension : str, optional
            Suffix appended to each class name to form its URL. The default
            ``""`` makes the URL identical to the class name.

        Notes
        -----
        Seeding is idempotent: registering the same URL again is a no-op.
        """
        for name in metadata.classes:
            self.add(name, f"{name}{extension}")

    def add(self, name: str, url: str, *, override: bool = False) -> None:
        """Register ``name`` under ``url``, applying the conflict policy.

        Parameters
        ----------
        name : str
            Symbol name.
        url : str
            Opaque link target.
        override : bool, optional
            Mark a replacement as intended, such as a configured link taking
            over a seeded class. It is still recorded in :attr:`conflicts` but
            logged at INFO instead of WARNING.

        Raises
        ------
        LinkConflictError
            If ``name`` already maps to a different URL and the policy is
            :attr:`OnConflict.ERROR`.
        """
        previous = self._links.get(name)
        if previous is not None and previous != url:
            if self.on_conflict is OnConflict.ERROR:
                msg = f"Symbol '{name}' already links to '{previous}', not '{url}'."
                raise LinkConflictError(msg)
            level = logging.INFO if override else logging.WARNING
            logger.log(level, "link for %r overwritten: %s -> %s", name, previous, url)
            self.conflicts.append(LinkConflict(name, previous, url))
        self._links[name] = url

    def update(
        self, links: cabc.Mapping[str, str], *, override: bool = False
    ) -> None:
        """Register every entry of ``links`` in mapping order."""
        for name, url in links.items():
            self.add(name, url, override=override)

    def resolve(self, name: str) -> Resolution:
        """Return :class:`Resolved` for a registered ``name``, else ``UNRESOLVED``."""
        url = self._links.get(name)
        if url is None:
            return UNRESOLVED
        return Resolved(url)

    def items(self) -> cabc.ItemsView[str, str]:
        """Return a live view of the registered ``(name, url)`` pairs."""
        return self._links.items()

    def __contains__(self, name: object) -> bool:
        return name in self._links

    def __len__(self) -> int:
        return len(self._links)


__all__ = [
    "UNRESOLVED",
    "LinkConflict",
    "LinkConflictError",
    "LinkRegistry",
    "OnConflict",
    "Resolution",
    "Resolved",
    "Unresolved",
]
