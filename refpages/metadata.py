"""Digested source metadata consumed by the page generation pipeline.

Extraction (scanning a codebase) and digestion (normalizing the raw tree into
classes, sections, and members) happen outside refpages. This module defines
the canonical tree those collaborators hand over, loads it from the JSON file
they produce, and dumps it back out when a run asks for it.

Example
-------
>>> from pathlib import Path
>>> from refpages.metadata import load_metadata
>>> metadata = load_metadata(Path("build/metadata.json"))  # doctest: +SKIP
>>> list(metadata.classes)  # doctest: +SKIP
['Ext.Component', 'Ext.Panel']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import msgspec
import msgspec.json

logger = logging.getLogger(__name__)


class MetadataError(ValueError):
    """Raised when digested metadata is malformed."""


@dc.dataclass(slots=True)
class Member:
    """A documented method, property, event, or config option.

    Attributes
    ----------
    name : str
        Member identifier, also used as its in-page anchor.
    signature : str
        Signature text; may contain reference markers.
    description : str
        Markdown prose; may contain reference markers.
    kind : str
        Member category such as ``"method"`` or ``"property"``.
    static : bool
        Whether the member belongs to the class rather than instances.
    """

    name: str
    signature: str = ""
    description: str = ""
    kind: str = "method"
    static: bool = False


@dc.dataclass(slots=True)
class Section:
    """An ordered documentation section within a class."""

    title: str
    description: str = ""
    members: list[Member] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class ClassEntity:
    """One documented class or module.

    Attributes
    ----------
    name : str
        Unique, non-empty identifier; doubles as the page slug.
    description : str
        Markdown prose shown under the class heading.
    extends : str or None
        Parent class reference; may contain reference markers.
    sections : list[Section]
        Sections in source order.
    members : list[Member]
        Members that are not grouped under any section.
    """

    name: str
    description: str = ""
    extends: str | None = None
    sections: list[Section] = dc.field(default_factory=list)
    members: list[Member] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class DigestedMetadata:
    """Root of the digested tree; ``classes`` preserves discovery order."""

    classes: dict[str, ClassEntity] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class _RawMetadata:
    classes: list[ClassEntity] | dict[str, ClassEntity] = dc.field(
        default_factory=list
    )


class MetadataSource(typ.Protocol):
    """Boundary of the extraction and digestion collaborators."""

    def load(self) -> DigestedMetadata:
        """Return the digested metadata tree for the current run."""
        ...


@dc.dataclass(slots=True)
class JsonMetadataSource:
    """Read digested metadata from a JSON file written by the digester."""

    path: Path

    def load(self) -> DigestedMetadata:
        """Decode the JSON file at ``path``."""
        return load_metadata(self.path)


def build_metadata(
    classes: typ.Iterable[ClassEntity] | typ.Mapping[str, ClassEntity],
) -> DigestedMetadata:
    """Collect class entities into a :class:`DigestedMetadata` tree.

    Parameters
    ----------
    classes : Iterable[ClassEntity] or Mapping[str, ClassEntity]
        Entities in discovery order. Mapping keys must equal the entity names.

    Returns
    -------
    DigestedMetadata
        Tree keyed by class name. Duplicate names keep the last entity seen.

    Raises
    ------
    MetadataError
        If a class name is empty or a mapping key disagrees with its entity.
    """
    if isinstance(classes, cabc.Mapping):
        for key, entity in classes.items():
            if key != entity.name:
                msg = f"Class key '{key}' does not match entity name '{entity.name}'."
                raise MetadataError(msg)
        entities: typ.Iterable[ClassEntity] = classes.values()
    else:
        entities = classes

    collected: dict[str, ClassEntity] = {}
    for entity in entities:
        if not entity.name or not entity.name.strip():
            msg = "Class entities must have a non-empty name."
            raise MetadataError(msg)
        if entity.name in collected:
            logger.warning(
                "duplicate class %r in metadata; keeping the later definition",
                entity.name,
            )
            # Re-insert so iteration order reflects the surviving definition.
            del collected[entity.name]
        collected[entity.name] = entity
    return DigestedMetadata(classes=collected)


def load_metadata(path: Path) -> DigestedMetadata:
    """Load digested metadata from a JSON file.

    Parameters
    ----------
    path : Path
        JSON document whose ``classes`` value is either a list of class
        objects or a mapping from class name to class object.

    Returns
    -------
    DigestedMetadata
        Parsed tree in file order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    MetadataError
        If the document cannot be decoded or violates naming rules.
    """
    if not path.exists():
        msg = f"Metadata file '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        raw = msgspec.json.decode(path.read_bytes(), type=_RawMetadata)
    except msgspec.DecodeError as exc:
        msg = f"Metadata file '{path}' is malformed: {exc}"
        raise MetadataError(msg) from exc
    return build_metadata(raw.classes)


def dump_metadata(metadata: DigestedMetadata, path: Path) -> Path:
    """Write ``metadata`` as indented JSON to ``path`` and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    encoded = msgspec.json.format(msgspec.json.encode(metadata), indent=2)
    path.write_bytes(encoded + b"\n")
    return path


__all__ = [
    "ClassEntity",
    "DigestedMetadata",
    "JsonMetadataSource",
    "Member",
    "MetadataError",
    "MetadataSource",
    "Section",
    "build_metadata",
    "dump_metadata",
    "load_metadata",
]
