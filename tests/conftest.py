"""Shared fixtures for the refpages test suite.

The fixtures here build a small digested metadata tree and a template
collaborator pointing at the packaged Jinja templates, so individual test
modules can focus on one pipeline stage at a time.
"""

from __future__ import annotations

import pytest

from refpages.generator import TemplateRenderer
from refpages.metadata import (
    ClassEntity,
    DigestedMetadata,
    Member,
    Section,
    build_metadata,
)


@pytest.fixture
def templates() -> TemplateRenderer:
    """Return a template renderer backed by the package templates."""
    return TemplateRenderer()


@pytest.fixture
def sample_metadata() -> DigestedMetadata:
    """Return three classes in a deliberate, non-alphabetical order."""
    return build_metadata(
        [
            ClassEntity(
                name="Widget",
                description="Base class for every visual element.",
                sections=[
                    Section(
                        title="Lifecycle",
                        description="Widgets are rendered by a {@link Container}.",
                        members=[
                            Member(
                                name="render",
                                signature="render(target: [[Container]]): void",
                                description="Draw into the target.",
                            ),
                        ],
                    ),
                ],
            ),
            ClassEntity(
                name="Container",
                extends="[[Widget]]",
                description="Holds child {@link Widget widgets}.",
                sections=[
                    Section(
                        title="Children",
                        members=[
                            Member(
                                name="add",
                                signature="add(item: [[Widget]]): [[Container]]",
                                description="Append a child.",
                            ),
                            Member(
                                name="items",
                                signature="items: Array<[[Widget]]>",
                                kind="property",
                            ),
                        ],
                    ),
                ],
                members=[Member(name="create", signature="create(): [[Container]]", static=True)],
            ),
            ClassEntity(name="Button", extends="[[Widget]]"),
        ]
    )
