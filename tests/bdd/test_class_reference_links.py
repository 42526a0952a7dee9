"""Behaviour tests for cross-referenced class pages.

These pytest-bdd scenarios render a small site with ``PageAssembler`` and check
that member signatures link classes seeded from metadata and symbols added as
external links, while unknown symbols degrade to plain text. A second scenario
confirms that an empty guides folder still yields a titled navigation block.

Usage
-----
Run ``pytest tests/bdd/test_class_reference_links.py -v`` after installing the
test extra (``uv sync --extra test``). The feature file lives under
``features/class_reference_links.feature``.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from refpages.config import SiteConfig
from refpages.generator import PageAssembler
from refpages.metadata import ClassEntity, Member, Section, build_metadata

if typ.TYPE_CHECKING:
    from refpages.metadata import DigestedMetadata

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "class_reference_links.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _host_signature(scenario_state: dict[str, object]) -> BeautifulSoup:
    out_dir = typ.cast("Path", scenario_state["output_dir"])
    html = (out_dir / "Host.html").read_text(encoding="utf-8")
    signature = BeautifulSoup(html, "html.parser").select_one("#use .member-signature")
    assert signature is not None, "expected a signature for Host.use"
    return signature


@given("digested metadata where Host uses Foo and Qux")
def given_metadata(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Describe a Host class whose method references three symbols."""
    scenario_state["metadata"] = build_metadata(
        [
            ClassEntity(name="Foo"),
            ClassEntity(
                name="Host",
                sections=[
                    Section(
                        title="Methods",
                        members=[
                            Member(
                                name="use",
                                signature="use(f: [[Foo]], q: [[Qux]]): [[Promise]]",
                            )
                        ],
                    )
                ],
            ),
        ]
    )
    scenario_state["output_dir"] = tmp_path / "site"
    scenario_state["config"] = SiteConfig(
        output_dir=tmp_path / "site",
        guides_dir=None,
        files_dir=None,
        readme=None,
    )


@given("an external link for Promise")
def given_external_link(scenario_state: dict[str, object]) -> None:
    """Register Promise against external documentation."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    scenario_state["config"] = dc.replace(
        config, links={"Promise": "https://example.com/promise"}
    )


@given("an empty guides folder composed into navigation")
def given_empty_guides(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Point the guides folder at an empty directory and show its navigation."""
    guides = tmp_path / "guides"
    guides.mkdir()
    config = typ.cast("SiteConfig", scenario_state["config"])
    scenario_state["config"] = dc.replace(
        config, guides_dir=guides, navigation=["classes", "guides"]
    )


@when("I generate the reference site")
def when_generate(scenario_state: dict[str, object]) -> None:
    """Run the assembler with the accumulated config."""
    config = typ.cast("SiteConfig", scenario_state["config"])
    scenario_state["written"] = PageAssembler(
        config, typ.cast("DigestedMetadata", scenario_state["metadata"])
    ).run()


@then("the Host signature links to the Foo page")
def then_links_foo(scenario_state: dict[str, object]) -> None:
    """The Foo marker resolves to the generated page."""
    hrefs = [a["href"] for a in _host_signature(scenario_state).select("a")]
    assert "Foo.html" in hrefs, f"expected Foo.html among {hrefs}"


@then("the Host signature links Promise to its external documentation")
def then_links_promise(scenario_state: dict[str, object]) -> None:
    """The Promise marker resolves to the configured external URL."""
    hrefs = [a["href"] for a in _host_signature(scenario_state).select("a")]
    assert "https://example.com/promise" in hrefs, f"unexpected links {hrefs}"


@then("Qux is rendered as plain text")
def then_qux_plain(scenario_state: dict[str, object]) -> None:
    """Unknown symbols keep their text and get no anchor."""
    signature = _host_signature(scenario_state)
    assert "Qux" not in [a.get_text() for a in signature.select("a")]
    assert signature.get_text() == "use(f: Foo, q: Qux): Promise"


@then("every page shows an empty guides navigation block")
def then_empty_guides_nav(scenario_state: dict[str, object]) -> None:
    """Each written page carries a titled guides nav with no entries."""
    written = typ.cast("list[Path]", scenario_state["written"])
    assert written, "expected at least one page"
    for path in written:
        soup = BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")
        nav = soup.select_one("nav.navigation-guides")
        assert nav is not None, f"{path.name} lacks guides navigation"
        assert nav.select_one(".navigation-title").get_text() == "Guides"
        assert nav.select("li") == [], f"{path.name} lists unexpected guides"
