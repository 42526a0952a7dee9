"""Tests for markdown rendering and code highlighting.

Usage
-----
Run ``pytest tests/test_renderer.py -v``.
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from refpages.generator import HtmlContentRenderer


def test_fenced_blocks_are_highlighted_and_tagged() -> None:
    """Each fenced block is highlighted and carries its language, in order."""
    text = (
        "Intro.\n\n"
        "```python\nprint('hi')\n```\n\n"
        "```\nplain\n```\n\n"
        "~~~js\nlet x = 1;\n~~~\n"
    )
    soup = BeautifulSoup(HtmlContentRenderer().markdown(text), "html.parser")
    blocks = soup.select("div.codehilite")
    assert [block["data-language"] for block in blocks] == ["python", "text", "js"]
    assert "print" in blocks[0].get_text()


def test_blank_input_renders_nothing() -> None:
    """Whitespace-only prose yields an empty fragment."""
    assert HtmlContentRenderer().markdown("  \n\t\n") == ""


def test_renderer_is_reusable_between_documents() -> None:
    """State from one conversion does not leak into the next."""
    renderer = HtmlContentRenderer()
    first = renderer.markdown("# One\n\n- a\n- b\n")
    second = renderer.markdown("Plain *text*.")
    assert "<h1>One</h1>" in first
    assert second == "<p>Plain <em>text</em>.</p>"


def test_stylesheet_targets_highlight_class() -> None:
    """The generated CSS is scoped to ``.codehilite``."""
    css = HtmlContentRenderer(pygments_style="default").stylesheet
    assert ".codehilite" in css
