"""Tests for the ``refpages`` command-line entry points.

The commands are exercised by calling the decorated functions directly, with
the working directory moved into ``tmp_path`` so default relative paths
(``refpages.yaml``, ``README.md``, ``guides/``) point at fixture files.

Usage
-----
Run ``pytest tests/test_cli.py -v``.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from refpages.cli import generate
from refpages.cli import dump as dump_command


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create metadata and a readme, then chdir into the folder."""
    (tmp_path / "metadata.json").write_text(
        json.dumps(
            {
                "classes": [
                    {"name": "Foo", "description": "Uses {@link Promise}."},
                    {"name": "Bar", "extends": "[[Foo]]"},
                ]
            }
        ),
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("# Project\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_generate_with_flags(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Flags override defaults and each written path is printed."""
    generate(
        metadata=Path("metadata.json"),
        output_dir=Path("site"),
        ext="htm",
        dump=True,
        link=["Promise=https://example.com/promise"],
    )
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "wrote site/Foo.htm",
        "wrote site/Bar.htm",
        "wrote site/index.htm",
        "wrote site/refpages-metadata.json",
    ]
    html = (workspace / "site" / "Foo.htm").read_text(encoding="utf-8")
    assert 'href="https://example.com/promise"' in html


def test_generate_reads_default_config(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``refpages.yaml`` in the working directory is picked up implicitly."""
    (workspace / "refpages.yaml").write_text(
        "metadata: metadata.json\noutput_dir: out\nreadme: null\n", encoding="utf-8"
    )
    generate()
    assert capsys.readouterr().out.splitlines() == [
        "wrote out/Foo.html",
        "wrote out/Bar.html",
    ]


def test_generate_requires_metadata(workspace: Path) -> None:
    """Without a metadata path the command refuses to run."""
    with pytest.raises(ValueError, match="No metadata file"):
        generate()


def test_generate_rejects_malformed_link(workspace: Path) -> None:
    """``--link`` values must look like ``NAME=URL``."""
    with pytest.raises(ValueError, match="NAME=URL"):
        generate(metadata=Path("metadata.json"), link=["Promise"])


def test_dump_command(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """The dump command rewrites metadata as formatted JSON."""
    dump_command(metadata=Path("metadata.json"), output=Path("dump/meta.json"))
    assert capsys.readouterr().out.strip() == "wrote dump/meta.json"
    payload = json.loads((workspace / "dump" / "meta.json").read_text(encoding="utf-8"))
    assert list(payload["classes"]) == ["Foo", "Bar"]
