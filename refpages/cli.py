"""Cyclopts CLI entrypoint for generating refpages documentation sites.

The ``refpages`` console script defined here renders a static HTML reference
site from digested source metadata (``refpages generate``) and writes the
digested metadata back out as JSON for inspection (``refpages dump``). Options
can also be supplied through ``INPUT_``-prefixed environment variables, which
keeps CI invocations short.

Examples
--------
Generate the site described by ``refpages.yaml``:

>>> from refpages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom directory with extensionless page names:

>>> from refpages.cli import app
>>> app(
...     ["generate", "--metadata", "build/metadata.json", "--output-dir", "site",
...      "--ext", ""]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_DUMP_NAME
from .config import SiteConfig, load_site_config, parse_link_option
from .config.helpers import _normalize_extension
from .generator import PageAssembler
from .metadata import dump_metadata, load_metadata

DEFAULT_CONFIG = Path("refpages.yaml")

app = App(name="refpages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(
    config: Path | None,
    *,
    metadata: Path | None,
    output_dir: Path | None,
    ext: str | None,
    dump: bool,
    dump_path: Path | None,
    link: list[str] | None,
) -> SiteConfig:
    """Load the site config (if any) and apply command-line overrides."""
    if config is not None:
        site_config = load_site_config(config)
    elif DEFAULT_CONFIG.exists():
        site_config = load_site_config(DEFAULT_CONFIG)
    else:
        site_config = SiteConfig()

    overrides: dict[str, typ.Any] = {}
    if metadata is not None:
        overrides["metadata"] = metadata
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if ext is not None:
        overrides["extension"] = _normalize_extension(ext)
    if dump or dump_path is not None:
        overrides["dump_metadata"] = True
    if dump_path is not None:
        overrides["dump_path"] = dump_path
    if link:
        links = dict(site_config.links)
        links.update(parse_link_option(value) for value in link)
        overrides["links"] = links
    return dc.replace(site_config, **overrides)


@app.command(help="Generate the static HTML reference site.")
def generate(
    *,
    config: typ.Annotated[
        Path | None,
        Parameter(help="Path to the site config (defaults to refpages.yaml)"),
    ] = None,
    metadata: typ.Annotated[
        Path | None, Parameter(help="Digested metadata JSON file")
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    ext: typ.Annotated[
        str | None, Parameter(help="Page file extension, e.g. '.html' or ''")
    ] = None,
    dump: typ.Annotated[
        bool, Parameter(help="Also write the digested metadata as JSON")
    ] = False,
    dump_path: typ.Annotated[
        Path | None, Parameter(help="Where to write the metadata dump")
    ] = None,
    link: typ.Annotated[
        list[str] | None,
        Parameter(help="Extra symbol link as NAME=URL; may be repeated"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate every page for the configured documentation site.

    Parameters
    ----------
    config : Path or None, optional
        Site configuration file. When omitted, ``refpages.yaml`` is used if it
        exists, otherwise built-in defaults.
    metadata : Path or None, optional
        Digested metadata JSON; overrides the config's ``metadata`` key.
    output_dir : Path or None, optional
        Output folder override.
    ext : str or None, optional
        Page extension override; ``""`` writes extensionless pages.
    dump : bool, optional
        Dump the digested metadata after rendering.
    dump_path : Path or None, optional
        Explicit dump location; implies ``dump``.
    link : list[str] or None, optional
        Additional ``NAME=URL`` symbol links registered after the config's.
    verbose : bool, optional
        Log unresolved references and registry activity.

    Returns
    -------
    None
        Writes the site and prints each written path.

    Raises
    ------
    ValueError
        If no metadata file is configured or a ``--link`` value is malformed.
    """
    _configure_logging(verbose=verbose)
    site_config = _resolve_config(
        config,
        metadata=metadata,
        output_dir=output_dir,
        ext=ext,
        dump=dump,
        dump_path=dump_path,
        link=link,
    )
    if site_config.metadata is None:
        msg = "No metadata file given; pass --metadata or set 'metadata' in config."
        raise ValueError(msg)

    digested = load_metadata(site_config.metadata)
    written = PageAssembler(site_config, digested).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Write the digested metadata as formatted JSON.")
def dump(
    *,
    metadata: typ.Annotated[Path, Parameter(help="Digested metadata JSON file")],
    output: typ.Annotated[
        Path, Parameter(help="Destination of the dump")
    ] = Path(DEFAULT_DUMP_NAME),
) -> None:
    """Load ``metadata`` and write it back out to ``output``."""
    path = dump_metadata(load_metadata(metadata), output)
    print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``refpages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
