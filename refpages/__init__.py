"""Generate linked HTML reference sites from digested source metadata.

This package exposes the CLI entry points used by the ``refpages`` console
script to render class reference pages, guides, loose markdown files, and the
index page, and to dump the digested metadata for inspection.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from refpages import main
>>> main()  # doctest: +SKIP
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
