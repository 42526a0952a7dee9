"""Common literal values used across refpages.

These constants keep filenames and defaults centralized so the CLI, the
configuration loader, the assembler, and tests can import the same values
without drifting. Intended for internal use within the refpages package.

Examples
--------
>>> from refpages import _constants
>>> _constants.INDEX_STEM + _constants.DEFAULT_EXTENSION
'index.html'
"""

DEFAULT_EXTENSION = ".html"
DEFAULT_DUMP_NAME = "refpages-metadata.json"
INDEX_STEM = "index"
ASSETS_DIRNAME = "assets"
STYLESHEET_NAME = "refpages.css"
NAVIGATION_KINDS = ("classes", "guides", "files")
