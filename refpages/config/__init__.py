"""Load and validate refpages site configuration.

This subpackage parses a ``refpages.yaml`` file, applies defaults for omitted
keys, validates navigation, link, and conflict-policy settings, and produces a
:class:`SiteConfig` that the page assembler consumes. The primary entry point
is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from refpages.config import load_site_config
>>> site = load_site_config(Path("refpages.yaml"))  # doctest: +SKIP
>>> site.extension  # doctest: +SKIP
'.html'
"""

from .helpers import parse_link_option
from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
    "parse_link_option",
]
