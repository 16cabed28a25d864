"""Load and validate site configuration YAML for docs builds.

This subpackage parses the project's ``site.yaml`` file, applies defaults for
the build section, resolves relative paths against the config file, and
produces typed dataclasses (:class:`SiteConfig`, :class:`SeoConfig`,
:class:`BuildConfig`) that the enumerator, SEO helpers, and generator consume.

Examples
--------
>>> from pathlib import Path
>>> from docs_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.build.sitemap_path  # doctest: +SKIP
PosixPath('config/../public/sitemap.xml')
"""

from .loader import load_site_config
from .models import BuildConfig, SeoConfig, SiteConfig, SiteConfigError

__all__ = [
    "BuildConfig",
    "SeoConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
