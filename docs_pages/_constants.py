"""Common literal values used across docs_pages.

These constants keep content extensions, route prefixes, and slug rules
centralized so the store, resolver, enumerator, and templates agree on the
same values. Intended for internal use within the docs_pages package.

Examples
--------
>>> from docs_pages import _constants
>>> _constants.DOCS_ROUTE_TEMPLATE.format(slug="sdks/python")
'/docs/sdks/python'
>>> bool(_constants.SLUG_SEGMENT_PATTERN.fullmatch("embedding-modes"))
True
"""

import re

CONTENT_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")
INDEX_STEM = "index"
SITE_ROOT = "/"
DOCS_ROUTE_PREFIX = "/docs"
DOCS_ROUTE_TEMPLATE = DOCS_ROUTE_PREFIX + "/{slug}"
SITEMAP_FILENAME = "sitemap.xml"
SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
SLUG_SEGMENT_PATTERN = re.compile(r"[a-z0-9](?:[a-z0-9-]*[a-z0-9])?")
