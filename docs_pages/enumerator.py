"""Enumerate every publishable page path of the documentation site.

The same list drives static page generation and the sitemap, so both always
agree on which routes exist. Content failures degrade the list to the static
pages instead of aborting the build.

Example
-------
>>> from docs_pages.content import ContentStore, MemorySource, SlugResolver
>>> from docs_pages.enumerator import PageEnumerator
>>> store = ContentStore(MemorySource({"introduction.md": "", "sdks/python.md": ""}))
>>> PageEnumerator(SlugResolver(store)).enumerate()
['/', '/docs/introduction', '/docs/sdks/python']
"""

from __future__ import annotations

import logging

from ._constants import DOCS_ROUTE_TEMPLATE, SITE_ROOT
from .content import ContentReadError, SlugResolver

logger = logging.getLogger(__name__)

STATIC_PAGES: tuple[str, ...] = (SITE_ROOT,)


def doc_route(slug: str | tuple[str, ...]) -> str:
    """Return the absolute site path for a document slug."""
    joined = slug if isinstance(slug, str) else "/".join(slug)
    return DOCS_ROUTE_TEMPLATE.format(slug=joined)


class PageEnumerator:
    """Produce the ordered list of page paths for a content tree."""

    def __init__(
        self, resolver: SlugResolver, *, static_pages: tuple[str, ...] = STATIC_PAGES
    ) -> None:
        self.resolver = resolver
        self.static_pages = static_pages

    def enumerate(self) -> list[str]:
        """Return the static pages followed by one ``/docs/<slug>`` per document.

        Returns
        -------
        list[str]
            Absolute site paths. The site root is always first and appears
            exactly once; document paths follow in slug order.

        Notes
        -----
        A :class:`~docs_pages.content.ContentReadError`, including a missing
        content root, is logged and yields only the static pages.
        """
        pages = list(self.static_pages)
        try:
            slugs = self.resolver.all_slugs()
        except ContentReadError as exc:
            logger.warning("Content enumeration failed; using static pages only: %s", exc)
            return pages
        pages.extend(doc_route(slug) for slug in slugs)
        return pages


__all__ = ["STATIC_PAGES", "PageEnumerator", "doc_route"]
