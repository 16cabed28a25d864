"""Serialize enumerated page paths into a sitemaps.org ``urlset`` document.

The sitemap lists the site root with daily change frequency and top priority,
and every documentation page as weekly with priority ``0.8``. ``lastmod`` is
the generation time rather than the content modification time. The root entry
is always present exactly once, so a failed content enumeration still yields
a valid, root-only sitemap.

Example
-------
>>> import datetime as dt
>>> from docs_pages.sitemap import SitemapBuilder
>>> builder = SitemapBuilder("https://openmemory.ai")  # doctest: +SKIP
>>> xml = builder.render(["/", "/docs/introduction"], dt.datetime.now(dt.UTC))  # doctest: +SKIP
>>> "<loc>https://openmemory.ai/docs/introduction</loc>" in xml  # doctest: +SKIP
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import datetime as dt
import typing as typ

from ._constants import SITE_ROOT, SITEMAP_NAMESPACE
from .seo import format_timestamp
from .templating import render_text, template_environment

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One ``<url>`` row of the sitemap."""

    loc: str
    lastmod: str
    changefreq: str
    priority: str


def build_entries(
    paths: cabc.Iterable[str], base_url: str, generated_at: dt.datetime
) -> list[SitemapEntry]:
    """Return sitemap rows for ``paths``, root first and without duplicates."""
    ordered = list(dict.fromkeys(paths))
    if SITE_ROOT in ordered:
        ordered.remove(SITE_ROOT)
    ordered.insert(0, SITE_ROOT)
    lastmod = format_timestamp(generated_at)
    base = base_url.rstrip("/")
    return [
        SitemapEntry(
            loc=f"{base}{path}",
            lastmod=lastmod,
            changefreq="daily" if path == SITE_ROOT else "weekly",
            priority="1.0" if path == SITE_ROOT else "0.8",
        )
        for path in ordered
    ]


class SitemapBuilder:
    """Render and persist ``sitemap.xml`` for a list of page paths."""

    def __init__(self, base_url: str, *, templates_dir: Path | None = None) -> None:
        """Initialize the builder and its Jinja environment.

        Parameters
        ----------
        base_url : str
            Absolute site URL each page path is appended to.
        templates_dir : Path, optional
            Directory containing ``sitemap.xml.jinja``; defaults to the
            package templates.
        """
        self.base_url = base_url
        self.template = template_environment(templates_dir).get_template(
            "sitemap.xml.jinja"
        )

    def render(
        self, paths: cabc.Iterable[str], generated_at: dt.datetime | None = None
    ) -> str:
        """Return the sitemap XML for ``paths``."""
        stamp = generated_at or dt.datetime.now(dt.UTC)
        entries = build_entries(paths, self.base_url, stamp)
        return render_text(self.template, namespace=SITEMAP_NAMESPACE, entries=entries)

    def write(
        self,
        paths: cabc.Iterable[str],
        output_path: Path,
        generated_at: dt.datetime | None = None,
    ) -> Path:
        """Render the sitemap for ``paths`` into ``output_path`` and return it."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(paths, generated_at), encoding="utf-8")
        return output_path


__all__ = ["SitemapBuilder", "SitemapEntry", "build_entries"]
