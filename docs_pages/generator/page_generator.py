"""High-level orchestration for documentation site generation.

This module ties the content pipeline together: it enumerates every page of
the content tree, resolves and splits each document into metadata and body,
renders the body with ``HtmlContentRenderer``, and writes themed HTML through
shared Jinja templates. It also writes the home page and ``sitemap.xml`` from
the same enumerated page list, so static routes and sitemap rows always match.

Example
-------
>>> from pathlib import Path
>>> from docs_pages.config import load_site_config
>>> from docs_pages.generator import DocsSiteGenerator
>>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> DocsSiteGenerator(config).run()  # doctest: +SKIP
[PosixPath('public/docs/introduction/index.html'), ...]
"""

from __future__ import annotations

import collections.abc as cabc
import concurrent.futures as cf
import datetime as dt
import logging
import typing as typ

from docs_pages._constants import DOCS_ROUTE_PREFIX, SITE_ROOT, SITEMAP_FILENAME
from docs_pages.content import (
    ContentReadError,
    ContentStore,
    InvalidSlug,
    NotFound,
    SlugResolver,
)
from docs_pages.docs import DocPage, load_doc_page
from docs_pages.enumerator import PageEnumerator, doc_route
from docs_pages.generator.link_rewriter import ContentLinkExtension
from docs_pages.generator.models import DocPageModel
from docs_pages.generator.renderer import HtmlContentRenderer
from docs_pages.homepage import HomePageBuilder
from docs_pages.navigation import build_sidebar
from docs_pages.seo import build_doc_seo
from docs_pages.sitemap import SitemapBuilder
from docs_pages.templating import render_text, template_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docs_pages.config import SiteConfig

logger = logging.getLogger(__name__)


class DocsSiteGenerator:
    """Render every enumerated documentation page plus home page and sitemap."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
        store: ContentStore | None = None,
        workers: int = 1,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Site identity plus content/output locations.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to
            ``site_config.build.output_dir``.
        store : ContentStore, optional
            Content store to read from; defaults to a filesystem store rooted
            at ``site_config.build.content_dir``.
        workers : int, optional
            Number of threads used to render documentation pages. Pages are
            independent, so any value yields the same files.
        """
        self.site = site_config
        self.output_dir = output_dir or site_config.build.output_dir
        self.templates_dir = templates_dir
        self.store = store or ContentStore.from_directory(site_config.build.content_dir)
        self.resolver = SlugResolver(self.store)
        self.enumerator = PageEnumerator(self.resolver)
        self.renderer = HtmlContentRenderer(site_config.build.pygments_style)
        self.workers = max(1, workers)
        self.template = template_environment(templates_dir).get_template(
            "doc_page.jinja"
        )

    def run(self) -> list[Path]:
        """Write all pages and the sitemap into the output directory.

        Returns
        -------
        list[Path]
            Documentation pages in enumeration order, followed by the home
            page and the sitemap.

        Notes
        -----
        A page that cannot be resolved or read is logged and skipped; the
        remaining pages are still written. The sitemap lists every enumerated
        page and falls back to the root entry when enumeration fails.
        """
        generated_at = dt.datetime.now(dt.UTC)
        pages = self.enumerator.enumerate()
        doc_routes = [route for route in pages if route != SITE_ROOT]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written = [
            path
            for path in self._render_routes(doc_routes, generated_at)
            if path is not None
        ]
        home = HomePageBuilder(self.site, templates_dir=self.templates_dir)
        written.append(home.run(self.output_dir / "index.html", generated_at))
        sitemap = SitemapBuilder(
            self.site.seo.base_url, templates_dir=self.templates_dir
        )
        sitemap_path = self._sitemap_path()
        written.append(sitemap.write(pages, sitemap_path, generated_at))
        return written

    def render_doc(
        self, segments: cabc.Sequence[str], generated_at: dt.datetime | None = None
    ) -> str:
        """Return the HTML for the documentation page at ``segments``.

        Raises
        ------
        InvalidSlug
            If the segments are malformed.
        NotFound
            If no document backs the slug.
        ContentReadError
            If the document cannot be read.
        """
        page = load_doc_page(self.resolver, segments)
        return self._render_page(page, generated_at or dt.datetime.now(dt.UTC))

    def _render_routes(
        self, routes: list[str], generated_at: dt.datetime
    ) -> list[Path | None]:
        """Render ``routes`` in order, optionally across a thread pool."""
        if self.workers == 1 or len(routes) < 2:
            return [self._write_route(route, generated_at) for route in routes]
        with cf.ThreadPoolExecutor(max_workers=self.workers) as pool:
            return list(
                pool.map(lambda route: self._write_route(route, generated_at), routes)
            )

    def _write_route(self, route: str, generated_at: dt.datetime) -> Path | None:
        """Render one route to ``<output>/docs/<slug>/index.html`` or skip it."""
        segments = route.removeprefix(f"{DOCS_ROUTE_PREFIX}/").split("/")
        try:
            html = self.render_doc(segments, generated_at)
        except (InvalidSlug, NotFound, ContentReadError) as exc:
            logger.warning("Skipping %s: %s", route, exc)
            return None
        output_path = self.output_dir.joinpath("docs", *segments, "index.html")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
        logger.debug("Rendered %s -> %s", route, output_path)
        return output_path

    def _render_page(self, page: DocPage, generated_at: dt.datetime) -> str:
        """Render ``page`` through the documentation template."""
        route = doc_route(page.slug)
        model = DocPageModel(
            route=route,
            meta=page.meta,
            seo=build_doc_seo(page.meta, self.site.seo, generated_at),
            body_html=self.renderer.markdown(
                page.body, link_extension=ContentLinkExtension(page.document.path)
            ),
            sidebar=build_sidebar(route),
        )
        return render_text(
            self.template,
            page=model,
            seo=model.seo,
            sidebar=model.sidebar,
            site=self.site.seo,
            pygments_css=self.renderer.stylesheet,
            generated_at=generated_at,
        )

    def _sitemap_path(self) -> Path:
        """Return the sitemap destination, following any output override."""
        if self.site.build.sitemap_output is not None:
            return self.site.build.sitemap_output
        return self.output_dir / SITEMAP_FILENAME


__all__ = ["DocsSiteGenerator"]
