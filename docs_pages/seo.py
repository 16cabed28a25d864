"""Derive search-engine metadata for documentation and home pages.

Given a page's :class:`~docs_pages.front_matter.DocMeta` and the site's
:class:`~docs_pages.config.SeoConfig`, this module produces the title,
description, canonical URL, Open Graph article details, breadcrumbs, and
schema.org JSON-LD that the page templates emit in ``<head>``.

Example
-------
>>> import datetime as dt
>>> from docs_pages.config import SeoConfig
>>> from docs_pages.front_matter import DocMeta
>>> from docs_pages.seo import build_doc_seo
>>> site = SeoConfig(site_name="OpenMemory", base_url="https://openmemory.ai")
>>> meta = DocMeta(title="Python", slug="sdks/python")
>>> page = build_doc_seo(meta, site, dt.datetime(2025, 1, 1, tzinfo=dt.UTC))
>>> page.title
'Python - OpenMemory Documentation'
>>> page.canonical
'https://openmemory.ai/docs/sdks/python'
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import json
import typing as typ

from ._constants import DOCS_ROUTE_PREFIX
from .enumerator import doc_route
from .front_matter import title_from_segment

if typ.TYPE_CHECKING:
    from .config import SeoConfig
    from .front_matter import DocMeta

SCHEMA_CONTEXT = "https://schema.org"


@dc.dataclass(frozen=True, slots=True)
class Breadcrumb:
    """A single breadcrumb trail entry."""

    name: str
    url: str


@dc.dataclass(frozen=True, slots=True)
class ArticleMeta:
    """Open Graph ``article:*`` properties for documentation pages."""

    published_time: str
    modified_time: str
    author: str
    section: str
    tags: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class PageSeo:
    """Everything the ``<head>`` template needs for one page.

    Attributes
    ----------
    title : str
        Page title before site branding is applied.
    description : str
        Meta description; never empty.
    canonical : str
        Absolute canonical URL.
    og_type : str
        ``"website"`` for the home page, ``"article"`` for docs.
    og_image : str | None
        Absolute URL of the social preview image.
    article : ArticleMeta | None
        Article properties, present on documentation pages only.
    breadcrumbs : tuple[Breadcrumb, ...]
        Breadcrumb trail from the home page to this page.
    structured_data : dict[str, Any] | None
        JSON-LD payload, or ``None`` to omit the script tag.
    noindex : bool
        Whether robots should skip the page.
    """

    title: str
    description: str
    canonical: str
    site_name: str
    og_type: str = "website"
    og_image: str | None = None
    article: ArticleMeta | None = None
    breadcrumbs: tuple[Breadcrumb, ...] = ()
    structured_data: dict[str, typ.Any] | None = None
    noindex: bool = False

    @property
    def full_title(self) -> str:
        """Return the title with site branding unless it already carries it."""
        if self.site_name in self.title:
            return self.title
        return f"{self.title} | {self.site_name}"

    @property
    def structured_data_json(self) -> str | None:
        """Return the JSON-LD payload serialized for an inline script tag."""
        if self.structured_data is None:
            return None
        return json.dumps(self.structured_data, ensure_ascii=False).replace(
            "</", "<\\/"
        )


def format_timestamp(value: dt.datetime) -> str:
    """Return ``value`` as an ISO-8601 UTC string with milliseconds and ``Z``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=dt.UTC)
    stamp = value.astimezone(dt.UTC).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def build_breadcrumbs(slug: str, site: SeoConfig) -> list[Breadcrumb]:
    """Return the breadcrumb trail for the documentation page at ``slug``."""
    crumbs = [
        Breadcrumb(name="Home", url=site.base_url),
        Breadcrumb(name="Documentation", url=site.absolute_url(DOCS_ROUTE_PREFIX)),
    ]
    parts = [part for part in slug.split("/") if part]
    for index, part in enumerate(parts, start=1):
        crumbs.append(
            Breadcrumb(
                name=title_from_segment(part),
                url=site.absolute_url(doc_route(tuple(parts[:index]))),
            )
        )
    return crumbs


def breadcrumb_schema(items: typ.Iterable[Breadcrumb]) -> dict[str, typ.Any]:
    """Return a schema.org ``BreadcrumbList`` for ``items``."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": item.name,
                "item": item.url,
            }
            for position, item in enumerate(items, start=1)
        ],
    }


def article_schema(
    *,
    headline: str,
    description: str,
    url: str,
    published: str,
    site: SeoConfig,
    modified: str | None = None,
) -> dict[str, typ.Any]:
    """Return a schema.org ``TechnicalArticle`` for a documentation page."""
    payload: dict[str, typ.Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "TechnicalArticle",
        "headline": headline,
        "description": description,
        "author": {"@type": "Person", "name": site.author},
        "datePublished": published,
        "dateModified": modified or published,
        "url": url,
        "publisher": _publisher(site),
    }
    if site.og_image:
        payload["image"] = site.og_image
    return payload


def organization_schema(site: SeoConfig) -> dict[str, typ.Any]:
    """Return a schema.org ``Organization`` describing the site owner."""
    payload: dict[str, typ.Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": site.site_name,
        "url": site.base_url,
        "description": site.tagline or site.description,
    }
    if site.logo_url:
        payload["logo"] = site.logo_url
    same_as = [link for link in (site.repo_url,) if link]
    if same_as:
        payload["sameAs"] = same_as
    return payload


def software_schema(site: SeoConfig) -> dict[str, typ.Any]:
    """Return a schema.org ``SoftwareApplication`` for the documented product."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "SoftwareApplication",
        "name": site.site_name,
        "applicationCategory": "DeveloperApplication",
        "operatingSystem": "Cross-platform",
        "offers": {"@type": "Offer", "price": "0", "priceCurrency": "USD"},
        "description": site.description or site.tagline,
    }


def _publisher(site: SeoConfig) -> dict[str, typ.Any]:
    publisher: dict[str, typ.Any] = {"@type": "Organization", "name": site.site_name}
    if site.logo_url:
        publisher["logo"] = {"@type": "ImageObject", "url": site.logo_url}
    return publisher


def fallback_description(title: str, site: SeoConfig) -> str:
    """Return the generic description used when a page does not define one."""
    text = f"Learn about {title} in {site.site_name}'s comprehensive documentation."
    if site.tagline:
        text = f"{text} {site.tagline}"
    return text


def build_doc_seo(
    meta: DocMeta, site: SeoConfig, generated_at: dt.datetime
) -> PageSeo:
    """Return the SEO record for a documentation page.

    Parameters
    ----------
    meta : DocMeta
        Extracted page metadata; ``meta.description`` may be ``None``.
    site : SeoConfig
        Site identity and URLs.
    generated_at : datetime
        Build time, used for article publication and modification stamps.

    Returns
    -------
    PageSeo
        Titles, description, canonical URL, article details, breadcrumbs,
        and a JSON-LD ``@graph`` of breadcrumb and article schemas.
    """
    canonical = site.absolute_url(doc_route(meta.slug))
    description = (
        meta.description
        if meta.description is not None
        else fallback_description(meta.title, site)
    )
    timestamp = format_timestamp(generated_at)
    parts = [part for part in meta.slug.split("/") if part]
    section = parts[0][:1].upper() + parts[0][1:] if parts else "Documentation"
    crumbs = build_breadcrumbs(meta.slug, site)
    structured = {
        "@context": SCHEMA_CONTEXT,
        "@graph": [
            breadcrumb_schema(crumbs),
            article_schema(
                headline=meta.title,
                description=meta.description or "",
                url=canonical,
                published=timestamp,
                site=site,
            ),
        ],
    }
    return PageSeo(
        title=f"{meta.title} - {site.documentation_label}",
        description=description,
        canonical=canonical,
        site_name=site.site_name,
        og_type="article",
        og_image=site.og_image,
        article=ArticleMeta(
            published_time=timestamp,
            modified_time=timestamp,
            author=site.author,
            section=section,
            tags=tuple(part.replace("-", " ") for part in parts),
        ),
        breadcrumbs=tuple(crumbs),
        structured_data=structured,
    )


def build_home_seo(site: SeoConfig) -> PageSeo:
    """Return the SEO record for the site root page."""
    title = f"{site.site_name} - {site.tagline}" if site.tagline else site.site_name
    description = site.description or site.tagline or site.documentation_label
    return PageSeo(
        title=title,
        description=description,
        canonical=site.base_url,
        site_name=site.site_name,
        og_type="website",
        og_image=site.og_image,
        breadcrumbs=(Breadcrumb(name="Home", url=site.base_url),),
        structured_data={
            "@context": SCHEMA_CONTEXT,
            "@graph": [organization_schema(site), software_schema(site)],
        },
    )


__all__ = [
    "ArticleMeta",
    "Breadcrumb",
    "PageSeo",
    "article_schema",
    "breadcrumb_schema",
    "build_breadcrumbs",
    "build_doc_seo",
    "build_home_seo",
    "fallback_description",
    "format_timestamp",
    "organization_schema",
    "software_schema",
]
