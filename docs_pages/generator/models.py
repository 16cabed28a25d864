"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from docs_pages.front_matter import DocMeta
    from docs_pages.seo import PageSeo


@dc.dataclass(slots=True)
class DocPageModel:
    """Structured data passed to the documentation page template.

    Attributes
    ----------
    route : str
        Absolute site path of the page (``/docs/<slug>``).
    meta : DocMeta
        Extracted metadata; the template shows the description only when
        ``meta.has_description`` is true.
    seo : PageSeo
        Head metadata, breadcrumbs, and JSON-LD for the page.
    body_html : str
        Rendered Markdown body.
    sidebar : list[dict[str, Any]]
        Navigation groups with active flags for ``route``.
    """

    route: str
    meta: DocMeta
    seo: PageSeo
    body_html: str
    sidebar: list[dict[str, typ.Any]]


__all__ = ["DocPageModel"]
