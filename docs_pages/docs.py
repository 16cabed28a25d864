"""Load a documentation page as the ``(DocMeta, body)`` pair handed to renderers."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from .front_matter import DocMeta, extract

if typ.TYPE_CHECKING:
    from .content import ContentDocument, SlugResolver


@dc.dataclass(frozen=True, slots=True)
class DocPage:
    """A resolved document split into metadata and Markdown body.

    Attributes
    ----------
    meta : DocMeta
        Metadata extracted from the front matter.
    body : str
        Markdown that follows the front matter.
    document : ContentDocument
        The source document, kept for its slug and backing path.
    """

    meta: DocMeta
    body: str
    document: ContentDocument

    @property
    def slug(self) -> tuple[str, ...]:
        """Return the slug segments of the page."""
        return self.document.slug


def load_doc_page(resolver: SlugResolver, segments: cabc.Sequence[str]) -> DocPage:
    """Resolve ``segments`` and split the document into metadata and body.

    Raises
    ------
    InvalidSlug
        If the segments are malformed.
    NotFound
        If no document backs the slug.
    ContentReadError
        If the document cannot be read.
    """
    slug, document = resolver.resolve(segments)
    extracted = extract(document.raw, slug=slug)
    return DocPage(meta=extracted.meta, body=extracted.body, document=document)


__all__ = ["DocPage", "load_doc_page"]
