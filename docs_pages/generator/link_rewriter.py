"""Rewrite relative links between content files into site routes."""

from __future__ import annotations

import posixpath
import typing as typ
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from docs_pages._constants import (
    CONTENT_EXTENSIONS,
    INDEX_STEM,
    SITE_ROOT,
    SLUG_SEGMENT_PATTERN,
)
from docs_pages.enumerator import doc_route

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


def rewrite_content_link(target: str | None, document_path: PurePosixPath) -> str | None:
    """Return the site route for a relative link to another content file.

    Parameters
    ----------
    target : str or None
        Raw ``href`` from the Markdown, e.g. ``../api/query.md#filters``.
    document_path : PurePosixPath
        Root-relative path of the document containing the link.

    Returns
    -------
    str or None
        ``/docs/<slug>`` (query and fragment preserved) for links to ``.md``
        or ``.mdx`` files inside the content tree; ``None`` when the link
        should stay untouched (external, absolute, anchors, other files, or
        targets outside the tree).
    """
    if not target or target.startswith(("#", "/", "//")) or "://" in target:
        return None
    parsed = urlsplit(target)
    if parsed.scheme or parsed.netloc or not parsed.path:
        return None
    target_path = PurePosixPath(parsed.path)
    if target_path.suffix not in CONTENT_EXTENSIONS:
        return None

    base_dir = posixpath.dirname(document_path.as_posix())
    joined = posixpath.normpath(posixpath.join(base_dir, parsed.path))
    if joined.startswith("../") or joined == "..":
        return None
    parts = list(PurePosixPath(joined).with_suffix("").parts)
    if parts and parts[-1] == INDEX_STEM:
        parts.pop()
    if not all(SLUG_SEGMENT_PATTERN.fullmatch(part) for part in parts):
        return None

    url = doc_route(tuple(parts)) if parts else SITE_ROOT
    if parsed.query:
        url = f"{url}?{parsed.query}"
    if parsed.fragment:
        url = f"{url}#{parsed.fragment}"
    return url


class ContentLinkExtension(Extension):
    """Rewrite relative Markdown links to sibling documents into site routes.

    Content authors link files the way they sit on disk (``./python.md``,
    ``../concepts/decay.mdx``). Inserting this extension into a
    ``markdown.Markdown`` instance turns those into the ``/docs/...`` routes
    the generator writes, so links keep working on the published site.
    """

    def __init__(self, document_path: PurePosixPath) -> None:
        super().__init__()
        self.document_path = document_path

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the content-link treeprocessor on the Markdown instance."""
        processor = ContentLinkTreeprocessor(md, self.document_path)
        md.treeprocessors.register(processor, "docs_content_links", 15)


class ContentLinkTreeprocessor(Treeprocessor):
    """Apply :func:`rewrite_content_link` to every anchor in the tree."""

    def __init__(self, md: Markdown, document_path: PurePosixPath) -> None:
        super().__init__(md)
        self.document_path = document_path

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree."""
        for element in root.iter("a"):
            rewritten = rewrite_content_link(element.get("href"), self.document_path)
            if rewritten:
                element.set("href", rewritten)
        return root


__all__ = [
    "ContentLinkExtension",
    "ContentLinkTreeprocessor",
    "rewrite_content_link",
]
