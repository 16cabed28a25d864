"""Translate URL path segments into content documents.

The resolver is the boundary between untrusted request input and the content
tree: segments are validated before any lookup so ``..``, empty segments, and
stray characters never reach the filesystem.
"""

from __future__ import annotations

import collections.abc as cabc

from docs_pages._constants import SLUG_SEGMENT_PATTERN

from .errors import InvalidSlug
from .store import ContentDocument, ContentStore


def validate_segments(segments: cabc.Sequence[str]) -> tuple[str, ...]:
    """Return ``segments`` as a tuple after checking each one is slug-safe.

    Raises
    ------
    InvalidSlug
        If the sequence is empty or any segment is empty, contains ``..`` or a
        path separator, uses characters outside ``[a-z0-9-]``, or starts or
        ends with a hyphen.
    """
    parts = tuple(segments)
    if not parts:
        raise InvalidSlug(parts, "no path segments supplied")
    for segment in parts:
        if not segment:
            raise InvalidSlug(parts, "empty path segment")
        if ".." in segment:
            raise InvalidSlug(parts, "parent directory reference")
        if not SLUG_SEGMENT_PATTERN.fullmatch(segment):
            raise InvalidSlug(parts, f"segment '{segment}' is not a valid slug")
    return parts


class SlugResolver:
    """Resolve path segments to documents and list every resolvable slug."""

    def __init__(self, store: ContentStore) -> None:
        self.store = store

    def resolve(self, segments: cabc.Sequence[str]) -> tuple[str, ContentDocument]:
        """Return the canonical slug and document for ``segments``.

        Parameters
        ----------
        segments : Sequence[str]
            Post-routing, already decoded URL path segments.

        Returns
        -------
        tuple[str, ContentDocument]
            The ``/``-joined slug and the document it addresses.

        Raises
        ------
        InvalidSlug
            If the segments fail validation; the store is not consulted.
        NotFound
            If the slug is valid but no document backs it.
        ContentReadError
            If the backing document cannot be read.
        """
        slug = "/".join(validate_segments(segments))
        return slug, self.store.read(slug)

    def all_slugs(self) -> list[tuple[str, ...]]:
        """Return the segment sequence of every document in the store."""
        return [tuple(slug.split("/")) for slug in self.store.list_all()]


__all__ = ["SlugResolver", "validate_segments"]
