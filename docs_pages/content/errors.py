"""Exceptions raised while resolving and reading documentation content."""

from __future__ import annotations


class DocsError(Exception):
    """Base class for content resolution failures."""


class NotFound(DocsError, LookupError):  # noqa: N818 - public name mirrors the outcome
    """Raised when a slug does not resolve to any content document.

    Attributes
    ----------
    slug : str
        Canonical ``/``-joined slug that failed to resolve.
    """

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"No content document found for slug '{slug}'.")


class InvalidSlug(DocsError, ValueError):  # noqa: N818 - public name mirrors the outcome
    """Raised when inbound path segments are malformed or unsafe.

    Attributes
    ----------
    segments : tuple[str, ...]
        The rejected path segments, exactly as received.
    reason : str
        Short explanation of the rule that was violated.
    """

    def __init__(self, segments: tuple[str, ...], reason: str) -> None:
        self.segments = segments
        self.reason = reason
        super().__init__(f"Invalid slug {list(segments)!r}: {reason}.")


class ContentReadError(DocsError, OSError):
    """Raised when the content tree cannot be listed or a document read.

    Attributes
    ----------
    path : str
        Root-relative POSIX path (or root directory) that failed.
    """

    def __init__(self, path: str, detail: str | None = None) -> None:
        self.path = path
        msg = f"Unable to read content at '{path}'"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


__all__ = ["ContentReadError", "DocsError", "InvalidSlug", "NotFound"]
