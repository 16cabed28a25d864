"""Content tree access: storage, slug resolution, and lookup errors.

Examples
--------
>>> from docs_pages.content import ContentStore, MemorySource, SlugResolver
>>> resolver = SlugResolver(ContentStore(MemorySource({"intro.md": "Hi"})))
>>> resolver.resolve(["intro"])[0]
'intro'
"""

from .errors import ContentReadError, DocsError, InvalidSlug, NotFound
from .slugs import SlugResolver, validate_segments
from .store import (
    ContentDocument,
    ContentSource,
    ContentStore,
    FileSystemSource,
    MemorySource,
)

__all__ = [
    "ContentDocument",
    "ContentReadError",
    "ContentSource",
    "ContentStore",
    "DocsError",
    "FileSystemSource",
    "InvalidSlug",
    "MemorySource",
    "NotFound",
    "SlugResolver",
    "validate_segments",
]
