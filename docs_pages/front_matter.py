r"""Split documentation sources into front-matter metadata and body text.

Documents may open with a YAML header fenced by ``---`` lines. This module
separates that header from the Markdown body and normalizes it into a
:class:`DocMeta` record that the page templates and SEO helpers consume.
Missing or malformed headers are never fatal: the whole text becomes the body
and the title is derived from the slug.

Example
-------
>>> from docs_pages.front_matter import extract
>>> doc = extract("---\ntitle: Decay\n---\nBody", slug="concepts/decay")
>>> doc.meta.title, doc.body
('Decay', 'Body')
>>> extract("Just text", slug="advanced/embedding-modes").meta.title
'Embedding modes'
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import types
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)",
    re.DOTALL | re.MULTILINE,
)
DEFAULT_TITLE = "Documentation"
_KNOWN_KEYS = frozenset({"title", "description"})


@dc.dataclass(frozen=True, slots=True)
class DocMeta:
    """Metadata describing a single documentation page.

    Attributes
    ----------
    title : str
        Page title; always non-empty.
    description : str | None
        Summary used for meta tags, or ``None`` when the document has none.
    slug : str
        Canonical ``/``-joined slug of the page.
    extra : Mapping[str, Any]
        Remaining front-matter keys, exposed read-only.
    """

    title: str
    description: str | None = None
    slug: str = ""
    extra: cabc.Mapping[str, typ.Any] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    @property
    def has_description(self) -> bool:
        """Return True when the document supplied its own description."""
        return self.description is not None


@dc.dataclass(frozen=True, slots=True)
class ExtractedDocument:
    """Pair of parsed metadata and the Markdown body that follows it."""

    meta: DocMeta
    body: str


def title_from_segment(segment: str) -> str:
    """Return a display title for a slug segment.

    Hyphens become spaces and only the first letter is capitalized, so
    ``"embedding-modes"`` reads ``"Embedding modes"``.
    """
    text = segment.replace("-", " ")
    return text[:1].upper() + text[1:]


def split_front_matter(raw: str) -> tuple[dict[str, typ.Any], str]:
    """Return the front-matter mapping and body of ``raw``.

    Parameters
    ----------
    raw : str
        Full document text.

    Returns
    -------
    tuple[dict[str, Any], str]
        The parsed header (empty when absent, unterminated, unparsable, or
        not a mapping) and the body. Without a usable header the body is
        ``raw`` unchanged.
    """
    text = raw.removeprefix("\ufeff")
    fenced = FRONT_MATTER_PATTERN.match(text)
    if fenced is None:
        return {}, raw

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(fenced.group(1))
    except YAMLError:
        return {}, raw
    match loaded:
        case None:
            header: dict[str, typ.Any] = {}
        case dict():
            header = {str(key): value for key, value in loaded.items()}
        case _:
            return {}, raw
    return header, text[fenced.end() :]


def _optional_text(value: object) -> str | None:
    """Return a stripped string for scalar ``value`` or None when blank."""
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def extract(raw: str, *, slug: str | cabc.Sequence[str] = "") -> ExtractedDocument:
    """Split ``raw`` into :class:`DocMeta` and body text.

    Parameters
    ----------
    raw : str
        Document text, optionally starting with a YAML front-matter block.
    slug : str or Sequence[str], optional
        Slug of the document, used for ``DocMeta.slug`` and to synthesize a
        title when the header does not provide one.

    Returns
    -------
    ExtractedDocument
        Immutable metadata plus the remaining Markdown body.
    """
    slug_path = slug if isinstance(slug, str) else "/".join(slug)
    header, body = split_front_matter(raw)
    title = _optional_text(header.get("title"))
    if title is None:
        last_segment = slug_path.rsplit("/", 1)[-1]
        title = title_from_segment(last_segment) if last_segment else DEFAULT_TITLE
    extra = {key: value for key, value in header.items() if key not in _KNOWN_KEYS}
    meta = DocMeta(
        title=title,
        description=_optional_text(header.get("description")),
        slug=slug_path,
        extra=types.MappingProxyType(extra),
    )
    return ExtractedDocument(meta=meta, body=body)


__all__ = [
    "DEFAULT_TITLE",
    "DocMeta",
    "ExtractedDocument",
    "extract",
    "split_front_matter",
    "title_from_segment",
]
