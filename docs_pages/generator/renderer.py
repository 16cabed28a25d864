"""Render Markdown/MDX document bodies into HTML fragments.

MDX sources often decorate fences (```` ```ts title="client.ts" {2} ````) and
nest them inside list items. Python-Markdown's ``fenced_code`` extension only
understands a bare language label, so fences are rewritten to that form first,
with their contents dedented to the fence's column. After conversion every
``<pre><code>`` block is highlighted with Pygments and tagged with a
``data-language`` attribute for the templates.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape, unescape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCE_OPEN_PATTERN = re.compile(
    r"(?P<indent>[ ]{0,3})(?P<fence>`{3,}|~{3,})[ \t]*"
    r"(?P<language>[A-Za-z0-9_+#.-]+)?(?P<attributes>[ \t,{][^\r\n]*)?"
)
FENCE_CLOSE_PATTERN = re.compile(r"[ ]{0,3}(?P<fence>`{3,}|~{3,})[ \t]*")
CODE_ELEMENT_PATTERN = re.compile(
    r'<pre><code(?: class="language-(?P<language>[^"]+)")?>(?P<code>.*?)</code></pre>',
    re.DOTALL,
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_EXTENSIONS = ("fenced_code", "tables", "sane_lists", "toc")


def normalize_fences(text: str) -> str:
    """Return ``text`` with fences reduced to a bare language label.

    Attributes after the label (``title="x"``, ``{1,3}``, ``,no_run``) are
    dropped, the fence is moved to column zero, and lines inside the block
    lose up to as many leading spaces as the opening fence was indented.
    Fences left open at the end of the text are closed there.
    """
    output: list[str] = []
    fence: str | None = None
    indent = 0
    for line in text.splitlines(keepends=True):
        content = line.rstrip("\r\n")
        ending = line[len(content) :]
        if fence is None:
            opened = FENCE_OPEN_PATTERN.fullmatch(content)
            if opened is None:
                output.append(line)
                continue
            fence = opened["fence"]
            indent = len(opened["indent"])
            output.append(f"{fence}{opened['language'] or ''}{ending}")
            continue
        closed = FENCE_CLOSE_PATTERN.fullmatch(content)
        if (
            closed is not None
            and closed["fence"][0] == fence[0]
            and len(closed["fence"]) >= len(fence)
        ):
            output.append(f"{fence}{ending}")
            fence = None
            continue
        dedent = len(content) - len(content.lstrip(" "))
        output.append(line[min(dedent, indent) :])
    if fence is not None:
        if output and not output[-1].endswith("\n"):
            output[-1] += "\n"
        output.append(f"{fence}\n")
    return "".join(output)


class HtmlContentRenderer:
    """Turn document bodies into HTML fragments for the page templates."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer for the given Pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(
            style=pygments_style, cssclass="codehilite", wrapcode=True
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str, *, link_extension: Extension | None = None) -> str:
        """Render ``text`` into HTML.

        A fresh ``Markdown`` instance is built per call, so one renderer can
        serve several pages concurrently.

        Parameters
        ----------
        text : str
            Markdown body without front matter.
        link_extension : Extension, optional
            Extra extension applied for this document, typically the relative
            link rewriter bound to the document's location.
        """
        normalized = normalize_fences(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = list(MARKDOWN_EXTENSIONS)
        if link_extension is not None:
            extensions.append(link_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={"toc": {"permalink": False}},
            output_format="html",
        )
        return self._highlight_blocks(md.convert(normalized))

    def code_block(self, code: str, language: str | None = None) -> str:
        """Return ``code`` highlighted as ``language`` with ``data-language`` set.

        Unknown or missing languages fall back to the plain-text lexer while
        keeping the requested label on the wrapper.
        """
        lang = language or "text"
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name("text")
        html = highlight(code, lexer, self._formatter)
        label = escape(lang, quote=True)
        return CODEHILITE_OPEN_TAG.sub(
            f'<div class="codehilite" data-language="{label}">', html, 1
        )

    def _highlight_blocks(self, html: str) -> str:
        """Replace each plain ``<pre><code>`` element with a highlighted block."""

        def _repl(element: re.Match[str]) -> str:
            return self.code_block(unescape(element["code"]), element["language"])

        return CODE_ELEMENT_PATTERN.sub(_repl, html)


__all__ = ["HtmlContentRenderer", "normalize_fences"]
