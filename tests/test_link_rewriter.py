"""Unit tests for rewriting relative content links into site routes."""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest
from bs4 import BeautifulSoup

from docs_pages.generator import ContentLinkExtension, HtmlContentRenderer
from docs_pages.generator.link_rewriter import rewrite_content_link

DOCUMENT = PurePosixPath("sdks/python.md")


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("javascript.md", "/docs/sdks/javascript"),
        ("./javascript.mdx", "/docs/sdks/javascript"),
        ("../concepts/decay.md", "/docs/concepts/decay"),
        ("index.md", "/docs/sdks"),
        ("../api/query.md#filters", "/docs/api/query#filters"),
        ("../api/query.md?tab=curl", "/docs/api/query?tab=curl"),
        ("../index.md", "/"),
    ],
)
def test_relative_content_links_become_routes(target: str, expected: str) -> None:
    """Links to sibling documents map onto their published routes."""
    assert rewrite_content_link(target, DOCUMENT) == expected


@pytest.mark.parametrize(
    "target",
    [
        None,
        "",
        "#install",
        "/docs/introduction",
        "//cdn.example.com/a.md",
        "https://github.com/caviraoss/openmemory/blob/main/README.md",
        "mailto:team@example.com",
        "diagram.png",
        "../../outside.md",
        "../Guides/Setup.md",
    ],
)
def test_other_links_are_left_alone(target: str | None) -> None:
    """External, absolute, anchor, asset and out-of-tree links are untouched."""
    assert rewrite_content_link(target, DOCUMENT) is None


def test_extension_rewrites_rendered_anchors() -> None:
    """The Markdown extension applies the rewrite to rendered HTML."""
    renderer = HtmlContentRenderer()
    html = renderer.markdown(
        "See [JS](javascript.md) and [site](https://openmemory.ai).",
        link_extension=ContentLinkExtension(DOCUMENT),
    )
    hrefs = [a["href"] for a in BeautifulSoup(html, "html.parser").find_all("a")]
    assert hrefs == ["/docs/sdks/javascript", "https://openmemory.ai"]


def test_renderer_without_extension_keeps_links() -> None:
    """Without the extension, links are rendered verbatim."""
    html = HtmlContentRenderer().markdown("[JS](javascript.md)")
    anchor = BeautifulSoup(html, "html.parser").find("a")
    assert anchor is not None
    assert anchor["href"] == "javascript.md"
