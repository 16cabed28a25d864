"""Unit tests for page enumeration."""

from __future__ import annotations

import typing as typ

import pytest

from docs_pages.content import (
    ContentReadError,
    ContentStore,
    MemorySource,
    SlugResolver,
)
from docs_pages.enumerator import STATIC_PAGES, PageEnumerator, doc_route

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pytest_mock import MockerFixture

    from .conftest import WriteTree


def test_enumerate_lists_root_then_documents() -> None:
    """The root comes first, followed by one docs route per slug."""
    store = ContentStore(
        MemorySource(
            {
                "sdks/python.md": "",
                "introduction.md": "",
                "sdks/index.md": "",
            }
        )
    )
    pages = PageEnumerator(SlugResolver(store)).enumerate()
    assert pages == ["/", "/docs/introduction", "/docs/sdks", "/docs/sdks/python"]


def test_enumerate_empty_tree_yields_root_only() -> None:
    """An empty content tree still publishes the home page."""
    store = ContentStore(MemorySource({}))
    assert PageEnumerator(SlugResolver(store)).enumerate() == list(STATIC_PAGES)


def test_enumerate_missing_root_falls_back(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """A missing content directory degrades to the static pages with a warning."""
    resolver = SlugResolver(ContentStore.from_directory(tmp_path / "absent"))
    with caplog.at_level("WARNING", logger="docs_pages.enumerator"):
        pages = PageEnumerator(resolver).enumerate()
    assert pages == ["/"]
    assert "static pages only" in caplog.text


def test_enumerate_content_error_is_not_raised(mocker: MockerFixture) -> None:
    """Any content read failure during enumeration is absorbed."""
    resolver = mocker.Mock(spec=SlugResolver)
    resolver.all_slugs.side_effect = ContentReadError("content", "boom")
    assert PageEnumerator(resolver).enumerate() == ["/"]


def test_enumerate_from_disk(tmp_path: Path, write_tree: WriteTree) -> None:
    """Enumeration over a real tree includes nested and MDX documents."""
    root = write_tree(
        tmp_path / "content",
        {
            "introduction.md": "",
            "advanced/embedding-modes.mdx": "",
            "assets/logo.svg": "<svg/>",
        },
    )
    pages = PageEnumerator(SlugResolver(ContentStore.from_directory(root))).enumerate()
    assert pages == ["/", "/docs/advanced/embedding-modes", "/docs/introduction"]


def test_custom_static_pages_lead_the_list() -> None:
    """Additional static pages precede the document routes."""
    store = ContentStore(MemorySource({"introduction.md": ""}))
    enumerator = PageEnumerator(SlugResolver(store), static_pages=("/", "/about"))
    assert enumerator.enumerate() == ["/", "/about", "/docs/introduction"]


@pytest.mark.parametrize(
    ("slug", "expected"),
    [
        ("introduction", "/docs/introduction"),
        (("sdks", "python"), "/docs/sdks/python"),
    ],
)
def test_doc_route(slug: str | tuple[str, ...], expected: str) -> None:
    """Slugs map onto ``/docs/<slug>``."""
    assert doc_route(slug) == expected


def test_enumerated_routes_all_resolve(tmp_path: Path, write_tree: WriteTree) -> None:
    """Links out of the tree never add routes that cannot be resolved."""
    root = write_tree(tmp_path / "content", {"introduction.md": "Intro"})
    outside = write_tree(tmp_path / "outside", {"secret.md": "secret"})
    (root / "ext").symlink_to(outside, target_is_directory=True)
    resolver = SlugResolver(ContentStore.from_directory(root))
    pages = PageEnumerator(resolver).enumerate()
    assert pages == ["/", "/docs/introduction"]
    for segments in resolver.all_slugs():
        assert resolver.resolve(segments)[1].raw == "Intro"
