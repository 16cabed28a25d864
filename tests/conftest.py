"""Shared fixtures for docs_pages tests.

``write_tree`` materializes a mapping of root-relative paths to text under a
temporary directory, and ``site_config_factory`` builds a ``SiteConfig`` that
points its content and output folders at that directory.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

import pytest

from docs_pages.config import BuildConfig, SeoConfig, SiteConfig

WriteTree = cabc.Callable[[Path, cabc.Mapping[str, str]], Path]


def _write_tree(root: Path, files: cabc.Mapping[str, str]) -> Path:
    """Write ``files`` below ``root`` and return ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def write_tree() -> WriteTree:
    """Return a helper that writes a content tree to disk."""
    return _write_tree


@pytest.fixture
def seo_config() -> SeoConfig:
    """Return a fixture site identity."""
    return SeoConfig(
        site_name="OpenMemory",
        base_url="https://openmemory.ai",
        tagline="Production-ready long-term memory for AI agents.",
        description="Long-term memory for AI agents.",
        author="OpenMemory Team",
        og_image="https://openmemory.ai/og-docs.png",
        logo_url="https://openmemory.ai/logo.png",
        twitter_handle="@openmemory",
        repo_url="https://github.com/caviraoss/openmemory",
    )


@pytest.fixture
def site_config_factory(
    tmp_path: Path, seo_config: SeoConfig
) -> cabc.Callable[..., SiteConfig]:
    """Return a factory for SiteConfig objects rooted in ``tmp_path``."""

    def _factory(**overrides: typ.Any) -> SiteConfig:
        build = BuildConfig(
            content_dir=overrides.pop("content_dir", tmp_path / "content"),
            output_dir=overrides.pop("output_dir", tmp_path / "public"),
            pygments_style=overrides.pop("pygments_style", "monokai"),
            sitemap_output=overrides.pop("sitemap_output", None),
        )
        return SiteConfig(seo=seo_config, build=build)

    return _factory
