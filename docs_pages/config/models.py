"""Typed dataclasses describing docs site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docs_pages._constants import SITEMAP_FILENAME

DEFAULT_KEYWORDS: tuple[str, ...] = (
    "AI memory",
    "long-term memory",
    "AI agents",
    "vector database",
    "embeddings",
    "RAG",
    "knowledge graph",
    "LLM memory",
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SeoConfig:
    """Site identity used for page titles, meta tags, and structured data."""

    site_name: str
    base_url: str
    tagline: str = ""
    description: str = ""
    author: str = ""
    og_image: str | None = None
    logo_url: str | None = None
    twitter_handle: str | None = None
    repo_url: str | None = None
    keywords: tuple[str, ...] = DEFAULT_KEYWORDS

    def absolute_url(self, path: str) -> str:
        """Return ``path`` (``/``-prefixed) joined onto the site base URL."""
        return f"{self.base_url}{path}"

    @property
    def documentation_label(self) -> str:
        """Return the label appended to documentation page titles."""
        return f"{self.site_name} Documentation"


@dc.dataclass(slots=True)
class BuildConfig:
    """Filesystem locations and rendering options for a site build."""

    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    pygments_style: str = "monokai"
    sitemap_output: Path | None = None

    @property
    def sitemap_path(self) -> Path:
        """Return the sitemap destination, defaulting inside ``output_dir``."""
        return self.sitemap_output or self.output_dir / SITEMAP_FILENAME


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration."""

    seo: SeoConfig
    build: BuildConfig = dc.field(default_factory=BuildConfig)


__all__ = ["BuildConfig", "SeoConfig", "SiteConfig", "SiteConfigError"]
