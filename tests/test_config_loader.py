"""Unit tests for the site configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from docs_pages.config import SiteConfigError, load_site_config
from docs_pages.config.models import DEFAULT_KEYWORDS


def _write_config(tmp_path: Path, text: str) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir(exist_ok=True)
    path = config_dir / "site.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_load_full_config(tmp_path: Path) -> None:
    """All site and build keys are parsed, and paths resolve next to the file."""
    path = _write_config(
        tmp_path,
        """
site:
  name: OpenMemory
  base_url: https://openmemory.ai/
  tagline: Memory for agents.
  author: Core Team
  twitter_handle: "@openmemory"
  keywords: memory, agents , ,graphs
build:
  content_dir: ../content
  output_dir: /srv/public
  pygments_style: friendly
  sitemap_output: ../dist/sitemap.xml
""",
    )
    config = load_site_config(path)
    assert config.seo.site_name == "OpenMemory"
    assert config.seo.base_url == "https://openmemory.ai", "trailing slash stripped"
    assert config.seo.author == "Core Team"
    assert config.seo.twitter_handle == "@openmemory"
    assert config.seo.keywords == ("memory", "agents", "graphs")
    assert config.build.content_dir == path.parent / "../content"
    assert str(config.build.output_dir) == "/srv/public"
    assert config.build.pygments_style == "friendly"
    assert config.build.sitemap_path == path.parent / "../dist/sitemap.xml"


def test_load_minimal_config_applies_defaults(tmp_path: Path) -> None:
    """Only name and base URL are required."""
    path = _write_config(
        tmp_path, "site:\n  name: Example\n  base_url: https://example.com"
    )
    config = load_site_config(path)
    assert config.seo.author == "Example Team"
    assert config.seo.keywords == DEFAULT_KEYWORDS
    assert config.seo.og_image is None
    assert config.build.content_dir == path.parent / "content"
    assert config.build.output_dir == path.parent / "public"
    assert config.build.sitemap_path == path.parent / "public" / "sitemap.xml"


@pytest.mark.parametrize(
    "text",
    [
        "site:\n  base_url: https://example.com",
        "site:\n  name: Example",
        "site:\n  name: '  '\n  base_url: https://example.com",
        "build:\n  content_dir: content",
    ],
)
def test_missing_required_site_keys(tmp_path: Path, text: str) -> None:
    """Missing name or base URL raises SiteConfigError."""
    with pytest.raises(SiteConfigError):
        load_site_config(_write_config(tmp_path, text))


def test_missing_file_raises(tmp_path: Path) -> None:
    """An absent configuration file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "missing.yaml")


def test_repository_config_loads() -> None:
    """The bundled configuration parses cleanly."""
    root = Path(__file__).resolve().parents[1]
    config = load_site_config(root / "config" / "site.yaml")
    assert config.seo.site_name == "OpenMemory"
    assert config.build.content_dir.resolve() == (root / "content").resolve()


def test_unknown_pygments_style_raises(tmp_path: Path) -> None:
    """An unknown highlight style is rejected when the configuration loads."""
    text = (
        "site:\n  name: Docs\n  base_url: https://docs.example.com\n"
        "build:\n  pygments_style: no-such-style\n"
    )
    with pytest.raises(SiteConfigError, match="no-such-style"):
        load_site_config(_write_config(tmp_path, text))
