"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _normalize_base_url,
    _normalize_keywords,
    _optional_str,
    _resolve_path,
    _section,
    _validate_pygments_style,
)
from .models import BuildConfig, SeoConfig, SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the docs site and its build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``). Relative paths inside the file are resolved
        against its parent directory.

    Returns
    -------
    SiteConfig
        Parsed site identity and build settings with defaults applied.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If ``site.name`` or ``site.base_url`` is missing, or
        ``build.pygments_style`` names an unknown Pygments style.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.seo.site_name  # doctest: +SKIP
    'OpenMemory'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    return SiteConfig(
        seo=_build_seo_config(_section(raw, "site")),
        build=_build_build_config(_section(raw, "build"), base_dir),
    )


def _build_seo_config(payload: typ.Mapping[str, typ.Any]) -> SeoConfig:
    """Build the SeoConfig from the ``site`` mapping."""
    site_name = _optional_str(payload.get("name"))
    if not site_name:
        msg = "Site configuration is missing 'site.name'."
        raise SiteConfigError(msg)
    base_url = _optional_str(payload.get("base_url"))
    if not base_url:
        msg = "Site configuration is missing 'site.base_url'."
        raise SiteConfigError(msg)

    return SeoConfig(
        site_name=site_name,
        base_url=_normalize_base_url(base_url),
        tagline=_optional_str(payload.get("tagline")) or "",
        description=_optional_str(payload.get("description")) or "",
        author=_optional_str(payload.get("author")) or f"{site_name} Team",
        og_image=_optional_str(payload.get("og_image")),
        logo_url=_optional_str(payload.get("logo_url")),
        twitter_handle=_optional_str(payload.get("twitter_handle")),
        repo_url=_optional_str(payload.get("repo_url")),
        keywords=_normalize_keywords(payload.get("keywords")),
    )


def _build_build_config(
    payload: typ.Mapping[str, typ.Any], base_dir: Path
) -> BuildConfig:
    """Build the BuildConfig from the ``build`` mapping."""
    defaults = BuildConfig()
    sitemap_raw = payload.get("sitemap_output")
    return BuildConfig(
        content_dir=_resolve_path(
            payload.get("content_dir"), base_dir, defaults.content_dir
        ),
        output_dir=_resolve_path(
            payload.get("output_dir"), base_dir, defaults.output_dir
        ),
        pygments_style=_validate_pygments_style(
            payload.get("pygments_style"), defaults.pygments_style
        ),
        sitemap_output=(
            _resolve_path(sitemap_raw, base_dir, defaults.output_dir)
            if sitemap_raw
            else None
        ),
    )


__all__ = ["load_site_config"]
