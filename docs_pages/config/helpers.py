"""Utility helpers shared by the docs site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .models import DEFAULT_KEYWORDS, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_keywords(value: str | list[object] | None) -> tuple[str, ...]:
    """Normalize keyword definitions into a tuple of non-empty strings."""
    match value:
        case None:
            return DEFAULT_KEYWORDS
        case str():
            segments: list[object] = list(value.split(","))
        case list():
            segments = value
        case _:
            return DEFAULT_KEYWORDS
    normalized: list[str] = []
    for segment in segments:
        text = str(segment).strip()
        if text:
            normalized.append(text)
    return tuple(normalized)


def _normalize_base_url(value: str) -> str:
    """Return ``value`` without trailing slashes."""
    return value.strip().rstrip("/")


def _resolve_path(value: object | None, base_dir: Path, default: Path) -> Path:
    """Return ``value`` as a path, anchoring relative paths at ``base_dir``."""
    path = Path(str(value)) if value not in (None, "") else default
    if path.is_absolute():
        return path
    return base_dir / path


def _validate_pygments_style(value: object | None, default: str) -> str:
    """Return the configured Pygments style name, rejecting unknown styles."""
    style = _optional_str(value) or default
    try:
        get_style_by_name(style)
    except ClassNotFound as exc:
        msg = f"Unknown Pygments style '{style}' in 'build.pygments_style'."
        raise SiteConfigError(msg) from exc
    return style


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key`` or an empty mapping."""
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        return {}
    return value


__all__ = [
    "_normalize_base_url",
    "_normalize_keywords",
    "_optional_str",
    "_resolve_path",
    "_section",
    "_validate_pygments_style",
]
