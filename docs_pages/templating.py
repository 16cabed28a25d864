"""Jinja environment shared by the page, home page and sitemap builders."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

if typ.TYPE_CHECKING:
    from jinja2 import Template

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"


def template_environment(templates_dir: Path | None = None) -> Environment:
    """Return an autoescaping environment rooted at ``templates_dir``."""
    return Environment(
        loader=FileSystemLoader(templates_dir or DEFAULT_TEMPLATES_DIR),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_text(template: Template, **context: typ.Any) -> str:
    """Render ``template`` and guarantee a single trailing newline."""
    text = template.render(**context)
    return text if text.endswith("\n") else f"{text}\n"


__all__ = ["DEFAULT_TEMPLATES_DIR", "render_text", "template_environment"]
