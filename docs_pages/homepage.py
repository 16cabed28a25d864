"""Render the documentation home page.

Every build emits the site root (``/``), even when the content tree is
missing. The page carries the site-level SEO metadata (organization and
software schemas) and lists the navigation sections as an entry point into
the documentation.

>>> from pathlib import Path
>>> from docs_pages.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> builder.run(Path("public/index.html"))  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from ._constants import SITE_ROOT
from .navigation import build_sidebar
from .seo import build_home_seo
from .templating import render_text, template_environment

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig


class HomePageBuilder:
    """Render ``index.html`` for the site root."""

    def __init__(
        self, site_config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        self.site = site_config
        self.template = template_environment(templates_dir).get_template(
            "home_page.jinja"
        )

    def render(self, generated_at: dt.datetime | None = None) -> str:
        """Return the home page HTML."""
        return render_text(
            self.template,
            site=self.site.seo,
            seo=build_home_seo(self.site.seo),
            sidebar=build_sidebar(SITE_ROOT),
            generated_at=generated_at or dt.datetime.now(dt.UTC),
        )

    def run(self, output_path: Path, generated_at: dt.datetime | None = None) -> Path:
        """Write the home page to ``output_path`` and return it."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(generated_at), encoding="utf-8")
        return output_path


__all__ = ["HomePageBuilder"]
