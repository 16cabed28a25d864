"""Cyclopts CLI entrypoint for building the documentation site.

The ``docs-pages`` console script defined here renders every documentation
page from the content tree, writes the home page and ``sitemap.xml``, and can
emit the sitemap or the list of enumerated routes on their own. Typical usage
involves running ``docs-pages build`` locally or in CI.

Examples
--------
Build the whole site for the default configuration:

>>> from docs_pages.cli import main
>>> main()  # doctest: +SKIP

Print every route the build would produce:

>>> from docs_pages.cli import app
>>> app(["routes", "--config", "config/site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .content import ContentStore, SlugResolver
from .enumerator import PageEnumerator
from .generator import DocsSiteGenerator
from .sitemap import SitemapBuilder

DEFAULT_CONFIG = Path("config/site.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(name="docs-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    """Route library warnings (and per-page debug lines with ``verbose``) to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def _enumerator_for(config: Path) -> tuple[PageEnumerator, str, Path]:
    """Return the enumerator, base URL, and default sitemap path for ``config``."""
    site_config = load_site_config(config)
    store = ContentStore.from_directory(site_config.build.content_dir)
    enumerator = PageEnumerator(SlugResolver(store))
    return enumerator, site_config.seo.base_url, site_config.build.sitemap_path


@app.command(help="Render every documentation page, the home page, and the sitemap.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    workers: typ.Annotated[
        int, Parameter(help="Threads used to render pages", env_var="INPUT_WORKERS")
    ] = 1,
    verbose: typ.Annotated[
        bool, Parameter(help="Log each rendered page")
    ] = False,
) -> None:
    """Generate the documentation site described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override for the output directory configured under ``build``.
    workers : int, optional
        Number of threads used to render documentation pages.
    verbose : bool, optional
        Emit debug logging for each rendered page.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    generator = DocsSiteGenerator(site_config, output_dir=output_dir, workers=workers)
    for path in generator.run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Write sitemap.xml for the current content tree.")
def sitemap(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Where to write the sitemap", env_var="INPUT_SITEMAP_OUTPUT"),
    ] = None,
) -> None:
    """Write only the sitemap, using the same page list as ``build``.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    output : Path or None, optional
        Destination file; defaults to ``build.sitemap_output`` or
        ``<output_dir>/sitemap.xml``.
    """
    _configure_logging(verbose=False)
    enumerator, base_url, default_output = _enumerator_for(config)
    path = SitemapBuilder(base_url).write(enumerator.enumerate(), output or default_output)
    print(f"wrote {_format_path(path)}")


@app.command(help="Print every page path the build would produce.")
def routes(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print the enumerated page paths, one per line."""
    _configure_logging(verbose=False)
    enumerator, _base_url, _sitemap = _enumerator_for(config)
    for route in enumerator.enumerate():
        print(route)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docs-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
