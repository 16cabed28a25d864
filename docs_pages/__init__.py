"""Utilities for generating the documentation site and its sitemap.

This package exposes the CLI entry points used by ``docs-pages`` to render
every documentation page from the content tree, the home page, and
``sitemap.xml``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docs_pages import main
>>> main()  # doctest: +SKIP
>>> from docs_pages import app
>>> app(["routes", "--config", "config/site.yaml"])  # doctest: +SKIP
/
/docs/introduction
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
