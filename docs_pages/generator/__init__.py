"""Utilities for rendering and generating documentation site pages."""

from .link_rewriter import ContentLinkExtension, rewrite_content_link
from .models import DocPageModel
from .page_generator import DocsSiteGenerator
from .renderer import HtmlContentRenderer

__all__ = [
    "ContentLinkExtension",
    "DocPageModel",
    "DocsSiteGenerator",
    "HtmlContentRenderer",
    "rewrite_content_link",
]
