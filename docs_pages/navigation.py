"""Static sidebar navigation and active-link detection.

The documentation sidebar is a fixed two-level table of sections and items.
It is declared once at import time as frozen data; nothing derives it from the
content tree, so a link to a missing page simply never becomes active.

Examples
--------
>>> from docs_pages.navigation import is_active
>>> is_active("/docs/sdks/python", "/docs/sdks")
True
>>> is_active("/docs/sdk", "/docs/sdks")
False
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class NavItem:
    """A sidebar entry; sections carry their items in ``children``."""

    title: str
    href: str
    children: tuple[NavItem, ...] = ()


def _section(title: str, href: str, *items: tuple[str, str]) -> NavItem:
    return NavItem(
        title=title,
        href=href,
        children=tuple(NavItem(title=label, href=link) for label, link in items),
    )


NAVIGATION: tuple[NavItem, ...] = (
    _section(
        "Introduction",
        "/docs/introduction",
        ("What is OpenMemory", "/docs/introduction"),
        ("Standalone vs Backend", "/docs/standalone"),
    ),
    _section(
        "Getting Started",
        "/docs/getting-started",
        ("Install", "/docs/installation"),
        ("Quick Start (Standalone)", "/docs/quick-start"),
        ("Quick Start (Backend)", "/docs/quick-start-backend"),
    ),
    _section(
        "SDKs",
        "/docs/sdks",
        ("JavaScript", "/docs/sdks/javascript"),
        ("Python", "/docs/sdks/python"),
    ),
    _section(
        "API Reference",
        "/docs/api",
        ("API Routes", "/docs/api/routes"),
        ("Add Memory", "/docs/api/add-memory"),
        ("Query Memory", "/docs/api/query"),
    ),
    _section(
        "Core Concepts",
        "/docs/concepts",
        ("Sectors", "/docs/concepts/sectors"),
        ("Decay", "/docs/concepts/decay"),
        ("Salience", "/docs/concepts/salience"),
        ("Associations", "/docs/concepts/associations"),
        ("Temporal Graph", "/docs/concepts/temporal-graph"),
    ),
    _section(
        "Advanced",
        "/docs/advanced",
        ("Embeddings", "/docs/advanced/embedding-modes"),
        ("Ingestion", "/docs/advanced/ingestion"),
        ("MCP Server", "/docs/integrations/mcp"),
        ("LangGraph Mode", "/docs/advanced/langgraph"),
    ),
    _section(
        "Examples",
        "/docs/examples",
        ("Agents", "/docs/examples/agents"),
        ("Claude Desktop", "/docs/examples/claude"),
        ("Python Chatbot", "/docs/examples/python-chatbot"),
        ("Node.js Assistant", "/docs/examples/nodejs-assistant"),
    ),
    _section(
        "Deployment",
        "/docs/deployment",
        ("Backend Setup", "/docs/deployment/backend"),
        ("Docker", "/docs/deployment/docker"),
        ("Vercel / Railway", "/docs/deployment/cloud"),
    ),
    _section(
        "Migration",
        "/docs/migration",
        ("From Mem0", "/docs/migration/mem0"),
        ("From Supermemory", "/docs/migration/supermemory"),
        ("From Zep", "/docs/migration/zep"),
    ),
)


def is_active(path: str, href: str) -> bool:
    """Return True when ``path`` is ``href`` or lies below it.

    The prefix test only matches at a segment boundary, so ``/docs/sdk`` is
    not inside ``/docs/sdks``. Inputs are compared verbatim.
    """
    return path == href or path.startswith(href + "/")


def is_section_active(section: NavItem, path: str) -> bool:
    """Return True when any item of ``section`` (or the section itself) is active.

    Sections with children are active only through their children; a
    childless section falls back to its own ``href``.
    """
    if section.children:
        return any(is_active(path, child.href) for child in section.children)
    return is_active(path, section.href)


def build_sidebar(
    path: str, navigation: tuple[NavItem, ...] = NAVIGATION
) -> list[dict[str, typ.Any]]:
    """Return template-ready sidebar groups with active flags for ``path``.

    Parameters
    ----------
    path : str
        Site-relative path of the page being rendered.
    navigation : tuple[NavItem, ...], optional
        Navigation table; defaults to :data:`NAVIGATION`.

    Returns
    -------
    list[dict[str, Any]]
        One mapping per section with ``title``, ``href``, ``is_active`` and an
        ``items`` list of ``title``/``href``/``is_active`` mappings.
    """
    groups: list[dict[str, typ.Any]] = []
    for section in navigation:
        items = [
            {
                "title": child.title,
                "href": child.href,
                "is_active": is_active(path, child.href),
            }
            for child in section.children
        ]
        groups.append(
            {
                "title": section.title,
                "href": section.href,
                "is_active": is_section_active(section, path),
                "items": items,
            }
        )
    return groups


__all__ = [
    "NAVIGATION",
    "NavItem",
    "build_sidebar",
    "is_active",
    "is_section_active",
]
