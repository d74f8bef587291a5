"""Docsidebar - navigation sidebars for documentation sites."""

from docsidebar.core.documents import Document, DocumentLoader
from docsidebar.core.sidebar import CategoryEntry, PageEntry, SidebarEntry, get_sidebar

__all__ = [
    "CategoryEntry",
    "Document",
    "DocumentLoader",
    "PageEntry",
    "SidebarEntry",
    "get_sidebar",
]
