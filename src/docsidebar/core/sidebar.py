"""Sidebar tree builder.

Builds the sidebar for the document being viewed from the flat document
list. Documents are first arranged into a directory tree keyed by path
segment, then the tree is converted into page and category entries that
mirror the source layout. Entry order is the input document order.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Literal, TypeAlias, TypedDict

from docsidebar.core.documents import Document
from docsidebar.core.locales import filter_by_locale
from docsidebar.core.slugs import slug_to_locale, slug_to_pathname
from docsidebar.core.types import DocumentId, URLPath

# Directory name -> nested directory, file name -> document id
DirectoryTree: TypeAlias = dict[str, "DirectoryTree | DocumentId"]


class PageEntryDict(TypedDict):
    """Dictionary representation of a page entry."""

    type: Literal["page"]
    label: str
    href: str
    isCurrent: bool


class CategoryEntryDict(TypedDict):
    """Dictionary representation of a category entry."""

    type: Literal["category"]
    label: str
    entries: list["PageEntryDict | CategoryEntryDict"]


@dataclass
class PageEntry:
    """Sidebar link to a single document."""

    label: str
    href: URLPath
    is_current: bool = False
    type: Literal["page"] = field(default="page", init=False)

    def to_dict(self) -> PageEntryDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.type,
            "label": self.label,
            "href": self.href,
            "isCurrent": self.is_current,
        }


@dataclass
class CategoryEntry:
    """Sidebar group for a source directory."""

    label: str
    entries: list["SidebarEntry"] = field(default_factory=list)
    type: Literal["category"] = field(default="category", init=False)

    def to_dict(self) -> CategoryEntryDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "type": self.type,
            "label": self.label,
            "entries": [entry.to_dict() for entry in self.entries],
        }


SidebarEntry: TypeAlias = "PageEntry | CategoryEntry"


def get_sidebar(
    documents: Sequence[Document],
    current_slug: str,
    locales: Mapping[str, object] | None = None,
) -> list[SidebarEntry]:
    """Build the sidebar for the document being viewed.

    Args:
        documents: All documents in source order
        current_slug: Slug of the document being viewed
        locales: Configured locales keyed by locale code, None if the site
            is not localized

    Returns:
        Top-level sidebar entries
    """
    filtered = filter_by_locale(documents, current_slug, locales)
    locale = slug_to_locale(current_slug, locales)
    tree = build_tree(filtered, locale)
    return to_sidebar(tree, current_slug, filtered)


def build_tree(documents: Sequence[Document], locale: str | None = None) -> DirectoryTree:
    """Arrange documents into a directory tree.

    Args:
        documents: Documents to arrange, in source order
        locale: Active locale; its directory is left out of the tree

    Returns:
        Nested mapping keyed by directory and file names
    """
    root: DirectoryTree = {}
    for doc in documents:
        current = root
        for name in get_breadcrumb(doc.id, locale):
            child = current.setdefault(name, {})
            if not isinstance(child, dict):
                raise RuntimeError(f"Directory {name!r} clashes with a document in {doc.id}")
            current = child
        name = PurePosixPath(doc.id).name
        if name in current:
            raise RuntimeError(f"Document {doc.id} clashes with directory {name!r}")
        current[name] = doc.id
    return root


def get_breadcrumb(doc_id: str, locale: str | None = None) -> list[str]:
    """Get directory names between the source root and a document.

    Args:
        doc_id: Document identifier (e.g., "fr/guides/install.md")
        locale: Active locale; a leading directory of that name is dropped

    Returns:
        Directory names, root first, without the file name
    """
    parent = PurePosixPath(doc_id).parent
    if parent == PurePosixPath("."):
        return []
    breadcrumb = list(parent.parts)
    if locale is not None and breadcrumb[0] == locale:
        return breadcrumb[1:]
    return breadcrumb


def to_sidebar(
    tree: DirectoryTree,
    current_slug: str,
    documents: Sequence[Document],
) -> list[SidebarEntry]:
    """Convert a directory tree into sidebar entries.

    Args:
        tree: Directory tree built from documents
        current_slug: Slug of the document being viewed
        documents: Documents the tree was built from

    Returns:
        Entries for the top level of the tree

    Raises:
        RuntimeError: If the tree references a document not in documents
    """
    index = {doc.id: doc for doc in documents}
    return _build_entries(tree, current_slug, index)


def _build_entries(
    tree: DirectoryTree,
    current_slug: str,
    index: dict[DocumentId, Document],
) -> list[SidebarEntry]:
    """Recursively build entries for one directory level."""
    entries: list[SidebarEntry] = []
    for name, node in tree.items():
        if isinstance(node, dict):
            entries.append(
                CategoryEntry(label=name, entries=_build_entries(node, current_slug, index)),
            )
        else:
            entries.append(_build_page_entry(node, current_slug, index))
    return entries


def _build_page_entry(
    doc_id: DocumentId,
    current_slug: str,
    index: dict[DocumentId, Document],
) -> PageEntry:
    doc = index.get(doc_id)
    if doc is None:
        raise RuntimeError(f"Sidebar tree references unknown document: {doc_id}")
    return PageEntry(
        label=doc.title,
        href=slug_to_pathname(doc.slug),
        is_current=doc.slug == current_slug,
    )
