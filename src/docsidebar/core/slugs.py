"""Slug helpers.

Conversions between document identifiers, slugs, locales and output
pathnames.
"""

import re
from collections.abc import Mapping
from pathlib import PurePosixPath

from docsidebar.core.types import DocumentId, Slug, URLPath

ROOT_LOCALE = "root"

_WHITESPACE_RE = re.compile(r"\s+")
_UNSAFE_RE = re.compile(r"[^\w.\-]")


def id_to_slug(doc_id: DocumentId | str) -> Slug:
    """Derive a slug from a document identifier.

    Strips the file extension, slugifies every path segment and drops a
    trailing "index" segment so a section index shares its directory's slug.
    The root "index" is kept.

    Args:
        doc_id: Document identifier (e.g., "en/Guides/Getting Started.md")

    Returns:
        Slug (e.g., "en/guides/getting-started")
    """
    path = PurePosixPath(doc_id)
    parts = [*path.parent.parts, path.stem] if path.suffix else list(path.parts)
    segments = [_slugify_segment(part) for part in parts if part not in ("", ".")]
    segments = [segment for segment in segments if segment]
    if len(segments) > 1 and segments[-1] == "index":
        segments.pop()
    return Slug("/".join(segments))


def _slugify_segment(segment: str) -> str:
    lowered = _WHITESPACE_RE.sub("-", segment.strip().lower())
    return _UNSAFE_RE.sub("", lowered)


def normalize_slug(value: str) -> Slug:
    """Strip surrounding slashes so URL paths can be used as slugs."""
    return Slug(value.strip("/"))


def slug_to_locale(slug: str, locales: Mapping[str, object] | None) -> str | None:
    """Get the locale a slug belongs to.

    Args:
        slug: Document slug (e.g., "fr/guides/install")
        locales: Configured locales keyed by locale code

    Returns:
        First slug segment if it is a configured non-root locale, None otherwise
    """
    if not locales:
        return None
    first = slug.split("/", 1)[0]
    if first == ROOT_LOCALE or first not in locales:
        return None
    return first


def slug_to_pathname(slug: str) -> URLPath:
    """Convert a slug to the pathname it is served from.

    "index" and "" map to "/", a trailing "/index" is dropped, everything
    else gets leading and trailing slashes.
    """
    if slug in ("", "index"):
        return URLPath("/")
    if slug.endswith("/index"):
        slug = slug.removesuffix("/index")
    return URLPath(f"/{slug}/")
