"""Document store.

Loads Markdown sources from a directory into a flat, ordered list of
documents. The sidebar is built from this list; loading happens before
any sidebar is requested.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from docsidebar.core.slugs import id_to_slug, normalize_slug, slug_to_pathname
from docsidebar.core.types import DocumentId, Slug, URLPath

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".md", ".mdx")

_FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)
_H1_RE = re.compile(r"^#[ \t]+(.+?)[ \t]*#*[ \t]*$", re.MULTILINE)


@dataclass(frozen=True)
class Document:
    """Content document."""

    id: DocumentId
    slug: Slug
    title: str

    @property
    def href(self) -> URLPath:
        """Output pathname of the document."""
        return slug_to_pathname(self.slug)

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "href": self.href,
        }


class DocumentLoader:
    """Loads documents from a source directory.

    Keeps the loaded documents as an immutable snapshot until invalidated.
    """

    def __init__(self, source_dir: Path) -> None:
        """Initialize loader.

        Args:
            source_dir: Root directory containing Markdown sources
        """
        self._source_dir = source_dir
        self._snapshot: tuple[Document, ...] | None = None

    @property
    def source_dir(self) -> Path:
        """Root directory containing Markdown sources."""
        return self._source_dir

    def load(self, *, use_cache: bool = True) -> tuple[Document, ...]:
        """Load all documents.

        Args:
            use_cache: Return the current snapshot if one exists

        Returns:
            Documents ordered by their source path. When two sources share a
            slug, the first one wins and the other is skipped with a warning.
        """
        if use_cache and self._snapshot is not None:
            return self._snapshot

        documents: list[Document] = []
        seen: dict[Slug, DocumentId] = {}
        for path in self._discover():
            document = self._load_document(path)
            if document.slug in seen:
                logger.warning(
                    f"Skipping {document.id}: slug {document.slug!r} "
                    f"already used by {seen[document.slug]}"
                )
                continue
            seen[document.slug] = document.id
            documents.append(document)

        logger.info(f"Loaded {len(documents)} documents from {self._source_dir}")
        self._snapshot = tuple(documents)
        return self._snapshot

    def invalidate(self) -> None:
        """Drop the current snapshot so the next load rescans the directory."""
        self._snapshot = None

    def get_document(self, slug: str) -> Document | None:
        """Get document by slug.

        Args:
            slug: Document slug (e.g., "guides/install" or "/guides/install/")

        Returns:
            Document if found, None otherwise
        """
        normalized = normalize_slug(slug)
        for document in self.load():
            if document.slug == normalized:
                return document
        return None

    def _discover(self) -> list[Path]:
        """Find document sources, ordered by relative path segments."""
        if not self._source_dir.is_dir():
            return []

        paths = [
            path
            for path in self._source_dir.rglob("*")
            if path.is_file()
            and path.suffix in DOCUMENT_SUFFIXES
            and not self._is_hidden(path.relative_to(self._source_dir))
        ]
        return sorted(paths, key=lambda path: path.relative_to(self._source_dir).parts)

    @staticmethod
    def _is_hidden(relative: Path) -> bool:
        return any(part.startswith((".", "_")) for part in relative.parts)

    def _load_document(self, path: Path) -> Document:
        relative = path.relative_to(self._source_dir)
        doc_id = DocumentId(relative.as_posix())

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            content = ""

        frontmatter, body = split_frontmatter(content)

        slug_override = frontmatter.get("slug")
        slug = normalize_slug(slug_override) if slug_override else id_to_slug(doc_id)

        title = frontmatter.get("title") or extract_title(body)
        if not title:
            title = title_from_name(path.stem)
            logger.debug(f"No title in {doc_id}, using {title!r}")

        return Document(id=doc_id, slug=slug, title=title)


def split_frontmatter(content: str) -> tuple[dict[str, str], str]:
    """Split a leading frontmatter block from the document body.

    Only flat "key: value" lines are understood; values may be quoted.

    Returns:
        Tuple of (frontmatter fields, remaining body)
    """
    match = _FRONTMATTER_RE.match(content)
    if not match:
        return {}, content

    fields: dict[str, str] = {}
    for line in match.group(1).splitlines():
        if not line.strip() or line.lstrip().startswith("#") or ":" not in line:
            continue
        key, _, value = line.partition(":")
        fields[key.strip()] = _strip_quotes(value.strip())
    return fields, content[match.end() :]


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1].strip()
    return value


def extract_title(body: str) -> str | None:
    """Extract title from the first H1 heading."""
    match = _H1_RE.search(body)
    if match is None:
        return None
    return match.group(1).strip() or None


def title_from_name(name: str) -> str:
    """Generate a title from a file name ("setup-guide" -> "Setup Guide")."""
    return name.replace("-", " ").replace("_", " ").strip().title()
