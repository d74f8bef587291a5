"""Locale filtering.

Narrows the full document set to the documents of the current locale.
Non-root locales live under a "<locale>/" directory; the root locale, when
configured, lives unprefixed alongside them.
"""

from collections.abc import Mapping, Sequence

from docsidebar.core.documents import Document
from docsidebar.core.slugs import ROOT_LOCALE, slug_to_locale


def filter_by_locale(
    documents: Sequence[Document],
    current_slug: str,
    locales: Mapping[str, object] | None,
) -> list[Document]:
    """Keep the documents that belong to the current document's locale.

    Args:
        documents: All documents in source order
        current_slug: Slug of the document being viewed
        locales: Configured locales keyed by locale code, None if the site
            is not localized

    Returns:
        Filtered documents, in input order
    """
    if not locales:
        return list(documents)

    locale = slug_to_locale(current_slug, locales)
    if locale is not None:
        prefix = f"{locale}/"
        return [doc for doc in documents if doc.id.startswith(prefix)]

    if ROOT_LOCALE in locales:
        prefixes = tuple(f"{key}/" for key in locales if key != ROOT_LOCALE)
        if not prefixes:
            return list(documents)
        return [doc for doc in documents if not doc.id.startswith(prefixes)]

    return list(documents)
