"""Core type definitions."""

from typing import NewType

# Source-relative document identifier (e.g., "en/guides/install.md")
DocumentId = NewType("DocumentId", str)

# Locale-agnostic output slug (e.g., "en/guides/install")
Slug = NewType("Slug", str)

# URL path for routing (e.g., "/en/guides/install/")
# Distinct from Slug to catch type mismatches
URLPath = NewType("URLPath", str)
