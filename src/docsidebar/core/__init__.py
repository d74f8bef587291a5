"""Sidebar core: locale filtering, directory tree and sidebar entries."""
