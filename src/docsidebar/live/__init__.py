"""Live reload support for development mode."""

from docsidebar.live.reload import LiveReloadManager

__all__ = ["LiveReloadManager"]
