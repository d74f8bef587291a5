"""WebSocket-based live reload for development mode.

Monitors source documents for changes, drops the loaded document snapshot
so the next sidebar is built from fresh sources, and notifies connected
clients via WebSocket to trigger page reloads.
"""

import asyncio
import contextlib
import json
import logging
import weakref
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from aiohttp import WSMsgType, web
from watchfiles import awatch

from docsidebar.config import DEFAULT_WATCH_PATTERNS
from docsidebar.core.slugs import id_to_slug, slug_to_pathname

if TYPE_CHECKING:
    from docsidebar.core.documents import DocumentLoader

logger = logging.getLogger(__name__)


class LiveReloadManager:
    """Manages WebSocket connections and file watching for live reload.

    Coordinates between file system watcher and connected WebSocket clients
    to provide automatic page refresh on source file changes.
    """

    def __init__(
        self,
        source_dir: Path,
        watch_patterns: list[str] | None = None,
        *,
        loader: "DocumentLoader | None" = None,
    ) -> None:
        """Initialize the live reload manager.

        Args:
            source_dir: Directory to watch for changes
            watch_patterns: Glob patterns to watch (default: Markdown sources)
            loader: DocumentLoader whose snapshot is dropped on changes
        """
        self._source_dir = source_dir
        self._watch_patterns = watch_patterns or DEFAULT_WATCH_PATTERNS
        self._connections: weakref.WeakSet[web.WebSocketResponse] = weakref.WeakSet()
        self._watch_task: asyncio.Task[None] | None = None
        self._loader = loader

    async def start(self) -> None:
        """Start the file watcher."""
        if self._watch_task is not None:
            return
        self._watch_task = asyncio.create_task(self._watch_files())

    async def stop(self) -> None:
        """Stop the file watcher and close all connections."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._watch_task
            self._watch_task = None

        for ws in list(self._connections):
            await ws.close()

    async def handle_websocket(self, request: web.Request) -> web.WebSocketResponse:
        """Handle WebSocket connection for live reload.

        Args:
            request: aiohttp request

        Returns:
            WebSocket response
        """
        ws = web.WebSocketResponse()
        await ws.prepare(request)

        self._connections.add(ws)

        try:
            async for msg in ws:
                if msg.type == WSMsgType.ERROR:
                    break
        finally:
            self._connections.discard(ws)

        return ws

    async def _watch_files(self) -> None:
        """Watch for file changes and broadcast reload events."""
        async for changes in awatch(self._source_dir):
            await self.handle_changes(Path(path_str) for _, path_str in changes)

    async def handle_changes(self, paths: Iterable[Path]) -> None:
        """React to changed source files.

        Deleted files are included, since removing a document changes the
        sidebar of every page in its locale.

        Args:
            paths: Absolute paths reported by the watcher
        """
        for path in paths:
            if not self._matches_patterns(path):
                continue

            pathname = self._to_pathname(path)
            logger.info(f"Source changed: {path} ({pathname})")

            if self._loader is not None:
                self._loader.invalidate()
            await self._broadcast_reload(pathname)

    def _matches_patterns(self, path: Path) -> bool:
        """Check if a path matches any watch pattern.

        Args:
            path: Path to check

        Returns:
            True if path matches any pattern
        """
        try:
            relative = path.relative_to(self._source_dir)
        except ValueError:
            return False

        return any(_match(relative, pattern) for pattern in self._watch_patterns)

    def _to_pathname(self, file_path: Path) -> str:
        """Convert a source file path to the pathname it is served from.

        Args:
            file_path: Absolute file path

        Returns:
            Output pathname (e.g., "/guides/setup/")
        """
        relative = file_path.relative_to(self._source_dir)
        return slug_to_pathname(id_to_slug(relative.as_posix()))

    async def _broadcast_reload(self, path: str) -> None:
        """Broadcast reload event to all connected clients.

        Args:
            path: Pathname of the document that changed
        """
        if not self._connections:
            return

        message = json.dumps({"type": "reload", "path": path})

        for ws in list(self._connections):
            if ws.closed:
                continue
            try:
                await ws.send_str(message)
            except ConnectionResetError:
                # Client disconnected mid-send, will be cleaned up by WeakSet
                logger.debug("Live reload client disconnected during broadcast")


def _match(relative: Path, pattern: str) -> bool:
    """Match a relative path, letting a leading "**/" also match top-level files."""
    if relative.match(pattern):
        return True
    return pattern.startswith("**/") and relative.match(pattern[3:])


def create_live_reload_routes(manager: LiveReloadManager) -> list[web.RouteDef]:
    """Create routes for live reload WebSocket.

    Args:
        manager: LiveReloadManager instance

    Returns:
        List of route definitions
    """
    return [web.get("/ws/live-reload", manager.handle_websocket)]
