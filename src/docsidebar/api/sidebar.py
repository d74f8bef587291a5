"""Sidebar API endpoints.

Serves the sidebar for the root document and for any document slug.
"""

import logging

from aiohttp import web

from docsidebar.app_keys import loader_key, locales_key
from docsidebar.core.sidebar import get_sidebar
from docsidebar.core.slugs import normalize_slug

logger = logging.getLogger(__name__)


def create_sidebar_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/sidebar", get_root_sidebar),
        web.get("/api/sidebar/{slug:.*}", get_document_sidebar),
    ]


async def get_root_sidebar(request: web.Request) -> web.Response:
    return _sidebar_response(request, "index")


async def get_document_sidebar(request: web.Request) -> web.Response:
    return _sidebar_response(request, request.match_info["slug"])


def _sidebar_response(request: web.Request, slug: str) -> web.Response:
    """Build the sidebar for slug from the loaded documents and configured locales."""
    current_slug = normalize_slug(slug)
    documents = request.app[loader_key].load()
    entries = get_sidebar(documents, current_slug, request.app[locales_key])
    logger.debug(f"Built sidebar for {current_slug!r} with {len(entries)} top-level entries")
    return web.json_response({"entries": [entry.to_dict() for entry in entries]})
