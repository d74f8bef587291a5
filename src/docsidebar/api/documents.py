"""Document API endpoint."""

from aiohttp import web

from docsidebar.app_keys import loader_key


def create_documents_routes() -> list[web.RouteDef]:
    return [web.get("/api/documents/{slug:.*}", get_document)]


async def get_document(request: web.Request) -> web.Response:
    slug = request.match_info["slug"]
    document = request.app[loader_key].get_document(slug)
    if document is None:
        return web.json_response(
            {"error": "Document not found", "slug": slug},
            status=404,
        )
    return web.json_response(document.to_dict())
