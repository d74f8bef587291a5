"""aiohttp server for Docsidebar.

Application factory and route registration for standalone server mode.
"""

from aiohttp import web

from docsidebar.api.config import create_config_routes
from docsidebar.api.documents import create_documents_routes
from docsidebar.api.sidebar import create_sidebar_routes
from docsidebar.app_keys import (
    live_reload_enabled_key,
    live_reload_manager_key,
    loader_key,
    locales_key,
)
from docsidebar.config import Config
from docsidebar.core.documents import DocumentLoader
from docsidebar.live import LiveReloadManager
from docsidebar.live.reload import create_live_reload_routes


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    loader = DocumentLoader(config.docs.source_dir)

    app[loader_key] = loader
    app[locales_key] = config.locales
    app[live_reload_enabled_key] = config.live_reload.enabled

    app.router.add_routes(create_sidebar_routes())
    app.router.add_routes(create_documents_routes())
    app.router.add_routes(create_config_routes())

    if config.live_reload.enabled:
        manager = LiveReloadManager(
            config.docs.source_dir,
            watch_patterns=config.live_reload.watch_patterns,
            loader=loader,
        )
        app[live_reload_manager_key] = manager
        app.router.add_routes(create_live_reload_routes(manager))
        app.on_startup.append(_start_live_reload)
        app.on_cleanup.append(_stop_live_reload)

    return app


async def _start_live_reload(app: web.Application) -> None:
    """Start live reload on application startup."""
    await app[live_reload_manager_key].start()


async def _stop_live_reload(app: web.Application) -> None:
    """Stop live reload on application cleanup."""
    await app[live_reload_manager_key].stop()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
