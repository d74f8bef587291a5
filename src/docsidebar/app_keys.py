"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docsidebar.config import LocaleConfig
from docsidebar.core.documents import DocumentLoader
from docsidebar.live import LiveReloadManager

loader_key = web.AppKey("loader", DocumentLoader)
locales_key = web.AppKey("locales", dict[str, LocaleConfig] | None)
live_reload_enabled_key = web.AppKey("live_reload_enabled", bool)
live_reload_manager_key = web.AppKey("live_reload_manager", LiveReloadManager)
