"""Shared test fixtures."""

from pathlib import Path

import pytest

from docsidebar.config import Config, DocsConfig, LiveReloadConfig, ServerConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create an empty docs directory."""
    source_dir = tmp_path / "docs"
    source_dir.mkdir(exist_ok=True)
    return source_dir


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration reading from docs_dir.

    Live reload is disabled so no file watcher is started.
    """
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
        live_reload=LiveReloadConfig(enabled=False),
    )
