"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest

from docsidebar.config import (
    Config,
    DocsConfig,
    LiveReloadConfig,
    LocaleConfig,
    ServerConfig,
)


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[docs]
source_dir = "documentation"

[live_reload]
enabled = false
watch_patterns = ["**/*.md"]

[locales.root]
label = "English"
lang = "en"

[locales.fr]
label = "Français"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.docs.source_dir == tmp_path / "documentation"
        assert config.live_reload.enabled is False
        assert config.live_reload.watch_patterns == ["**/*.md"]
        assert config.locales == {
            "root": LocaleConfig(label="English", lang="en"),
            "fr": LocaleConfig(label="Français"),
        }
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.docs.source_dir == tmp_path / "docs"
        assert config.live_reload.enabled is True
        assert config.live_reload.watch_patterns is None
        assert config.locales is None

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for missing explicit config file."""
        config_file = tmp_path / "nonexistent.toml"

        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(config_file)

    def test__invalid_toml__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError for malformed TOML."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[server\nport = ")

        with pytest.raises(ValueError, match="Invalid TOML"):
            Config.load(config_file)

    def test__no_path_no_discovery__returns_defaults(self) -> None:
        """Return defaults when no config file found."""
        with patch.object(Config, "_discover_config", return_value=None):
            config = Config.load()

        assert config.server.port == 8080
        assert config.docs.source_dir == Path("docs")
        assert config.locales is None
        assert config.config_path is None


class TestConfigDiscovery:
    """Tests for config file discovery."""

    def test__config_in_current_dir__found(self, tmp_path: Path) -> None:
        """Find config in current directory."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[server]\nport = 9000")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = Config._discover_config()

        assert discovered == config_file

    def test__config_in_parent_dir__found(self, tmp_path: Path) -> None:
        """Find config in parent directory."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[server]\nport = 9000")
        subdir = tmp_path / "subproject" / "docs"
        subdir.mkdir(parents=True)

        with patch("pathlib.Path.cwd", return_value=subdir):
            discovered = Config._discover_config()

        assert discovered == config_file


class TestServerConfigParsing:
    """Tests for server config section parsing."""

    def test__invalid_host_type__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when host is not a string."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[server]\nhost = 12345\n")

        with pytest.raises(ValueError, match="server.host must be a string"):
            Config.load(config_file)

    def test__invalid_port_type__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when port is not an integer."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text('[server]\nport = "3000"\n')

        with pytest.raises(ValueError, match="server.port must be an integer"):
            Config.load(config_file)

    def test__boolean_port__raises_error(self, tmp_path: Path) -> None:
        """Reject booleans even though they are ints in Python."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[server]\nport = true\n")

        with pytest.raises(ValueError, match="server.port must be an integer"):
            Config.load(config_file)

    def test__non_table_section__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when server is not a table."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text('server = "localhost"\n')

        with pytest.raises(ValueError, match="server section must be a dictionary"):
            Config.load(config_file)


class TestDocsConfigParsing:
    """Tests for docs config section parsing."""

    def test__invalid_source_dir_type__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when source_dir is not a string."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[docs]\nsource_dir = 123\n")

        with pytest.raises(ValueError, match="docs.source_dir must be a string"):
            Config.load(config_file)


class TestLiveReloadConfigParsing:
    """Tests for live_reload config section parsing."""

    def test__invalid_enabled_type__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when enabled is not a boolean."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text('[live_reload]\nenabled = "yes"\n')

        with pytest.raises(ValueError, match="live_reload.enabled must be a boolean"):
            Config.load(config_file)

    def test__invalid_pattern_item__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when a watch pattern is not a string."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[live_reload]\nwatch_patterns = [1]\n")

        with pytest.raises(
            ValueError,
            match="live_reload.watch_patterns items must be strings",
        ):
            Config.load(config_file)


class TestLocalesConfigParsing:
    """Tests for locales config section parsing."""

    def test__label__defaults_to_key(self, tmp_path: Path) -> None:
        """Use the locale key when no label is given."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[locales.de]\n")

        config = Config.load(config_file)

        assert config.locales == {"de": LocaleConfig(label="de")}

    def test__empty_table__means_no_locales(self, tmp_path: Path) -> None:
        """An empty locales table disables localization."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[locales]\n")

        config = Config.load(config_file)

        assert config.locales is None

    def test__non_table_locale__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when a locale is not a table."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text('[locales]\nfr = "Français"\n')

        with pytest.raises(ValueError, match="locales.fr must be a dictionary"):
            Config.load(config_file)

    def test__invalid_label__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when label is not a string."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[locales.fr]\nlabel = 1\n")

        with pytest.raises(ValueError, match="locales.fr.label must be a string"):
            Config.load(config_file)

    def test__slash_in_key__raises_error(self, tmp_path: Path) -> None:
        """Locale keys name a single directory."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text('[locales."fr/ca"]\n')

        with pytest.raises(ValueError, match="must not contain '/'"):
            Config.load(config_file)

    def test__upper_case_key__raises_error(self, tmp_path: Path) -> None:
        """Locale keys must match lower-case slug segments."""
        config_file = tmp_path / "docsidebar.toml"
        config_file.write_text("[locales.pt-BR]\nlabel = \"Português\"\n")

        with pytest.raises(ValueError, match="locales.pt-BR must be lower-case"):
            Config.load(config_file)


class TestLocaleConfig:
    """Tests for LocaleConfig dataclass."""

    def test__to_dict__includes_key(self) -> None:
        """Convert locale to dict."""
        locale = LocaleConfig(label="Français", lang="fr-FR")

        assert locale.to_dict("fr") == {"key": "fr", "label": "Français", "lang": "fr-FR"}


class TestConfigWithOverrides:
    """Tests for Config.with_overrides()."""

    @pytest.fixture
    def config(self) -> Config:
        return Config(
            server=ServerConfig(host="127.0.0.1", port=8080),
            docs=DocsConfig(source_dir=Path("docs")),
            live_reload=LiveReloadConfig(enabled=True),
        )

    def test__overrides__applied(self, config: Config) -> None:
        """Apply non-None overrides."""
        result = config.with_overrides(
            port=9000,
            source_dir=Path("other"),
            live_reload_enabled=False,
        )

        assert result.server.host == "127.0.0.1"
        assert result.server.port == 9000
        assert result.docs.source_dir == Path("other")
        assert result.live_reload.enabled is False

    def test__overrides__leave_original_unchanged(self, config: Config) -> None:
        """Return a new config without modifying the original."""
        config.with_overrides(host="0.0.0.0")

        assert config.server.host == "127.0.0.1"

    def test__no_overrides__returns_equal_config(self, config: Config) -> None:
        """Return an equal config when nothing is overridden."""
        assert config.with_overrides() == config
