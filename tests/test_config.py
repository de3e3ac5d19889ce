"""Tests for configuration loading and merging."""

import pytest

from users_api.config import ServerConfig, load_config
from users_api.exceptions import ConfigurationError, InvalidConfigError


class TestServerConfig:
    def test_defaults(self):
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 3000
        assert config.seed is True
        assert config.verbosity == "normal"
        assert config.log_file is None
        assert config.url == "http://127.0.0.1:3000"

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_range(self, port):
        with pytest.raises(InvalidConfigError, match="port"):
            ServerConfig(port=port)

    def test_empty_host(self):
        with pytest.raises(InvalidConfigError, match="host"):
            ServerConfig(host="")

    def test_bad_verbosity(self):
        with pytest.raises(InvalidConfigError, match="verbosity"):
            ServerConfig(verbosity="loud")


class TestLoadConfig:
    def test_defaults(self, isolated_config):
        assert load_config() == ServerConfig()

    def test_overrides(self, isolated_config):
        config = load_config(port=8080, host="0.0.0.0")
        assert config.port == 8080
        assert config.host == "0.0.0.0"

    def test_none_overrides_skipped(self, isolated_config):
        assert load_config(port=None).port == 3000

    def test_verbose_flag(self, isolated_config):
        assert load_config(verbose=True).verbosity == "verbose"

    def test_quiet_flag(self, isolated_config):
        assert load_config(quiet=True).verbosity == "quiet"

    def test_project_file(self, isolated_config):
        (isolated_config / "work" / "users-api.toml").write_text("port = 4000\nseed = false\n")
        config = load_config()
        assert config.port == 4000
        assert config.seed is False

    def test_global_file_below_project_file(self, isolated_config):
        (isolated_config / "home" / ".users-api.toml").write_text('port = 4000\nhost = "0.0.0.0"\n')
        (isolated_config / "work" / "users-api.toml").write_text("port = 5000\n")
        config = load_config()
        assert config.port == 5000
        assert config.host == "0.0.0.0"

    def test_explicit_file(self, isolated_config):
        path = isolated_config / "custom.toml"
        path.write_text('verbosity = "verbose"\n')
        assert load_config(config_file=path).verbosity == "verbose"

    def test_explicit_file_missing(self, isolated_config):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(config_file=isolated_config / "missing.toml")

    def test_malformed_file(self, isolated_config):
        path = isolated_config / "bad.toml"
        path.write_text("port = = 1\n")
        with pytest.raises(ConfigurationError, match="Invalid config file"):
            load_config(config_file=path)

    def test_unknown_key(self, isolated_config):
        path = isolated_config / "extra.toml"
        path.write_text('database = "postgres"\n')
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(config_file=path)

    def test_env_vars(self, isolated_config, monkeypatch):
        monkeypatch.setenv("USERS_API_PORT", "9000")
        monkeypatch.setenv("USERS_API_SEED", "no")
        monkeypatch.setenv("USERS_API_LOG_FILE", "/tmp/users.log")
        config = load_config()
        assert config.port == 9000
        assert config.seed is False
        assert config.log_file == "/tmp/users.log"

    def test_env_beats_file_cli_beats_env(self, isolated_config, monkeypatch):
        (isolated_config / "work" / "users-api.toml").write_text("port = 4000\n")
        monkeypatch.setenv("USERS_API_PORT", "9000")
        assert load_config().port == 9000
        assert load_config(port=7000).port == 7000

    def test_bad_env_bool(self, isolated_config, monkeypatch):
        monkeypatch.setenv("USERS_API_SEED", "maybe")
        with pytest.raises(ConfigurationError, match="USERS_API_SEED"):
            load_config()

    def test_bad_env_int(self, isolated_config, monkeypatch):
        monkeypatch.setenv("USERS_API_PORT", "eighty")
        with pytest.raises(ConfigurationError, match="USERS_API_PORT"):
            load_config()
