"""
Tests for configuration loading and validation.
"""

from pastebin_api.config import Config, PastebinConfig, create_default_config, load_config


class TestLoadConfig:
    """Test YAML loading with environment overrides."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent.yaml")

        assert config.pastebin.api_key == ""
        assert config.pastebin.domain == "pastebin.com"
        assert config.pastebin.timeout_seconds == 30
        assert config.account.user_key is None
        assert config.defaults.format == "javascript"
        assert config.defaults.publicity == 0
        assert config.defaults.expire_date == "N"

    def test_values_from_file(self, config_file):
        config = load_config(config_file)

        assert config.pastebin.api_key == "test-dev-key-12345"
        assert config.pastebin.timeout_seconds == 5
        assert config.account.user_key == "test-user-key-67890"
        assert config.account.has_credentials()

    def test_env_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("PASTEBIN_API_KEY", "env-key")
        monkeypatch.setenv("PASTEBIN_DOMAIN", "proxy.test")
        monkeypatch.setenv("PASTEBIN_TIMEOUT", "12.5")
        monkeypatch.setenv("PASTEBIN_USERNAME", "alice")
        monkeypatch.setenv("PASTEBIN_PASSWORD", "secret")

        config = load_config(config_file)

        assert config.pastebin.api_key == "env-key"
        assert config.pastebin.domain == "proxy.test"
        assert config.pastebin.timeout_seconds == 12.5
        assert config.account.username == "alice"
        assert config.account.password == "secret"

    def test_malformed_timeout_env_ignored(self, config_file, monkeypatch):
        monkeypatch.setenv("PASTEBIN_TIMEOUT", "soon")

        config = load_config(config_file)

        assert config.pastebin.timeout_seconds == 5

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(path).pastebin.domain == "pastebin.com"


class TestConfigValidation:
    """Test Config.validate."""

    def test_valid(self, config_file):
        assert load_config(config_file).validate() == []

    def test_missing_api_key(self):
        errors = Config().validate()

        assert "pastebin.api_key is required" in errors

    def test_bad_timeout_and_defaults(self):
        config = Config(pastebin=PastebinConfig(api_key="k", timeout_seconds=0))
        config.defaults.format = "klingon"
        config.defaults.publicity = 5
        config.defaults.expire_date = "3D"

        errors = config.validate()

        assert len(errors) == 4
        assert any("timeout_seconds" in e for e in errors)
        assert any("klingon" in e for e in errors)
        assert any("publicity" in e for e in errors)
        assert any("3D" in e for e in errors)


class TestDefaultConfig:
    """Test the generated config template."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "pastebin.yaml"

        create_default_config(path)
        config = load_config(path)

        assert path.exists()
        assert config.pastebin.api_key == "YOUR_API_DEV_KEY"
        assert config.account.user_key is None
        assert config.validate() == []


class TestTimeoutValues:
    """Test timeout values that YAML hands back as strings."""

    def _write(self, tmp_path, timeout: str):
        path = tmp_path / "pastebin.yaml"
        path.write_text(f'pastebin:\n  api_key: "k"\n  timeout_seconds: {timeout}\n')
        return path

    def test_quoted_number_converted(self, tmp_path):
        config = load_config(self._write(tmp_path, '"30"'))

        assert config.pastebin.timeout_seconds == 30.0
        assert config.validate() == []

    def test_non_numeric_reported(self, tmp_path):
        config = load_config(self._write(tmp_path, '"forever"'))

        errors = config.validate()

        assert errors == ["pastebin.timeout_seconds must be a number, got 'forever'"]
