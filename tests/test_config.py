import pytest

from shopify_mcp.config import ClientConfig, Settings, load_local_secrets
from shopify_mcp.errors import ConfigurationError


def test_client_config_from_mapping(credentials):
    config = ClientConfig.from_env(credentials)
    assert config.access_token == "shpat_test"
    assert config.api_url.endswith("graphql.json")
    assert config.is_configured()


def test_client_config_names_the_missing_variable():
    with pytest.raises(ConfigurationError, match="SHOPIFY_ACCESS_TOKEN"):
        ClientConfig.from_env({})


def test_settings_defaults():
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.transport == "requests"
    assert settings.max_workers == 8
    assert settings.metrics_port is None


def test_settings_from_env():
    settings = Settings.from_env({
        "LOG_LEVEL": "debug",
        "SHOPIFY_TRANSPORT": " CURL ",
        "MCP_MAX_WORKERS": "2",
        "METRICS_ENABLED": "off",
        "METRICS_PORT": "9100",
    })
    assert settings.log_level == "DEBUG"
    assert settings.transport == "curl"
    assert settings.max_workers == 2
    assert settings.metrics_enabled is False
    assert settings.metrics_port == 9100


def test_settings_bad_worker_count_falls_back(caplog):
    assert Settings.from_env({"MCP_MAX_WORKERS": "many"}).max_workers == 8
    assert "MCP_MAX_WORKERS" in caplog.text
    assert Settings.from_env({"MCP_MAX_WORKERS": "0"}).max_workers == 1


def test_load_local_secrets_does_not_override(tmp_path):
    secrets = tmp_path / ".env.local"
    secrets.write_text(
        "# comment\nSHOPIFY_ACCESS_TOKEN=from-file\nSHOPIFY_STORE_URL = shop.example\nnot a pair\n",
        encoding="utf-8",
    )
    env = {"SHOPIFY_ACCESS_TOKEN": "already-set"}
    assert load_local_secrets(secrets, env) == 1
    assert env == {"SHOPIFY_ACCESS_TOKEN": "already-set", "SHOPIFY_STORE_URL": "shop.example"}


def test_load_local_secrets_missing_file(tmp_path):
    assert load_local_secrets(tmp_path / "nope", {}) == 0
