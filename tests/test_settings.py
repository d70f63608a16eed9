import pytest
from pydantic import ValidationError

from brand_admin.settings import Settings, get_settings, reload_settings
from brand_admin.settings.server import ServerConfig
from brand_admin.settings.upstream import UpstreamConfig


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep a developer's .env or config.toml out of these tests."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "BRAND_ADMIN_UPSTREAM__BASE_URL",
        "BRAND_ADMIN_LOG_LEVEL",
        "BRAND_ADMIN_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_defaults():
    settings = Settings()

    assert settings.UPSTREAM.BASE_URL == "http://localhost:5000"
    assert settings.UPSTREAM.INCLUDE_ERROR_DETAILS is True
    assert settings.SERVER.CORS_ALLOW_ORIGIN == "*"
    assert settings.SERVER.CORS_ALLOW_HEADERS == ["Content-Type", "Authorization"]


def test_toml_file_is_read(isolated_cwd):
    (isolated_cwd / "config.toml").write_text(
        '[upstream]\nbase_url = "http://toml.example/"\n\n[client]\npage_size = 25\n'
    )

    settings = Settings()

    assert settings.UPSTREAM.BASE_URL == "http://toml.example"
    assert settings.CLIENT.PAGE_SIZE == 25


def test_config_file_location_from_environment(isolated_cwd, monkeypatch):
    config = isolated_cwd / "conf" / "admin.toml"
    config.parent.mkdir()
    config.write_text("log_level = \"WARNING\"\n")
    monkeypatch.setenv("BRAND_ADMIN_CONFIG_FILE", str(config))

    assert Settings().LOG_LEVEL == "WARNING"


def test_environment_overrides_toml(isolated_cwd, monkeypatch):
    (isolated_cwd / "config.toml").write_text('[upstream]\nbase_url = "http://toml.example"\n')
    monkeypatch.setenv("BRAND_ADMIN_UPSTREAM__BASE_URL", "http://env.example")

    assert Settings().UPSTREAM.BASE_URL == "http://env.example"


def test_cors_headers_accept_comma_separated_string():
    config = ServerConfig(CORS_ALLOW_HEADERS="Content-Type, X-Api-Key")

    assert config.CORS_ALLOW_HEADERS == ["Content-Type", "X-Api-Key"]


@pytest.mark.parametrize("timeout", [0, -1.5])
def test_upstream_timeout_must_be_positive(timeout):
    with pytest.raises(ValidationError):
        UpstreamConfig(TIMEOUT=timeout)


def test_invalid_port_rejected():
    with pytest.raises(ValidationError):
        ServerConfig(PORT=70000)


def test_reload_settings_rebuilds_global(monkeypatch):
    monkeypatch.setenv("BRAND_ADMIN_LOG_LEVEL", "DEBUG")
    try:
        assert reload_settings().LOG_LEVEL == "DEBUG"
        assert get_settings().LOG_LEVEL == "DEBUG"
    finally:
        monkeypatch.delenv("BRAND_ADMIN_LOG_LEVEL")
        reload_settings()
