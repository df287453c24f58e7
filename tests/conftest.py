"""Pytest configuration and fixtures."""
import pytest

from wanderer_conf.bootstrapper import ConfigBootstrapper
from wanderer_conf.config import get_settings

SAMPLE_CONFIG = (
    b"# Sample configuration\n"
    b"WEB_APP_URL=http://localhost:8000\n"
    b"SECRET_KEY_BASE=changeme\n"
    b"DATABASE_URL=ecto://postgres:postgres@db:5432/postgres\n"
    b"CLOAK_KEY=changeme\n"
    b"EVE_CLIENT_ID=\n"
)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def template_path(tmp_path):
    path = tmp_path / "wanderer-conf.env.sample"
    path.write_bytes(SAMPLE_CONFIG)
    return path


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "wanderer-conf.env"


@pytest.fixture
def bootstrapper(template_path, config_path) -> ConfigBootstrapper:
    return ConfigBootstrapper(template_path=template_path, config_path=config_path)


@pytest.fixture
def initialized(bootstrapper: ConfigBootstrapper) -> ConfigBootstrapper:
    """Bootstrapper whose config file has already been copied from the template."""
    bootstrapper.initialize_config()
    return bootstrapper
